# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from urllib.parse import quote, unquote

from pydantic import BaseModel, PrivateAttr
from typing_extensions import Self

from ..config import settings

__all__ = ("Session",)

logger = logging.getLogger(__name__)


class Session(BaseModel):
    """Key/value store that lives as long as its backing string.

    Entries are serialized into ``raw`` as ``key=value`` pairs joined by
    ``|`` with both sides percent-escaped. The backing string is parsed
    lazily on first access and rewritten only when a value changes.
    """

    raw: str = ""

    _data: dict[str, str] = PrivateAttr(default_factory=dict)
    _initialized: bool = PrivateAttr(default=False)

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def data(self) -> dict[str, str]:
        if not self._initialized:
            self.init()
        return dict(self._data)

    def init(self) -> Self:
        for pair in self.raw.split(settings.SESSION_SEPARATOR):
            if not pair:
                continue
            key, _, value = pair.partition(settings.SESSION_ASSIGN)
            self._data[unquote(key)] = unquote(value)

        self._initialized = True
        return self

    def set(self, key: str, value: str) -> Self:
        """Store ``value`` under ``key``; both are stored as strings."""
        if not self._initialized:
            self.init()

        key, value = str(key), str(value)
        if self._data.get(key) != value:
            self._data[key] = value
            self.raw = settings.SESSION_SEPARATOR.join(
                f"{quote(k, safe='')}{settings.SESSION_ASSIGN}{quote(v, safe='')}"
                for k, v in self._data.items()
            )
            logger.debug("Session key %r updated", key)

        return self

    def get(self, key: str) -> str:
        if not self._initialized:
            self.init()

        return self._data.get(str(key)) or ""
