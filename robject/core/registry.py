# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from ..ln import synchronized

if TYPE_CHECKING:
    from .definition import Definition
    from .rtype import RType

__all__ = (
    "Initializer",
    "InitializerRegistry",
    "default_registry",
)

logger = logging.getLogger(__name__)

Initializer: TypeAlias = "Callable[[RType, Definition], None]"


class InitializerRegistry:
    """Ordered mapping of initializer name to initializer function.

    Names double as definition keys: an initializer registered as
    ``"extends"`` handles the ``extends`` slot of a definition, and every
    registered name is kept out of produced member tables.

    Entries are only ever added or replaced in place, never removed, so
    the registration order is the pipeline order.
    """

    def __init__(self) -> None:
        self._initializers: dict[str, Callable[..., Any]] = {}
        self._lock = threading.RLock()

    @synchronized
    def register(self, name: str, fn: Callable[..., Any]) -> None:
        if not callable(fn):
            raise TypeError(
                f"Initializer '{name}' must be callable, got {type(fn).__name__}"
            )
        replaced = name in self._initializers
        self._initializers[name] = fn
        logger.debug(
            "%s initializer '%s'", "Replaced" if replaced else "Registered", name
        )

    @synchronized
    def names(self) -> tuple[str, ...]:
        return tuple(self._initializers)

    @synchronized
    def snapshot(self) -> tuple[tuple[str, Callable[..., Any]], ...]:
        """Ordered ``(name, fn)`` pairs frozen at the time of the call."""
        return tuple(self._initializers.items())

    def get(self, name: str) -> Callable[..., Any] | None:
        return self._initializers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._initializers

    def __len__(self) -> int:
        return len(self._initializers)

    def __repr__(self) -> str:
        return f"InitializerRegistry({list(self._initializers)})"


# A single process-wide registry, populated by ``init_core()``.
default_registry = InitializerRegistry()
