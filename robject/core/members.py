# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .._errors import FrozenTypeError, MemberNotFoundError
from ..ln import Undefined

__all__ = ("MemberTable",)


class MemberTable:
    """Named members of one type, chained to the table of its parent.

    Resolution walks the chain from this table upward and the nearest
    table that owns a name wins. A table is writable only while its type
    is being assembled; :meth:`freeze` closes it for good.
    """

    __slots__ = ("_members", "_frozen", "owner", "parent")

    def __init__(self, owner: Any = None, parent: MemberTable | None = None):
        self._members: dict[str, Any] = {}
        self._frozen = False
        self.owner = owner
        self.parent = parent

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _check_writable(self, name: str) -> None:
        if self._frozen:
            raise FrozenTypeError(
                f"Cannot modify member '{name}' of a finished type",
                details={"member": name, "owner": repr(self.owner)},
            )

    def set(self, name: str, value: Any) -> None:
        self._check_writable(name)
        self._members[name] = value

    def link(self, parent: MemberTable | None) -> None:
        """Chain this table to ``parent`` for resolution."""
        self._check_writable("<parent>")
        self.parent = parent

    def chain(self) -> Iterator[MemberTable]:
        """Yield this table, then every ancestor table in order."""
        table = self
        while table is not None:
            yield table
            table = table.parent

    def lookup(self, name: str) -> Any:
        for table in self.chain():
            if name in table._members:
                return table._members[name]
        raise MemberNotFoundError(
            f"Member '{name}' not found",
            details={"member": name, "owner": repr(self.owner)},
        )

    def get(self, name: str, default: Any = Undefined) -> Any:
        try:
            return self.lookup(name)
        except MemberNotFoundError:
            return default

    def owns(self, name: str) -> bool:
        return name in self._members

    def own(self) -> dict[str, Any]:
        """Copy of the members set directly on this table."""
        return dict(self._members)

    def resolved(self) -> dict[str, Any]:
        """Flattened view of the whole chain, nearest table winning."""
        out: dict[str, Any] = {}
        for table in self.chain():
            for k, v in table._members.items():
                out.setdefault(k, v)
        return out

    def __contains__(self, name: object) -> bool:
        return any(name in table._members for table in self.chain())

    def __iter__(self) -> Iterator[str]:
        return iter(self.resolved())

    def __len__(self) -> int:
        return len(self.resolved())

    def __repr__(self) -> str:
        return f"MemberTable(owner={self.owner!r}, members={sorted(self._members)})"
