# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal

__all__ = (
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "is_sentinel",
)


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for falsy singleton markers that survive copying."""

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    def __reduce__(self):
        return (type(self), ())

    def __bool__(self) -> bool:
        return False


class UndefinedType(SingletonType):
    """Marks a member or definition key that does not exist at all.

    Example:
        >>> table.get("missing", Undefined) is Undefined
        True
    """

    __slots__ = ()

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"


class UnsetType(SingletonType):
    """Marks a definition slot that exists but was left empty."""

    __slots__ = ()

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"


Undefined: Final[UndefinedType] = UndefinedType()
Unset: Final[UnsetType] = UnsetType()


def is_sentinel(value: Any) -> bool:
    return value is Undefined or value is Unset
