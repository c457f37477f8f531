# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from types import FunctionType, MethodType
from typing import Any

from .._errors import MemberNotFoundError
from ..ln import bind
from .members import MemberTable

__all__ = (
    "RObject",
    "RType",
    "type_of",
)


def _default_constructor(self, *args: Any, **kwargs: Any) -> None:
    pass


class RType:
    """A produced type: a constructor bound to one member table.

    Calling the type creates an :class:`RObject`, runs ``constructor`` on
    it with the call arguments and returns it. ``super_class`` points at
    the parent type, if any; the member table holds its own parent link
    for resolution, so the two are tracked separately.

    ``isinstance(obj, rtype)`` is answered from the member table chain of
    the object's type.
    """

    def __init__(
        self,
        name: str,
        constructor: Callable[..., Any] | None = None,
    ):
        self.name = name
        self.constructor = constructor or _default_constructor
        self.members = MemberTable(owner=self)
        self.super_class: Any = None
        self.reserved: frozenset[str] = frozenset()

    @property
    def __name__(self) -> str:
        return self.name

    @property
    def frozen(self) -> bool:
        return self.members.frozen

    def __call__(self, *args: Any, **kwargs: Any) -> RObject:
        instance = RObject.__new__(RObject)
        object.__setattr__(instance, "__rtype__", self)
        self.initialize(instance, *args, **kwargs)
        return instance

    def initialize(self, instance: Any, /, *args: Any, **kwargs: Any) -> None:
        """Run this type's constructor on an existing instance.

        This is how a child constructor delegates to its parent, e.g.
        ``Parent.initialize(self, name)``.
        """
        self.constructor(instance, *args, **kwargs)

    def super_member(self, name: str, receiver: Any, /, *args: Any) -> Any:
        """Return the parent's version of ``name``, bound to ``receiver``.

        Functions are bound with any extra leading ``args``; data members
        are returned as they are.

        Raises:
            MemberNotFoundError: If there is no parent or it lacks ``name``.
        """
        if self.super_class is None:
            raise MemberNotFoundError(
                f"Type '{self.name}' has no parent to resolve '{name}'",
                details={"member": name},
            )
        parent_members = getattr(self.super_class, "members", None)
        if not isinstance(parent_members, MemberTable):
            raise MemberNotFoundError(
                f"Parent of type '{self.name}' has no member table",
                details={"member": name},
            )
        value = parent_members.lookup(name)
        if isinstance(value, FunctionType):
            return bind(value, receiver, *args)
        return value

    def mro(self) -> list[RType]:
        """This type followed by its ancestors, nearest first."""
        out = []
        rtype: RType | None = self
        while rtype is not None:
            out.append(rtype)
            rtype = getattr(rtype, "super_class", None)
        return out

    def is_subtype(self, other: RType) -> bool:
        return any(t is other.members for t in self.members.chain())

    def __instancecheck__(self, obj: Any) -> bool:
        rtype = type_of(obj)
        return rtype is not None and rtype.is_subtype(self)

    def __repr__(self) -> str:
        if self.super_class is not None:
            parent = getattr(self.super_class, "name", self.super_class)
            return f"<RType '{self.name}' extends '{parent}'>"
        return f"<RType '{self.name}'>"


class RObject:
    """Instance of an :class:`RType`.

    Attributes resolve against the instance's own fields first, then
    against its type's member table chain. Functions found in the table
    are bound to the instance. Dunder names never go through the table.
    """

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)

        rtype: RType = object.__getattribute__(self, "__rtype__")
        try:
            value = rtype.members.lookup(name)
        except MemberNotFoundError as e:
            raise AttributeError(
                f"'{rtype.name}' object has no member '{name}'"
            ) from e

        if isinstance(value, FunctionType):
            return MethodType(value, self)
        return value

    def __dir__(self) -> list[str]:
        rtype = type_of(self)
        names = set(self.__dict__) - {"__rtype__"}
        if rtype is not None:
            names.update(rtype.members)
        return sorted(names)

    def __repr__(self) -> str:
        rtype = type_of(self)
        return f"<{rtype.name if rtype else 'RObject'} object>"


def type_of(obj: Any) -> RType | None:
    """The exact type an instance was created by, or None."""
    if isinstance(obj, RObject):
        return obj.__dict__.get("__rtype__")
    return None
