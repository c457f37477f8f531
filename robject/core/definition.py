# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from .._errors import ValidationError
from ..ln import Undefined, to_list
from .rtype import RType

__all__ = ("Definition",)


class Definition(BaseModel):
    """Declarative description of a type to produce.

    ``constructor``, ``extends`` and ``mixins`` are the reserved slots
    consumed by the core initializers; every other key of the source
    mapping lands in ``members``. Validation is structural only unless
    ``strict`` is passed in the validation context.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
    )

    RESERVED: ClassVar[frozenset[str]] = frozenset(
        {"constructor", "extends", "mixins"}
    )

    constructor: Callable[..., Any] | None = None
    extends: Any = None
    mixins: tuple[Mapping[Any, Any], ...] = ()
    members: dict[Any, Any] = Field(default_factory=dict)
    name: str | None = None

    @field_validator("extends", mode="after")
    @classmethod
    def _validate_extends(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or not _is_strict(info):
            return v
        if not isinstance(v, RType):
            raise ValidationError.from_value(
                v,
                expected="a type produced by define()",
                message="'extends' must reference a produced type",
            )
        return v

    @field_validator("mixins", mode="before")
    @classmethod
    def _validate_mixins(cls, v: Any, info: ValidationInfo) -> Any:
        items = tuple(to_list(v))
        if _is_strict(info):
            for i, item in enumerate(items):
                if not isinstance(item, Mapping):
                    raise ValidationError.from_value(
                        item,
                        expected="a mapping of members",
                        message=f"Mixin at position {i} is not a mapping",
                    )
                _check_member_names(item, f"mixin at position {i}")
        return tuple(item for item in items if isinstance(item, Mapping))

    @field_validator("members", mode="after")
    @classmethod
    def _validate_members(cls, v: Any, info: ValidationInfo) -> Any:
        if _is_strict(info):
            _check_member_names(v, "definition")
        return v

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        /,
        *,
        name: str | None = None,
        strict: bool = False,
    ) -> Definition:
        """Split a flat member mapping into reserved slots and members."""
        data: dict[str, Any] = {"members": {}, "name": name}
        for key, value in mapping.items():
            if key in cls.RESERVED:
                data[key] = value
            else:
                data["members"][key] = value
        return cls.model_validate(data, context={"strict": strict})

    def get(self, key: str, default: Any = Undefined) -> Any:
        """Read a reserved slot or, failing that, a member by key."""
        if key in self.RESERVED:
            return getattr(self, key)
        return self.members.get(key, default)


def _is_strict(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("strict"))


def _check_member_names(members: Mapping[Any, Any], source: str) -> None:
    for key in members:
        if not isinstance(key, str):
            raise ValidationError.from_value(
                key,
                expected="a member name (str)",
                message=f"Non-string member name in {source}",
            )
