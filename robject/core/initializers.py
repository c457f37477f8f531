# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Core pipeline steps: inheritance linkage and member merging."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..ln import is_sentinel
from .definition import Definition
from .members import MemberTable
from .registry import InitializerRegistry, default_registry
from .rtype import RType

__all__ = (
    "EXTENDS",
    "MIXINS",
    "extends_initializer",
    "init_core",
    "mixins_initializer",
)

logger = logging.getLogger(__name__)

EXTENDS = "extends"
MIXINS = "mixins"


def extends_initializer(rtype: RType, definition: Definition) -> None:
    """Chain the new type's member table to its parent's.

    The parent's constructor never runs and no parent instance is made;
    only the table link and the ``super_class`` back-reference are set.
    """
    parent = definition.extends
    if parent is None or is_sentinel(parent):
        return

    if not isinstance(parent, RType):
        logger.warning(
            "Type '%s' extends a %s, not a produced type; linking mechanically",
            rtype.name,
            type(parent).__name__,
        )

    rtype.super_class = parent
    members = getattr(parent, "members", None)
    rtype.members.link(members if isinstance(members, MemberTable) else None)


def mixins_initializer(rtype: RType, definition: Definition) -> None:
    """Merge own members, then each mixin in order, into the member table.

    Later sources overwrite earlier ones, so mixins override the type's own
    members. Reserved and non-string names are skipped at every step. ``constructor`` is
    set to the type itself last.
    """
    reserved = rtype.reserved | Definition.RESERVED

    sources: list[Mapping[str, Any]] = [definition.members, *definition.mixins]
    for source in sources:
        for key, value in source.items():
            if not isinstance(key, str) or key in reserved:
                continue
            rtype.members.set(key, value)

    rtype.members.set("constructor", rtype)


def init_core(registry: InitializerRegistry | None = None) -> None:
    """Register the core initializers, extends strictly before mixins.

    Safe to call more than once; re-registration keeps positions.
    """
    if registry is None:
        registry = default_registry
    registry.register(EXTENDS, extends_initializer)
    registry.register(MIXINS, mixins_initializer)
