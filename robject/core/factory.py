# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .._errors import InitializerError
from ..config import settings
from .definition import Definition
from .registry import InitializerRegistry, default_registry
from .rtype import RType

__all__ = (
    "TypeFactory",
    "define",
    "register_initializer",
)

logger = logging.getLogger(__name__)


class TypeFactory:
    """Assembles types by running definitions through an initializer registry.

    Args:
        registry: Pipeline to run. Defaults to the process-wide registry.
        strict: Reject malformed ``extends`` and mixins. Defaults to
            ``settings.STRICT_DEFINITIONS``.
    """

    def __init__(
        self,
        registry: InitializerRegistry | None = None,
        *,
        strict: bool | None = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.strict = (
            settings.STRICT_DEFINITIONS if strict is None else strict
        )

    def define(
        self,
        definition: Definition | Mapping[str, Any],
        /,
        *,
        name: str | None = None,
    ) -> RType:
        if not isinstance(definition, Definition):
            definition = Definition.from_mapping(
                definition, name=name, strict=self.strict
            )

        pipeline = self.registry.snapshot()
        rtype = RType(
            name or definition.name or settings.DEFAULT_TYPE_NAME,
            definition.constructor,
        )
        rtype.reserved = frozenset(n for n, _ in pipeline)

        for init_name, initializer in pipeline:
            try:
                initializer(rtype, definition)
            except Exception as e:
                raise InitializerError(
                    f"Initializer '{init_name}' failed for type '{rtype.name}'",
                    details={"initializer": init_name, "type": rtype.name},
                    cause=e,
                ) from e

        rtype.members.freeze()
        logger.debug(
            "Defined %r through %d initializer(s)", rtype, len(pipeline)
        )
        return rtype


def define(
    definition: Definition | Mapping[str, Any],
    /,
    *,
    name: str | None = None,
) -> RType:
    """Produce a type from ``definition`` using the default registry."""
    return TypeFactory().define(definition, name=name)


def register_initializer(name: str, fn: Callable[..., Any]) -> None:
    """Append ``fn`` to the default pipeline under ``name``.

    Only types defined after this call observe the new step.
    """
    default_registry.register(name, fn)
