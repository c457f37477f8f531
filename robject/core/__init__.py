# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .definition import Definition
from .factory import TypeFactory, define, register_initializer
from .initializers import extends_initializer, init_core, mixins_initializer
from .members import MemberTable
from .registry import Initializer, InitializerRegistry, default_registry
from .rtype import RObject, RType, type_of

__all__ = (
    "Definition",
    "Initializer",
    "InitializerRegistry",
    "MemberTable",
    "RObject",
    "RType",
    "TypeFactory",
    "default_registry",
    "define",
    "extends_initializer",
    "init_core",
    "mixins_initializer",
    "register_initializer",
    "type_of",
)
