# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging

from . import ln as ln
from ._errors import (
    FrozenTypeError,
    InitializerError,
    MemberNotFoundError,
    RObjectError,
    ValidationError,
)
from .config import settings
from .core import (
    Definition,
    InitializerRegistry,
    MemberTable,
    RObject,
    RType,
    TypeFactory,
    default_registry,
    define,
    init_core,
    register_initializer,
    type_of,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

init_core()

__all__ = (
    "__version__",
    "Definition",
    "FrozenTypeError",
    "InitializerError",
    "InitializerRegistry",
    "MemberNotFoundError",
    "MemberTable",
    "RObject",
    "RObjectError",
    "RType",
    "TypeFactory",
    "ValidationError",
    "default_registry",
    "define",
    "init_core",
    "ln",
    "logger",
    "register_initializer",
    "settings",
    "type_of",
)
