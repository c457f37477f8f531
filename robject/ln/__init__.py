# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from ._namespace import ROOT_NAMESPACE, namespace
from ._sentinel import (
    SingletonType,
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_sentinel,
)
from ._session import Session
from ._utils import bind, each, invoke, synchronized, to_list

__all__ = (
    "ROOT_NAMESPACE",
    "Session",
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "bind",
    "each",
    "invoke",
    "is_sentinel",
    "namespace",
    "synchronized",
    "to_list",
)
