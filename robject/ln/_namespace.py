# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from types import SimpleNamespace
from typing import Any

__all__ = ("ROOT_NAMESPACE", "namespace")

ROOT_NAMESPACE = SimpleNamespace()
"""Process-wide root that dotted namespaces hang off by default."""


def namespace(path: str, /, root: Any = None) -> Any:
    """Resolve a dotted path to nested namespaces, creating missing parts.

    Existing parts are reused, so two calls sharing a prefix share the
    same objects. Returns the last part.

    Example:
        >>> ns = namespace("app.models")
        >>> ns is namespace("app.models")
        True
    """
    result = ROOT_NAMESPACE if root is None else root
    for part in path.split("."):
        if not part:
            raise ValueError(f"Invalid namespace path: {path!r}")
        existing = getattr(result, part, None)
        if existing is None:
            existing = SimpleNamespace()
            setattr(result, part, existing)
        result = existing
    return result
