# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable, Iterable, Mapping
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from ._sentinel import SingletonType

P = ParamSpec("P")
R = TypeVar("R")

__all__ = (
    "bind",
    "each",
    "invoke",
    "synchronized",
    "to_list",
)

_BYTE_LIKE_TYPES = (str, bytes, bytearray)
_SKIP_TYPES = (*_BYTE_LIKE_TYPES, Mapping)


def to_list(
    input_: Any,
    /,
    *,
    flatten: bool = False,
    dropna: bool = False,
) -> list:
    """Convert an array-like value to a plain list.

    Strings, bytes and mappings count as single items. ``None`` and
    sentinels produce an empty list.

    Args:
        input_: Value to convert.
        flatten: If True, recursively flatten nested iterables.
        dropna: If True, remove None and sentinel items.
    """

    def _process(lst: Iterable[Any]) -> list[Any]:
        result = []
        for item in lst:
            if dropna and (item is None or isinstance(item, SingletonType)):
                continue
            if (
                flatten
                and isinstance(item, Iterable)
                and not isinstance(item, _SKIP_TYPES)
            ):
                result.extend(_process(item))
            else:
                result.append(item)
        return result

    if input_ is None or isinstance(input_, SingletonType):
        return []
    if isinstance(input_, _SKIP_TYPES) or not isinstance(input_, Iterable):
        return [input_]
    if not (flatten or dropna):
        return list(input_)
    return _process(input_)


def each(
    obj: Any,
    callback: Callable[..., Any],
    context: Any = None,
) -> None:
    """Apply ``callback`` to every entry of a mapping or item of a sequence.

    Mappings are visited as ``callback(value, key)``, anything else as
    ``callback(item, index)``. When ``context`` is given it is passed as
    the leading receiver argument.
    """
    if isinstance(obj, Mapping):
        pairs = obj.items()
    else:
        pairs = ((i, v) for i, v in enumerate(to_list(obj)))

    for key, value in pairs:
        if context is None:
            callback(value, key)
        else:
            callback(context, value, key)


def invoke(items: Any, method: str, /, *args: Any, **kwargs: Any) -> list:
    """Call ``method`` on every item that provides it.

    Returns one result per item, ``None`` where the item lacks the method.
    """
    out = []
    for obj in to_list(items):
        func = getattr(obj, method, None)
        out.append(func(*args, **kwargs) if callable(func) else None)
    return out


def bind(
    func: Callable[..., R], context: Any = None, /, *args: Any
) -> Callable[..., R]:
    """Fix the receiver and leading arguments of ``func``.

    The receiver, when not None, is passed as the first positional
    argument, followed by the bound arguments and then the call arguments.
    """
    leading = args if context is None else (context, *args)

    @wraps(func)
    def wrapper(*call_args: Any, **kwargs: Any) -> R:
        return func(*leading, *call_args, **kwargs)

    return wrapper


def synchronized(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator for thread-safe method execution.

    Requires decorated method's instance to have ``self._lock``
    (``threading.Lock``).
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        self = args[0]
        with self._lock:
            return func(*args, **kwargs)

    return wrapper
