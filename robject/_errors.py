# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar


class RObjectError(Exception):
    default_message: ClassVar[str] = "RObject error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ValidationError(RObjectError):
    """Exception raised when a definition is rejected in strict mode."""

    default_message = "Validation failed"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class MemberNotFoundError(RObjectError):
    default_message = "Member not found"
    __slots__ = ()


class FrozenTypeError(RObjectError):
    default_message = "Type is frozen"
    __slots__ = ()


class InitializerError(RObjectError):
    default_message = "Initializer failed"
    __slots__ = ()


__all__ = (
    "RObjectError",
    "ValidationError",
    "MemberNotFoundError",
    "FrozenTypeError",
    "InitializerError",
)
