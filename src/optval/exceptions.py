"""Exceptions raised by optval."""

from __future__ import annotations

__all__ = ["EmptyAccessError", "OptvalError"]


class OptvalError(Exception):
    """Base exception for optval errors."""


class EmptyAccessError(OptvalError, LookupError):
    """Raised when the payload of an empty container is read."""

    def __init__(self, message: str = "OptionalValue has no value") -> None:
        super().__init__(message)
