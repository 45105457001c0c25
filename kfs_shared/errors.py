"""Error taxonomy for KFS addressing and the storage-engine "not found" seam."""

from __future__ import annotations

from typing import Any, Mapping

from .constants import NOT_FOUND_MARKER


class AddressingError(ValueError):
    """Base class for every validation failure raised by the derivers."""


class InvalidArgumentError(AddressingError):
    """Raised when a deriver receives a value of the wrong type or shape."""


class IndexOutOfBoundsError(AddressingError):
    """Raised when an index does not fit the configured field width."""


class InvalidLengthError(AddressingError):
    """Raised when a reference identifier has the wrong hex length."""


class CapacityConfigError(AddressingError):
    """Raised when a capacity configuration is inconsistent."""


class NotFoundError(KeyError):
    """Typed "key absent" error raised by storage engines built on KFS names.

    The message always carries ``NOT_FOUND_MARKER`` so that code which only
    sees the rendered message can still classify it.
    """

    def __init__(self, key: str, detail: str | None = None):
        self.key = key
        self.message = f"{NOT_FOUND_MARKER} {detail or key}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def is_not_found_error(error: Any) -> bool:
    """Return True when ``error`` signals an absent key.

    Args:
        error: Exception, mapping with a ``message`` entry, any object with a
            ``message`` attribute, or ``None``.

    Returns:
        bool: True for ``NotFoundError`` instances and for messages that
        contain the engine's not-found marker; False for anything else.
    """
    if error is None:
        return False
    if isinstance(error, NotFoundError):
        return True

    message = _error_message(error)
    return isinstance(message, str) and NOT_FOUND_MARKER in message


def _error_message(error: Any) -> str | None:
    """Extract a message string from the shapes storage engines report."""
    if isinstance(error, Mapping):
        message = error.get("message")
        return message if isinstance(message, str) else None
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(error, BaseException):
        return str(error)
    return None


__all__ = [
    "AddressingError",
    "InvalidArgumentError",
    "IndexOutOfBoundsError",
    "InvalidLengthError",
    "CapacityConfigError",
    "NotFoundError",
    "is_not_found_error",
]
