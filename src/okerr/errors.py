"""Error raised when a Result is unwrapped on the wrong variant."""

from __future__ import annotations

from typing import Any

__all__ = [
    'UNWRAP_ERR_ON_OK',
    'UNWRAP_ON_ERR',
    'UnwrapError',
]

UNWRAP_ON_ERR = 'Called unwrap on an Err value'
UNWRAP_ERR_ON_OK = 'Called unwrap_err on an Ok value'


class UnwrapError(RuntimeError):
    """Raised by unwrap(), unwrap_err() and expect() on the unsupported variant.

    The string form is the message alone, so callers can compare it directly.
    The payload held by the offending Result is kept on ``value``.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)
