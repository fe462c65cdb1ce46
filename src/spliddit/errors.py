"""Error hierarchy for spliddit.

Every public error class inherits from :class:`SplidditError`.  Each
carries a machine-readable ``code`` (from :class:`ErrorCode`), a
human-readable ``message``, an optional structured ``context`` dict, and an
optional ``cause`` (chained exception).

Error codes are defined as a :class:`str` enum so that they serialise
naturally to JSON and can be matched with simple ``==`` comparisons.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the library can raise."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class SplidditError(Exception):
    """Base exception for all spliddit errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class SplidditInvalidArgumentError(SplidditError, TypeError):
    """The primary input is absent or has an unsupported shape, or the
    delimiter is neither a string nor a compiled pattern.

    Also a :class:`TypeError`, so callers that already guard against bad
    argument types keep working.

    Context keys: ``argument``, ``received_type``, and ``index`` when a
    sequence element is at fault.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )
