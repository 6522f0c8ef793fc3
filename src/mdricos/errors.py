"""Error hierarchy for mdricos.

Every public error class inherits from :class:`RicosError`. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Only two failure classes exist at the public surface:

* :class:`MissingInputError` -- no usable markdown could be extracted from a
  request.  Raised by :mod:`mdricos.service` before conversion starts.
* :class:`ConversionError` -- something raised while tokenizing, resolving
  inline text, classifying an image, or building a node.  Conversion is
  all-or-nothing, so no partial document accompanies it.

Unknown block token kinds and unmatched HTML are *not* errors; the walker
skips them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error mdricos can raise."""

    MISSING_INPUT = "MISSING_INPUT"
    CONVERSION_ERROR = "CONVERSION_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class RicosError(Exception):
    """Base exception for all mdricos errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
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
# Request errors
# ---------------------------------------------------------------------------

class MissingInputError(RicosError):
    """No markdown text could be extracted from the request body.

    Context keys: ``content_type``, ``fields`` (the JSON fields checked).
    """

    def __init__(
        self,
        message: str = "Request body must contain markdown text",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MISSING_INPUT,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class ConversionError(RicosError):
    """Markdown could not be converted to a RICOS document.

    Context keys: ``stage`` (``"tokenize"``, ``"build"`` or ``"serialize"``),
    ``exception_type``.
    """

    def __init__(
        self,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONVERSION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
