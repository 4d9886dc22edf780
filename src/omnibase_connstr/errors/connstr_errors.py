# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Connection String Error Classes.

Error Hierarchy:
    ConnectionStringError (base)
    ├── ConnectionStringParseError
    │   └── MalformedEscapeError
    ├── ConnectionStringConversionError
    └── ConnectionStringValidationError

All errors:
    - Carry an EnumConnStrErrorCode for classification
    - Accept ModelConnStrErrorContext for bundled context parameters
    - Support proper error chaining with `raise ... from e`
    - Never embed the connection string itself in the message, since it may
      contain credentials. Parse errors expose only the offset, the
      expectation and the single offending character.
"""

from __future__ import annotations

from omnibase_connstr.enums import EnumConnStrErrorCode
from omnibase_connstr.errors.model_connstr_error_context import (
    ModelConnStrErrorContext,
)

_END_OF_INPUT = "end of input"


class ConnectionStringError(Exception):
    """Base error class for connection string processing.

    Example:
        >>> context = ModelConnStrErrorContext(operation="from_external")
        >>> raise ConnectionStringError("Unsupported value", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumConnStrErrorCode | None = None,
        context: ModelConnStrErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConnectionStringError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to PARSE_ERROR)
            context: Bundled error context (operation, source format, correlation)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumConnStrErrorCode.PARSE_ERROR
        self.context = context
        self.correlation_id = context.correlation_id if context is not None else None
        self.extra_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                self.extra_context.setdefault("operation", context.operation)
            if context.source_format is not None:
                self.extra_context.setdefault("source_format", context.source_format)


class ConnectionStringParseError(ConnectionStringError):
    """Raised when text does not match the connection string grammar.

    Attributes:
        position: Zero-based character offset of the failure.
        expectation: What the grammar would have accepted at ``position``.
        unexpected: Description of what was found instead ("'@'" or
            "end of input").

    Example:
        >>> err = ConnectionStringParseError(7, "'=' or key character", unexpected="':'")
        >>> str(err)
        "Parse error at position 7: unexpected ':', expecting '=' or key character"
    """

    def __init__(
        self,
        position: int,
        expectation: str,
        *,
        unexpected: str | None = None,
        error_code: EnumConnStrErrorCode | None = None,
        context: ModelConnStrErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConnectionStringParseError.

        Args:
            position: Zero-based character offset of the failure
            expectation: Human-readable expectation at that offset
            unexpected: Description of the offending token
            error_code: Error code (defaults to PARSE_ERROR)
            context: Bundled error context
            **extra_context: Additional context information
        """
        self.position = position
        self.expectation = expectation
        self.unexpected = unexpected
        found = f"unexpected {unexpected}, " if unexpected is not None else ""
        super().__init__(
            f"Parse error at position {position}: {found}expecting {expectation}",
            error_code=error_code or EnumConnStrErrorCode.PARSE_ERROR,
            context=context,
            position=position,
            **extra_context,
        )

    def format_pretty(self, source: str) -> str:
        """Render a line/column report with a caret under the failure.

        The caller supplies the source explicitly so that the input, which
        may contain a password, never ends up in ``str(error)`` or in logs.

        Args:
            source: The text that was being parsed.

        Returns:
            Multi-line report, e.g.::

                1:8:
                  |
                1 | invalid://connection=
                  |        ^
                unexpected ':'
                expecting '=' or key character
        """
        position = min(self.position, len(source))
        line_number = source.count("\n", 0, position) + 1
        line_start = source.rfind("\n", 0, position) + 1
        line_end = source.find("\n", position)
        if line_end == -1:
            line_end = len(source)
        column = position - line_start + 1
        gutter = " " * len(str(line_number))

        lines = [
            f"{line_number}:{column}:",
            f"{gutter} |",
            f"{line_number} | {source[line_start:line_end]}",
            f"{gutter} | {' ' * (column - 1)}^",
        ]
        if self.unexpected is not None:
            lines.append(f"unexpected {self.unexpected}")
        lines.append(f"expecting {self.expectation}")
        return "\n".join(lines)


class MalformedEscapeError(ConnectionStringParseError):
    """Raised when a percent-escape cannot be decoded.

    Covers a ``%`` that is not followed by two hexadecimal digits and a run of
    escaped bytes that does not form valid UTF-8. ``position`` points at the
    offending ``%``.
    """

    def __init__(
        self,
        position: int,
        *,
        expectation: str = "two hexadecimal digits after '%'",
        unexpected: str | None = None,
        context: ModelConnStrErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize MalformedEscapeError.

        Args:
            position: Offset of the ``%`` that starts the bad escape
            expectation: Human-readable expectation
            unexpected: Description of the offending token
            context: Bundled error context
            **extra_context: Additional context information
        """
        super().__init__(
            position,
            expectation,
            unexpected=unexpected,
            error_code=EnumConnStrErrorCode.MALFORMED_ESCAPE,
            context=context,
            **extra_context,
        )


class ConnectionStringConversionError(ConnectionStringError):
    """Raised when an external representation cannot become a descriptor.

    Example:
        >>> raise ConnectionStringConversionError(
        ...     "Port must be an integer in range 0-65535",
        ...     parameter="port",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelConnStrErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConnectionStringConversionError.

        Args:
            message: Human-readable error message
            context: Bundled error context
            **extra_context: Additional context information (e.g., parameter)
        """
        super().__init__(
            message,
            error_code=EnumConnStrErrorCode.CONVERSION_ERROR,
            context=context,
            **extra_context,
        )


class ConnectionStringValidationError(ConnectionStringError):
    """Raised when a constructor argument cannot be held by a descriptor.

    Example:
        >>> raise ConnectionStringValidationError(
        ...     "Invalid parameter key",
        ...     parameter="key",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelConnStrErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message,
            error_code=EnumConnStrErrorCode.VALIDATION_ERROR,
            context=context,
            **extra_context,
        )


def describe_unexpected(text: str, position: int) -> str:
    """Describe the token at ``position`` for error messages."""
    if position >= len(text):
        return _END_OF_INPUT
    return repr(text[position])


__all__ = [
    "ConnectionStringConversionError",
    "ConnectionStringError",
    "ConnectionStringParseError",
    "ConnectionStringValidationError",
    "MalformedEscapeError",
    "describe_unexpected",
]
