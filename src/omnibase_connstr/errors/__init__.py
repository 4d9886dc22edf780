# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Connection String Errors Module.

Exports:
    ModelConnStrErrorContext: Bundled error context model
    ConnectionStringError: Base error class
    ConnectionStringParseError: Grammar violations with offset and expectation
    MalformedEscapeError: Invalid percent-escapes
    ConnectionStringConversionError: External values the model cannot hold
    ConnectionStringValidationError: Constructor arguments the model rejects

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Passwords or the full connection string
        - Parameter values (they may carry secrets such as sslpassword)

    SAFE to include:
        - Character offsets and the single offending character
        - Parameter and field names
        - Correlation IDs
"""

from omnibase_connstr.errors.connstr_errors import (
    ConnectionStringConversionError,
    ConnectionStringError,
    ConnectionStringParseError,
    ConnectionStringValidationError,
    MalformedEscapeError,
)
from omnibase_connstr.errors.model_connstr_error_context import (
    ModelConnStrErrorContext,
)

__all__: list[str] = [
    "ConnectionStringConversionError",
    "ConnectionStringError",
    "ConnectionStringParseError",
    "ConnectionStringValidationError",
    "MalformedEscapeError",
    "ModelConnStrErrorContext",
]
