# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Connection String Error Code Enumeration.

Machine-readable classification attached to every ``ConnectionStringError``.
"""

from enum import Enum


class EnumConnStrErrorCode(str, Enum):
    """Error codes for connection string failures.

    Attributes:
        PARSE_ERROR: Syntax violation in either grammar.
        MALFORMED_ESCAPE: A ``%`` not followed by two hex digits, or escaped
            bytes that are not valid UTF-8.
        CONVERSION_ERROR: An external representation that cannot be expressed
            as a connection descriptor.
        VALIDATION_ERROR: A constructor argument the descriptor model rejects,
            such as an invalid parameter key or an out-of-range port.
    """

    PARSE_ERROR = "PARSE_ERROR"
    MALFORMED_ESCAPE = "MALFORMED_ESCAPE"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


__all__ = ["EnumConnStrErrorCode"]
