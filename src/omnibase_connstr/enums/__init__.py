# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Connection String Enumerations Module.

Exports:
    EnumConnStrErrorCode: Error classification for connection string failures
    EnumConnectionStringFormat: URI or keyword/value syntax
"""

from omnibase_connstr.enums.enum_connection_string_format import (
    EnumConnectionStringFormat,
)
from omnibase_connstr.enums.enum_connstr_error_code import EnumConnStrErrorCode

__all__: list[str] = [
    "EnumConnStrErrorCode",
    "EnumConnectionStringFormat",
]
