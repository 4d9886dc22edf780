# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocol definitions for connection string conversions."""

from omnibase_connstr.protocols.protocol_connection_string_convertible import (
    ProtocolConnectionStringConvertible,
)

__all__: list[str] = ["ProtocolConnectionStringConvertible"]
