# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Utility modules for connection strings.

This package provides:
    - util_connstr_sanitization: Password and secret masking for safe display
"""

from omnibase_connstr.utils.util_connstr_sanitization import (
    INVALID_CONNECTION_STRING,
    PASSWORD_MASK,
    SECRET_PARAM_KEYS,
    redact_password,
    redact_secrets,
    render,
    render_keyvalue_all_hosts,
    sanitize_connection_string,
)

__all__: list[str] = [
    "INVALID_CONNECTION_STRING",
    "PASSWORD_MASK",
    "SECRET_PARAM_KEYS",
    "redact_password",
    "redact_secrets",
    "render",
    "render_keyvalue_all_hosts",
    "sanitize_connection_string",
]
