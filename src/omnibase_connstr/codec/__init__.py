# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Percent-encoding codec and grammar character sets."""

from omnibase_connstr.codec.charsets import (
    CONTROL_CHARS,
    KEY_NAME_CHARS,
    PARAM_CONTROL_CHARS,
    is_control_char,
    is_key_name_char,
    is_param_control_char,
    is_valid_key_name,
)
from omnibase_connstr.codec.percent_encoding import (
    StopPredicate,
    decode,
    decode_at,
    encode,
)

__all__: list[str] = [
    "CONTROL_CHARS",
    "KEY_NAME_CHARS",
    "PARAM_CONTROL_CHARS",
    "StopPredicate",
    "decode",
    "decode_at",
    "encode",
    "is_control_char",
    "is_key_name_char",
    "is_param_control_char",
    "is_valid_key_name",
]
