# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Character sets for the connection string grammars.

Each set names the characters that carry structure at a given position of
the URI form. The ``is_*`` predicates are the stop tests handed to
:func:`omnibase_connstr.codec.percent_encoding.decode`.
"""

from __future__ import annotations

import string
from typing import Final

# Grammar delimiters anywhere in the URI form. Literal occurrences inside
# user, password, host, dbname, keys or values must be percent-encoded.
CONTROL_CHARS: Final[frozenset[str]] = frozenset(":@?/=&,")

# Only '&' ends a query parameter value.
PARAM_CONTROL_CHARS: Final[frozenset[str]] = frozenset("&")

# Always-legal parameter key characters. Keys are never percent-decoded.
KEY_NAME_CHARS: Final[frozenset[str]] = frozenset(
    string.ascii_letters + string.digits + "_"
)

# RFC 3986 unreserved characters, the only ones emitted unescaped.
UNRESERVED_CHARS: Final[frozenset[str]] = frozenset(
    string.ascii_letters + string.digits + "-._~"
)

HEX_DIGITS: Final[frozenset[str]] = frozenset(string.hexdigits)

DECIMAL_DIGITS: Final[frozenset[str]] = frozenset(string.digits)


def is_control_char(char: str) -> bool:
    return char in CONTROL_CHARS


def is_param_control_char(char: str) -> bool:
    return char in PARAM_CONTROL_CHARS


def is_key_name_char(char: str) -> bool:
    return char in KEY_NAME_CHARS


def is_valid_key_name(key: str) -> bool:
    """Return True when ``key`` is non-empty and uses only key-name characters."""
    return bool(key) and all(char in KEY_NAME_CHARS for char in key)


__all__: list[str] = [
    "CONTROL_CHARS",
    "DECIMAL_DIGITS",
    "HEX_DIGITS",
    "KEY_NAME_CHARS",
    "PARAM_CONTROL_CHARS",
    "UNRESERVED_CHARS",
    "is_control_char",
    "is_key_name_char",
    "is_param_control_char",
    "is_valid_key_name",
]
