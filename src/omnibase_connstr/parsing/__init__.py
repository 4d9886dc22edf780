# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Parsers for the URI and keyword/value connection string formats."""

from omnibase_connstr.parsing.parser_connection_string import (
    detect_format,
    parse,
    parse_lenient,
)
from omnibase_connstr.parsing.parser_keyvalue import (
    FIELD_KEYWORDS,
    KeyValueConnectionStringParser,
    pair_hosts_and_ports,
    parse_keyvalue,
    parse_port_value,
)
from omnibase_connstr.parsing.parser_uri import (
    URI_SCHEME_PREFIXES,
    UriConnectionStringParser,
    match_uri_scheme,
    parse_uri,
)

__all__: list[str] = [
    "FIELD_KEYWORDS",
    "KeyValueConnectionStringParser",
    "URI_SCHEME_PREFIXES",
    "UriConnectionStringParser",
    "detect_format",
    "match_uri_scheme",
    "pair_hosts_and_ports",
    "parse",
    "parse_keyvalue",
    "parse_lenient",
    "parse_port_value",
    "parse_uri",
]
