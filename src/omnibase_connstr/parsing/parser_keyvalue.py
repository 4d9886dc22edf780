# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Recursive-descent parser for keyword/value connection strings.

Grammar::

    kv      := [ entry { WS+ entry } ]
    entry   := key "=" value
    key     := 1*( ALPHA | DIGIT | "_" )
    value   := unquoted | quoted

Unquoted values run to the next whitespace and are taken literally (no
percent-decoding). Quoted values are delimited by single quotes; inside them
``\\\\`` and ``\\'`` stand for a backslash and a quote, and every other
character, including a lone backslash, is literal.

The ``host``, ``port``, ``user``, ``password`` and ``dbname`` keywords fill
the corresponding descriptor fields; every other keyword becomes a parameter.
A repeated keyword keeps its last value.

Host/port pairing:
    ``host`` and ``port`` hold comma-separated lists zipped by index. The host
    list drives the result: hosts without a matching port get no port, and
    ports beyond the last host are dropped. An empty port entry means "no
    port". An empty ``host`` value means no hosts at all.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from omnibase_connstr.codec import is_key_name_char
from omnibase_connstr.codec.charsets import DECIMAL_DIGITS
from omnibase_connstr.enums import EnumConnectionStringFormat
from omnibase_connstr.models import ModelConnectionDescriptor, ModelHostSpec
from omnibase_connstr.parsing.parser_cursor import ParserCursor
from omnibase_connstr.parsing.parser_uri import MAX_PORT

logger = logging.getLogger(__name__)

FIELD_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"host", "port", "user", "password", "dbname"}
)

_OPERATION = "parse_keyvalue"


@dataclass(frozen=True)
class _Entry:
    key: str
    value: str
    value_position: int


def parse_port_value(text: str) -> int | None:
    """Parse one entry of a port list.

    Returns:
        The port, or None for an empty entry.

    Raises:
        ValueError: If the entry is not a decimal number in range 0-65535.
    """
    if not text:
        return None
    if len(text) > 5 or not all(c in DECIMAL_DIGITS for c in text):
        raise ValueError(f"port number in range 0-{MAX_PORT}")
    port = int(text)
    if port > MAX_PORT:
        raise ValueError(f"port number in range 0-{MAX_PORT}")
    return port


def pair_hosts_and_ports(
    hostnames: Sequence[str],
    ports: Sequence[int | None],
) -> tuple[ModelHostSpec, ...]:
    """Zip host names with ports by index.

    Hosts without a port get None; ports beyond the last host are dropped.
    """
    if len(ports) > len(hostnames):
        logger.debug(
            "Dropping %d port(s) without a matching host",
            len(ports) - len(hostnames),
            extra={"host_count": len(hostnames), "port_count": len(ports)},
        )
    padded = list(ports[: len(hostnames)]) + [None] * (len(hostnames) - len(ports))
    return tuple(
        ModelHostSpec(hostname=name, port=port)
        for name, port in zip(hostnames, padded)
    )


class KeyValueConnectionStringParser:
    """Parser for ``key=value`` connection strings.

    Example:
        >>> d = KeyValueConnectionStringParser(
        ...     "host=h1,h2 port=5432 password='it\\\\'s' sslmode=require"
        ... ).parse()
        >>> [h.as_tuple() for h in d.hosts], d.password, dict(d.params)
        ([('h1', 5432), ('h2', None)], "it's", {'sslmode': 'require'})
    """

    def __init__(self, text: str) -> None:
        self._cursor = ParserCursor(text, EnumConnectionStringFormat.KEYWORD_VALUE)

    def parse(self) -> ModelConnectionDescriptor:
        """Parse the whole input.

        Raises:
            ConnectionStringParseError: On any grammar violation, an
                unterminated quote, an empty host list entry or an invalid
                port.
        """
        cursor = self._cursor
        entries: list[_Entry] = []

        cursor.take_while(str.isspace)
        while not cursor.at_end():
            entries.append(self._parse_entry())
            if cursor.at_end():
                break
            if not cursor.take_while(str.isspace):
                raise cursor.error("whitespace or end of input", _OPERATION)

        return self._build_descriptor(entries)

    def _parse_entry(self) -> _Entry:
        cursor = self._cursor
        key = cursor.take_while(is_key_name_char)
        if not key:
            raise cursor.error("key character", _OPERATION)
        if cursor.peek() != "=":
            raise cursor.error("'=' or key character", _OPERATION)
        cursor.advance()

        value_position = cursor.position
        if cursor.peek() == "'":
            value = self._parse_quoted()
        else:
            value = cursor.take_while(lambda c: not c.isspace())
        return _Entry(key=key, value=value, value_position=value_position)

    def _parse_quoted(self) -> str:
        cursor = self._cursor
        cursor.advance()
        parts: list[str] = []
        while True:
            char = cursor.peek()
            if char is None:
                raise cursor.error("closing single quote", _OPERATION)
            if char == "'":
                cursor.advance()
                return "".join(parts)
            if char == "\\":
                cursor.advance()
                escaped = cursor.peek()
                if escaped in ("\\", "'"):
                    parts.append(escaped)
                    cursor.advance()
                else:
                    parts.append("\\")
                continue
            parts.append(char)
            cursor.advance()

    def _build_descriptor(self, entries: list[_Entry]) -> ModelConnectionDescriptor:
        fields: dict[str, _Entry] = {}
        params: dict[str, str] = {}
        for entry in entries:
            if entry.key in FIELD_KEYWORDS:
                fields[entry.key] = entry
            else:
                params[entry.key] = entry.value

        hostnames = self._host_list(fields.get("host"))
        ports = self._port_list(fields.get("port"))

        return ModelConnectionDescriptor(
            user=fields["user"].value if "user" in fields else None,
            password=fields["password"].value if "password" in fields else None,
            hosts=pair_hosts_and_ports(hostnames, ports),
            dbname=fields["dbname"].value if "dbname" in fields else None,
            params=params,
        )

    def _host_list(self, entry: _Entry | None) -> list[str]:
        if entry is None or not entry.value:
            return []
        hostnames = entry.value.split(",")
        if not all(hostnames):
            raise self._cursor.error(
                "non-empty host names separated by ','",
                _OPERATION,
                position=entry.value_position,
            )
        return hostnames

    def _port_list(self, entry: _Entry | None) -> list[int | None]:
        if entry is None:
            return []
        try:
            return [parse_port_value(part) for part in entry.value.split(",")]
        except ValueError as e:
            raise self._cursor.error(
                str(e), _OPERATION, position=entry.value_position
            ) from e


def parse_keyvalue(text: str) -> ModelConnectionDescriptor:
    """Parse a keyword/value connection string.

    Raises:
        ConnectionStringParseError: On any grammar violation.
    """
    return KeyValueConnectionStringParser(text).parse()


__all__: list[str] = [
    "FIELD_KEYWORDS",
    "KeyValueConnectionStringParser",
    "pair_hosts_and_ports",
    "parse_keyvalue",
    "parse_port_value",
]
