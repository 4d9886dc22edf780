# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Recursive-descent parser for URI-form connection strings.

Grammar::

    uri        := scheme "://" [ userinfo "@" ] hostlist [ "/" dbname ] [ "?" query ]
    scheme     := "postgresql" | "postgres"
    userinfo   := encoded_user [ ":" encoded_password ]
    hostlist   := host { "," host }              ; may be empty
    host       := encoded_hostname [ ":" port ]
    port       := 1*5 DIGIT                      ; 0-65535
    dbname     := encoded_text
    query      := pair { "&" pair }
    pair       := key "=" encoded_value
    key        := 1*( ALPHA | DIGIT | "_" )

User, password, host and dbname stop at the general control set; query values
stop only at ``&``. Anything left after a complete match is an error.
"""

from __future__ import annotations

from typing import Final

from omnibase_connstr.codec import (
    is_control_char,
    is_key_name_char,
    is_param_control_char,
)
from omnibase_connstr.codec.charsets import DECIMAL_DIGITS
from omnibase_connstr.enums import EnumConnectionStringFormat
from omnibase_connstr.models import ModelConnectionDescriptor, ModelHostSpec
from omnibase_connstr.parsing.parser_cursor import ParserCursor

# Longer prefix first; neither is a prefix of the other but order is fixed
# for deterministic dispatch.
URI_SCHEME_PREFIXES: Final[tuple[str, ...]] = ("postgresql://", "postgres://")

MAX_PORT: Final[int] = 65535
_MAX_PORT_DIGITS: Final[int] = 5

_OPERATION = "parse_uri"


def match_uri_scheme(text: str) -> str | None:
    """Return the scheme prefix ``text`` starts with, or None.

    Matching is exact and case-sensitive.
    """
    for prefix in URI_SCHEME_PREFIXES:
        if text.startswith(prefix):
            return prefix
    return None


class UriConnectionStringParser:
    """Parser for ``postgresql://`` and ``postgres://`` connection strings.

    Example:
        >>> d = UriConnectionStringParser("postgres://u@h1,h2:5433/db").parse()
        >>> [h.as_tuple() for h in d.hosts]
        [('h1', None), ('h2', 5433)]
    """

    def __init__(self, text: str) -> None:
        self._cursor = ParserCursor(text, EnumConnectionStringFormat.URI)

    def parse(self) -> ModelConnectionDescriptor:
        """Parse the whole input.

        Raises:
            ConnectionStringParseError: On any grammar violation.
            MalformedEscapeError: On an invalid percent-escape.
        """
        cursor = self._cursor
        prefix = match_uri_scheme(cursor.text)
        if prefix is None:
            raise cursor.error("'postgresql://' or 'postgres://'", _OPERATION)
        cursor.advance(len(prefix))

        user, password = self._parse_userinfo()
        hosts = self._parse_hostlist()

        dbname: str | None = None
        if cursor.peek() == "/":
            cursor.advance()
            dbname = cursor.take_decoded(is_control_char, _OPERATION)

        params: dict[str, str] = {}
        if cursor.peek() == "?":
            cursor.advance()
            params = self._parse_query()

        if not cursor.at_end():
            raise cursor.error(self._trailing_expectation(hosts, dbname), _OPERATION)

        return ModelConnectionDescriptor(
            user=user,
            password=password,
            hosts=tuple(hosts),
            dbname=dbname,
            params=params,
        )

    def _parse_userinfo(self) -> tuple[str | None, str | None]:
        """Parse ``user[:password]@`` if present, backtracking otherwise.

        Userinfo is only attempted when a raw ``@`` occurs before the first
        ``/`` or ``?``; in that case escape errors in the user or password
        propagate. If the decoded userinfo is not followed by ``@`` the
        cursor is restored and both values are None, so the text is read as
        the host list.
        """
        cursor = self._cursor
        start = cursor.position
        if not self._has_userinfo(start):
            return None, None

        user = cursor.take_decoded(is_control_char, _OPERATION)
        password: str | None = None
        if cursor.peek() == ":":
            cursor.advance()
            password = cursor.take_decoded(is_control_char, _OPERATION)

        if cursor.peek() == "@":
            cursor.advance()
            return user, password

        cursor.position = start
        return None, None

    def _has_userinfo(self, start: int) -> bool:
        """Return True if a raw ``@`` precedes the end of the authority."""
        text = self._cursor.text
        for index in range(start, len(text)):
            char = text[index]
            if char == "@":
                return True
            if char in ("/", "?"):
                return False
        return False

    def _parse_hostlist(self) -> list[ModelHostSpec]:
        cursor = self._cursor
        hosts: list[ModelHostSpec] = []
        if cursor.peek() in (None, "/", "?"):
            return hosts

        while True:
            start = cursor.position
            hostname = cursor.take_decoded(is_control_char, _OPERATION)
            if not hostname:
                raise cursor.error("host name", _OPERATION, position=start)

            port: int | None = None
            if cursor.peek() == ":":
                cursor.advance()
                port = self._parse_port()

            hosts.append(ModelHostSpec(hostname=hostname, port=port))

            if cursor.peek() != ",":
                return hosts
            cursor.advance()

    def _parse_port(self) -> int:
        cursor = self._cursor
        start = cursor.position
        digits = cursor.take_while(lambda c: c in DECIMAL_DIGITS)
        if not digits:
            raise cursor.error("port number", _OPERATION)
        if len(digits) > _MAX_PORT_DIGITS or int(digits) > MAX_PORT:
            raise cursor.error(
                f"port number in range 0-{MAX_PORT}", _OPERATION, position=start
            )
        return int(digits)

    def _parse_query(self) -> dict[str, str]:
        cursor = self._cursor
        params: dict[str, str] = {}
        while True:
            key = cursor.take_while(is_key_name_char)
            if not key:
                raise cursor.error("key character", _OPERATION)
            if cursor.peek() != "=":
                raise cursor.error("'=' or key character", _OPERATION)
            cursor.advance()
            params[key] = cursor.take_decoded(is_param_control_char, _OPERATION)

            if cursor.peek() != "&":
                return params
            cursor.advance()

    @staticmethod
    def _trailing_expectation(
        hosts: list[ModelHostSpec],
        dbname: str | None,
    ) -> str:
        if dbname is not None:
            return "'?' or end of input"
        if hosts:
            return "',', '/', '?' or end of input"
        return "host name, '/', '?' or end of input"


def parse_uri(text: str) -> ModelConnectionDescriptor:
    """Parse a URI-form connection string.

    Raises:
        ConnectionStringParseError: On any grammar violation.
    """
    return UriConnectionStringParser(text).parse()


__all__: list[str] = [
    "MAX_PORT",
    "URI_SCHEME_PREFIXES",
    "UriConnectionStringParser",
    "match_uri_scheme",
    "parse_uri",
]
