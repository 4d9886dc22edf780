# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Keyword/value-form rendering.

Fields are written in a fixed order (host, port, user, password, dbname),
followed by parameters sorted by key. Only the first host is written: the
format has no notation for several hosts with individual ports, so the
keyword/value form is lossy for multi-host descriptors.
"""

from __future__ import annotations

from typing import Final

from omnibase_connstr.models import ModelConnectionDescriptor

# Characters that force a value into single quotes.
_QUOTE_TRIGGERS: Final[frozenset[str]] = frozenset(" '\\=")


def escape_keyvalue(value: str) -> str:
    """Quote ``value`` for the keyword/value format when needed.

    Empty values and values containing a space, single quote, backslash or
    equals sign are wrapped in single quotes, with backslashes and single
    quotes escaped by a backslash. Everything else is written verbatim.

    Example:
        >>> escape_keyvalue("secret pass")
        "'secret pass'"
        >>> escape_keyvalue("it's")
        "'it\\\\'s'"
        >>> escape_keyvalue("plain")
        'plain'
    """
    if value and not any(char in _QUOTE_TRIGGERS for char in value):
        return value
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_keyvalue(descriptor: ModelConnectionDescriptor) -> str:
    """Render ``descriptor`` in keyword/value form.

    Example:
        >>> from omnibase_connstr.constructors import make_password
        >>> render_keyvalue(make_password("secret pass"))
        "password='secret pass'"
    """
    pairs: list[tuple[str, str]] = []

    if descriptor.hosts:
        first = descriptor.hosts[0]
        pairs.append(("host", first.hostname))
        if first.port is not None:
            pairs.append(("port", str(first.port)))
    if descriptor.user is not None:
        pairs.append(("user", descriptor.user))
    if descriptor.password is not None:
        pairs.append(("password", descriptor.password))
    if descriptor.dbname is not None:
        pairs.append(("dbname", descriptor.dbname))
    pairs.extend((key, descriptor.params[key]) for key in sorted(descriptor.params))

    return " ".join(f"{key}={escape_keyvalue(value)}" for key, value in pairs)


__all__: list[str] = ["escape_keyvalue", "render_keyvalue"]
