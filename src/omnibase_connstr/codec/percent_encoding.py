# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Percent-encoding codec for URI-form connection strings.

Encoding is unconditional: every character outside the unreserved set is
written as uppercase ``%XX`` triples over its UTF-8 bytes, so structural
control characters and ``%`` itself never appear raw in rendered output.

Decoding is tolerant: raw characters are accepted as long as they are not
stop characters for the current grammar position, and ``%XX`` triples are
decoded in runs so that multi-byte UTF-8 sequences come back whole.

Example:
    >>> encode("p@ss word")
    'p%40ss%20word'
    >>> decode("p%40ss/rest", is_control_char)
    ('p@ss', '/rest')
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

from omnibase_connstr.codec.charsets import HEX_DIGITS
from omnibase_connstr.errors import MalformedEscapeError
from omnibase_connstr.errors.connstr_errors import describe_unexpected

StopPredicate = Callable[[str], bool]


def encode(text: str) -> str:
    """Percent-encode ``text`` for any value position of the URI form.

    Args:
        text: Decoded text.

    Returns:
        Text containing only unreserved characters and ``%XX`` triples.
    """
    # With safe="", quote() leaves exactly the RFC 3986 unreserved set unescaped.
    return quote(text, safe="", encoding="utf-8", errors="strict")


def decode_at(
    text: str,
    position: int,
    is_stop: StopPredicate,
) -> tuple[str, int]:
    """Decode a component of ``text`` starting at ``position``.

    Consumes characters up to, but not including, the first unescaped
    character for which ``is_stop`` returns True. ``%`` always starts an
    escape and is never tested against ``is_stop``.

    Args:
        text: Full input text.
        position: Offset to start decoding from.
        is_stop: Stop-character test for the current grammar position.

    Returns:
        Tuple of (decoded text, offset of the first unconsumed character).

    Raises:
        MalformedEscapeError: If a ``%`` is not followed by two hex digits, or
            a run of escapes is not valid UTF-8.
    """
    parts: list[str] = []
    pending = bytearray()
    pending_start = position
    length = len(text)
    index = position

    while index < length:
        char = text[index]
        if char == "%":
            digits = text[index + 1 : index + 3]
            if len(digits) != 2 or not all(d in HEX_DIGITS for d in digits):
                bad = index + 1 + next(
                    (i for i, d in enumerate(digits) if d not in HEX_DIGITS),
                    len(digits),
                )
                raise MalformedEscapeError(
                    index,
                    unexpected=describe_unexpected(text, bad),
                )
            if not pending:
                pending_start = index
            pending.append(int(digits, 16))
            index += 3
            continue
        if is_stop(char):
            break
        if pending:
            parts.append(_flush_escapes(pending, pending_start))
            pending.clear()
        parts.append(char)
        index += 1

    if pending:
        parts.append(_flush_escapes(pending, pending_start))
    return "".join(parts), index


def decode(text: str, is_stop: StopPredicate) -> tuple[str, str]:
    """Decode the leading component of ``text``.

    Args:
        text: Surface text, possibly containing ``%XX`` escapes.
        is_stop: Stop-character test for the current grammar position.

    Returns:
        Tuple of (decoded text, remaining undecoded input).

    Raises:
        MalformedEscapeError: On an invalid escape sequence.
    """
    decoded, end = decode_at(text, 0, is_stop)
    return decoded, text[end:]


def _flush_escapes(pending: bytearray, start: int) -> str:
    try:
        return pending.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedEscapeError(
            start,
            expectation="percent-escapes forming valid UTF-8",
        ) from e


__all__: list[str] = [
    "StopPredicate",
    "decode",
    "decode_at",
    "encode",
]
