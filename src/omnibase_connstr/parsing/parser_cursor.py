# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Position-tracking cursor shared by the recursive-descent parsers."""

from __future__ import annotations

from collections.abc import Callable

from omnibase_connstr.codec import StopPredicate, decode_at
from omnibase_connstr.enums import EnumConnectionStringFormat
from omnibase_connstr.errors import (
    ConnectionStringParseError,
    MalformedEscapeError,
    ModelConnStrErrorContext,
)
from omnibase_connstr.errors.connstr_errors import describe_unexpected


class ParserCursor:
    """Read position over an immutable input string.

    Every error raised through the cursor carries the current offset and an
    error context naming the grammar in use.
    """

    def __init__(
        self,
        text: str,
        source_format: EnumConnectionStringFormat,
        position: int = 0,
    ) -> None:
        self.text = text
        self.position = position
        self._source_format = source_format

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str | None:
        """Return the current character, or None at end of input."""
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def advance(self, count: int = 1) -> None:
        self.position += count

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume and return the longest run of characters matching ``predicate``."""
        start = self.position
        length = len(self.text)
        while self.position < length and predicate(self.text[self.position]):
            self.position += 1
        return self.text[start : self.position]

    def take_decoded(self, is_stop: StopPredicate, operation: str) -> str:
        """Consume a percent-encoded component up to the next stop character.

        Raises:
            MalformedEscapeError: On an invalid escape, re-raised with this
                cursor's error context.
        """
        try:
            decoded, self.position = decode_at(self.text, self.position, is_stop)
        except MalformedEscapeError as e:
            raise MalformedEscapeError(
                e.position,
                expectation=e.expectation,
                unexpected=e.unexpected,
                context=self.context(operation),
            ) from e
        return decoded

    def context(self, operation: str) -> ModelConnStrErrorContext:
        return ModelConnStrErrorContext(
            operation=operation,
            source_format=self._source_format,
        )

    def error(
        self,
        expectation: str,
        operation: str,
        position: int | None = None,
    ) -> ConnectionStringParseError:
        """Build a parse error at ``position`` (default: the current offset)."""
        at = self.position if position is None else position
        return ConnectionStringParseError(
            at,
            expectation,
            unexpected=describe_unexpected(self.text, at),
            context=self.context(operation),
        )


__all__: list[str] = ["ParserCursor"]
