# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Connection String Error Context Model.

Bundles the structured fields shared by every connection string error so
error constructors keep a short, strongly-typed signature.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_connstr.enums import EnumConnectionStringFormat


class ModelConnStrErrorContext(BaseModel):
    """Structured context for connection string errors.

    Attributes:
        operation: Operation being performed (parse_uri, decode, from_external, ...)
        source_format: Syntax of the text being processed, if known
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelConnStrErrorContext.with_correlation(
        ...     operation="parse_uri",
        ...     source_format=EnumConnectionStringFormat.URI,
        ... )
        >>> context.correlation_id is not None
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (parse_uri, decode, from_external, ...)",
    )
    source_format: EnumConnectionStringFormat | None = Field(
        default=None,
        description="Syntax of the text being processed",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelConnStrErrorContext:
        """Create a context, generating a UUID4 correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, or None.
            **kwargs: Remaining context fields.

        Returns:
            A context whose ``correlation_id`` is always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelConnStrErrorContext"]
