# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Strongly-typed PostgreSQL connection descriptor.

This module provides the immutable value produced by the parsers and consumed
by the renderers. It replaces a loose ``dict[str, object]`` with validated,
frozen fields.

All values are stored decoded. Percent-encoding (URI form) and quoting
(keyword/value form) are applied only when rendering.

Example:
    >>> from omnibase_connstr.models import ModelConnectionDescriptor, ModelHostSpec
    >>> descriptor = ModelConnectionDescriptor(
    ...     user="admin",
    ...     hosts=(ModelHostSpec(hostname="localhost", port=5432),),
    ...     dbname="mydb",
    ... )
    >>> descriptor.hosts[0].hostname
    'localhost'

Note:
    The model is frozen and ``params`` is a read-only mapping, so descriptors
    (including ``EMPTY_DESCRIPTOR``) can be shared freely between callers and
    threads, and used as dict keys. Every transformation returns a new
    descriptor.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from omnibase_connstr.codec.charsets import is_valid_key_name
from omnibase_connstr.models.model_host_spec import ModelHostSpec

__all__ = ["EMPTY_DESCRIPTOR", "ModelConnectionDescriptor"]


class ModelConnectionDescriptor(BaseModel):
    """Parsed PostgreSQL connection string.

    Attributes:
        user: User name for authentication. None if not specified.
        password: Password for authentication. None if not specified.
            Note: Handle with care as this contains sensitive credentials.
        hosts: Ordered host list; the first host is preferred. Duplicates are
            kept as given.
        dbname: Database name. None if not specified.
        params: Additional connection parameters as a read-only mapping.
            Keys use only ``[a-zA-Z0-9_]``. Iteration order carries no
            meaning; renderers sort by key.

    Example:
        >>> a = ModelConnectionDescriptor(user="app", params={"sslmode": "require"})
        >>> b = ModelConnectionDescriptor(user="admin")
        >>> a.combine(b).user
        'admin'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user: str | None = Field(
        default=None,
        description="User name for authentication.",
    )
    password: str | None = Field(
        default=None,
        description="Password for authentication. Handle with care.",
    )
    hosts: tuple[ModelHostSpec, ...] = Field(
        default=(),
        description="Ordered host specifications (failover / load balancing).",
    )
    dbname: str | None = Field(
        default=None,
        description="Database name.",
    )
    params: Mapping[str, str] = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Additional connection parameters as key-value pairs.",
    )

    @field_validator("params")
    @classmethod
    def _validate_param_keys(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        for key in value:
            if not is_valid_key_name(key):
                raise ValueError(
                    f"Invalid parameter key {key!r}: keys must be non-empty and "
                    "contain only letters, digits and underscores"
                )
        # Copy so later changes to the caller's dict cannot leak in.
        return MappingProxyType(dict(value))

    @field_serializer("params")
    def _serialize_params(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash(
            (
                self.user,
                self.password,
                self.hosts,
                self.dbname,
                frozenset(self.params.items()),
            )
        )

    def combine(self, other: ModelConnectionDescriptor) -> ModelConnectionDescriptor:
        """Combine with ``other``, which takes precedence.

        - user, password, dbname: ``other``'s value when present
        - hosts: concatenated, ``self`` first
        - params: union, ``other`` wins on key collision

        The operation is associative and has ``EMPTY_DESCRIPTOR`` as identity
        on both sides. It is not commutative.

        Args:
            other: Right-hand operand.

        Returns:
            New combined descriptor.
        """
        return ModelConnectionDescriptor(
            user=other.user if other.user is not None else self.user,
            password=other.password if other.password is not None else self.password,
            hosts=self.hosts + other.hosts,
            dbname=other.dbname if other.dbname is not None else self.dbname,
            params={**self.params, **other.params},
        )

    def is_empty(self) -> bool:
        return self == EMPTY_DESCRIPTOR


EMPTY_DESCRIPTOR = ModelConnectionDescriptor()
