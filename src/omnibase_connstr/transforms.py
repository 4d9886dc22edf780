# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pure combination, accessor and removal operations on descriptors."""

from __future__ import annotations

import logging
from functools import reduce
from types import MappingProxyType

from omnibase_connstr.models import (
    EMPTY_DESCRIPTOR,
    ModelConnectionDescriptor,
)

logger = logging.getLogger(__name__)


def combine(
    left: ModelConnectionDescriptor,
    right: ModelConnectionDescriptor,
) -> ModelConnectionDescriptor:
    """Combine two descriptors; ``right`` takes precedence.

    Scalar fields prefer ``right`` when present, host lists are concatenated
    and parameter maps are unioned with ``right`` winning. Associative, with
    ``EMPTY_DESCRIPTOR`` as identity.
    """
    return left.combine(right)


def combine_all(*descriptors: ModelConnectionDescriptor) -> ModelConnectionDescriptor:
    """Fold ``descriptors`` left to right with :func:`combine`.

    Returns ``EMPTY_DESCRIPTOR`` when called without arguments.
    """
    return reduce(combine, descriptors, EMPTY_DESCRIPTOR)


def host_tuples(
    descriptor: ModelConnectionDescriptor,
) -> list[tuple[str, int | None]]:
    """Return the host list as ``(hostname, port)`` pairs.

    Example:
        >>> from omnibase_connstr.constructors import make_host
        >>> host_tuples(combine(make_host("host1"), make_host("host2", 5433)))
        [('host1', None), ('host2', 5433)]
    """
    return [host.as_tuple() for host in descriptor.hosts]


def intercept_param(
    key: str,
    descriptor: ModelConnectionDescriptor,
) -> tuple[str, ModelConnectionDescriptor] | None:
    """Extract a parameter and remove it from the descriptor.

    Useful for parameters that need special handling before the remaining
    connection string is handed to PostgreSQL.

    Args:
        key: Parameter name to intercept.
        descriptor: Source descriptor. Never modified.

    Returns:
        Tuple of (value, descriptor without ``key``), or None if ``key`` is
        not present.

    Example:
        >>> from omnibase_connstr.constructors import make_param
        >>> d = combine(make_param("application_name", "myapp"),
        ...             make_param("connect_timeout", "10"))
        >>> value, rest = intercept_param("application_name", d)
        >>> value, dict(rest.params)
        ('myapp', {'connect_timeout': '10'})
    """
    if key not in descriptor.params:
        return None

    value = descriptor.params[key]
    remaining = {k: v for k, v in descriptor.params.items() if k != key}
    logger.debug(
        "Intercepted connection parameter %s",
        key,
        extra={"param_key": key, "remaining_params": len(remaining)},
    )
    return value, descriptor.model_copy(
        update={"params": MappingProxyType(remaining)}
    )


__all__: list[str] = [
    "combine",
    "combine_all",
    "host_tuples",
    "intercept_param",
]
