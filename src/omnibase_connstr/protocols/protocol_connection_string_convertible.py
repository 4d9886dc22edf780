# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocol for types that convert to and from connection descriptors.

Implementations pair a target representation ``T`` with the descriptor model.
Where the representation can hold everything a descriptor holds, the two
functions are expected to be inverse:

    - ``to_external(from_external(value)) == value``
    - ``from_external(to_external(descriptor)) == descriptor``

Example:
    >>> class AdapterUri:
    ...     def from_external(self, value: str) -> ModelConnectionDescriptor:
    ...         return parse_uri(value)
    ...
    ...     def to_external(self, descriptor: ModelConnectionDescriptor) -> str:
    ...         return render_uri(descriptor)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from omnibase_connstr.models import ModelConnectionDescriptor

T = TypeVar("T")


@runtime_checkable
class ProtocolConnectionStringConvertible(Protocol[T]):
    """Conversion between a target type and ``ModelConnectionDescriptor``.

    Methods:
        from_external: Build a descriptor from the target representation
        to_external: Produce the target representation from a descriptor
    """

    def from_external(self, value: T) -> ModelConnectionDescriptor:
        """Build a descriptor from ``value``.

        Raises:
            ConnectionStringConversionError: If ``value`` cannot be expressed
                as a descriptor.
        """
        ...

    def to_external(self, descriptor: ModelConnectionDescriptor) -> T:
        """Produce the target representation of ``descriptor``."""
        ...


__all__: list[str] = ["ProtocolConnectionStringConvertible"]
