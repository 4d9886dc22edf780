# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Data models for PostgreSQL connection strings."""

from omnibase_connstr.models.model_connection_descriptor import (
    EMPTY_DESCRIPTOR,
    ModelConnectionDescriptor,
)
from omnibase_connstr.models.model_host_spec import ModelHostSpec

__all__: list[str] = [
    "EMPTY_DESCRIPTOR",
    "ModelConnectionDescriptor",
    "ModelHostSpec",
]
