# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Adapters implementing ProtocolConnectionStringConvertible."""

from omnibase_connstr.adapters.adapter_libpq_keywords import AdapterLibpqKeywords

__all__: list[str] = ["AdapterLibpqKeywords"]
