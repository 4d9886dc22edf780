# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Test helpers for omnibase_connstr tests.

Available Utilities:
    Strategies:
        - host_specs: Hypothesis strategy for ModelHostSpec
        - connection_descriptors: Hypothesis strategy for arbitrary descriptors
        - keyvalue_safe_descriptors: Descriptors whose single-host subset
          survives the keyword/value round trip

    Log Helpers:
        - filter_module_records: Filter captured log records by module
"""

from tests.helpers.log_helpers import filter_module_records
from tests.helpers.strategies_connection_descriptor import (
    connection_descriptors,
    host_specs,
    keyvalue_safe_descriptors,
    param_keys,
)

__all__ = [
    "connection_descriptors",
    "filter_module_records",
    "host_specs",
    "keyvalue_safe_descriptors",
    "param_keys",
]
