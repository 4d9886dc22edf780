# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Shared pytest configuration for all unit tests.

Every test under tests/unit/ gets the ``unit`` marker, so the suite can be
selected with ``pytest -m unit`` without each module setting pytestmark.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to every collected test in the unit directory.

    pytestmark in a conftest.py does not propagate to sibling modules, so the
    marker is applied here after collection.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.path):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
