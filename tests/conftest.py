# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_connstr tests."""

from __future__ import annotations

import pytest

from omnibase_connstr import (
    ModelConnectionDescriptor,
    combine_all,
    make_dbname,
    make_host_port,
    make_param,
    make_password,
    make_user,
)
from omnibase_connstr.cli.model_cli_config import (
    ENV_OUTPUT_FORMAT,
    ENV_REDACT_PASSWORD,
)

# =============================================================================
# Descriptor Fixtures
# =============================================================================


@pytest.fixture
def full_descriptor() -> ModelConnectionDescriptor:
    """Descriptor with every field populated and two hosts."""
    return combine_all(
        make_user("app_user"),
        make_password("s3cret"),
        make_host_port("db1.example.com", 5432),
        make_host_port("db2.example.com", 5433),
        make_dbname("production"),
        make_param("application_name", "myapp"),
        make_param("connect_timeout", "10"),
    )


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def clean_cli_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove CLI configuration variables so defaults apply."""
    monkeypatch.delenv(ENV_OUTPUT_FORMAT, raising=False)
    monkeypatch.delenv(ENV_REDACT_PASSWORD, raising=False)
    return monkeypatch
