# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Command line interface for connection string inspection and conversion."""
