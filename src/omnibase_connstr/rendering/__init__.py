# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Renderers for the URI and keyword/value connection string formats."""

from omnibase_connstr.rendering.render_keyvalue import escape_keyvalue, render_keyvalue
from omnibase_connstr.rendering.render_uri import URI_SCHEME, render_uri

__all__: list[str] = [
    "URI_SCHEME",
    "escape_keyvalue",
    "render_keyvalue",
    "render_uri",
]
