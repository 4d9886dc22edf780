# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""URI-form rendering.

Output shape::

    postgresql://[user[:password]@][host[:port][,...]][/dbname][?key=value[&...]]

Every user, password, host, dbname, key and value is percent-encoded.
Parameters are emitted in sorted key order so rendering is deterministic.
"""

from __future__ import annotations

from omnibase_connstr.codec import encode
from omnibase_connstr.models import ModelConnectionDescriptor, ModelHostSpec

URI_SCHEME = "postgresql://"


def render_uri(descriptor: ModelConnectionDescriptor) -> str:
    """Render ``descriptor`` in URI form.

    A password is only written next to a user; the URI form has no place for
    a password on its own.

    Example:
        >>> from omnibase_connstr.constructors import make_dbname, make_host_port
        >>> render_uri(
        ...     make_host_port("host1", 5432)
        ...     .combine(make_host_port("host2", 5433))
        ...     .combine(make_dbname("mydb"))
        ... )
        'postgresql://host1:5432,host2:5433/mydb'
    """
    parts: list[str] = [URI_SCHEME]

    if descriptor.user is not None:
        parts.append(encode(descriptor.user))
        if descriptor.password is not None:
            parts.append(":")
            parts.append(encode(descriptor.password))
        parts.append("@")

    parts.append(",".join(_render_host(host) for host in descriptor.hosts))

    if descriptor.dbname is not None:
        parts.append("/")
        parts.append(encode(descriptor.dbname))

    if descriptor.params:
        parts.append("?")
        parts.append(
            "&".join(
                f"{encode(key)}={encode(descriptor.params[key])}"
                for key in sorted(descriptor.params)
            )
        )

    return "".join(parts)


def _render_host(host: ModelHostSpec) -> str:
    if host.port is None:
        return encode(host.hostname)
    return f"{encode(host.hostname)}:{host.port}"


__all__: list[str] = ["URI_SCHEME", "render_uri"]
