# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Conversion between descriptors and libpq keyword mappings.

The libpq keyword mapping is the ``dict[str, str]`` accepted by
``psycopg.connect(**kwargs)`` and produced by ``conninfo_to_dict``. Multiple
hosts are written as comma-separated ``host`` and ``port`` lists, with an
empty port entry for hosts that use the server default::

    {"host": "h1,h2", "port": "5432,", "dbname": "app"}

Host names containing ',' cannot be represented faithfully in this shape.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError

from omnibase_connstr.errors import (
    ConnectionStringConversionError,
    ModelConnStrErrorContext,
)
from omnibase_connstr.models import ModelConnectionDescriptor
from omnibase_connstr.parsing.parser_keyvalue import (
    FIELD_KEYWORDS,
    pair_hosts_and_ports,
    parse_port_value,
)

_OPERATION = "from_external"


class AdapterLibpqKeywords:
    """``ProtocolConnectionStringConvertible[dict[str, str]]`` for libpq keywords.

    Example:
        >>> adapter = AdapterLibpqKeywords()
        >>> adapter.to_external(parse("postgresql://u@h1:5432,h2/db"))
        {'host': 'h1,h2', 'port': '5432,', 'user': 'u', 'dbname': 'db'}
    """

    def from_external(self, value: Mapping[str, str]) -> ModelConnectionDescriptor:
        """Build a descriptor from a libpq keyword mapping.

        Raises:
            ConnectionStringConversionError: On an empty host list entry, an
                invalid port, or a keyword that is not a valid parameter key.
        """
        context = ModelConnStrErrorContext.with_correlation(operation=_OPERATION)

        host_value = value.get("host", "")
        hostnames = host_value.split(",") if host_value else []
        if not all(hostnames):
            raise ConnectionStringConversionError(
                "Host list contains an empty entry",
                context=context,
                parameter="host",
            )

        try:
            ports = (
                [parse_port_value(part) for part in value["port"].split(",")]
                if "port" in value
                else []
            )
        except ValueError as e:
            raise ConnectionStringConversionError(
                f"Invalid port: expected {e}",
                context=context,
                parameter="port",
            ) from e

        try:
            return ModelConnectionDescriptor(
                user=value.get("user"),
                password=value.get("password"),
                hosts=pair_hosts_and_ports(hostnames, ports),
                dbname=value.get("dbname"),
                params={
                    key: item
                    for key, item in value.items()
                    if key not in FIELD_KEYWORDS
                },
            )
        except ValidationError as e:
            raise ConnectionStringConversionError(
                f"Keyword mapping cannot be expressed as a connection descriptor: "
                f"{e.error_count()} validation error(s)",
                context=context,
            ) from e

    def to_external(self, descriptor: ModelConnectionDescriptor) -> dict[str, str]:
        """Produce the libpq keyword mapping for ``descriptor``.

        ``port`` is omitted when no host has an explicit port.
        """
        result: dict[str, str] = {}
        if descriptor.hosts:
            result["host"] = ",".join(host.hostname for host in descriptor.hosts)
            if any(host.port is not None for host in descriptor.hosts):
                result["port"] = ",".join(
                    "" if host.port is None else str(host.port)
                    for host in descriptor.hosts
                )
        if descriptor.user is not None:
            result["user"] = descriptor.user
        if descriptor.password is not None:
            result["password"] = descriptor.password
        if descriptor.dbname is not None:
            result["dbname"] = descriptor.dbname
        for key in sorted(descriptor.params):
            result[key] = descriptor.params[key]
        return result


__all__: list[str] = ["AdapterLibpqKeywords"]
