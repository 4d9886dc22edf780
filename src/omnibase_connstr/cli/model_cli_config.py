# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Configuration model for the ``onex-connstr`` command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from omnibase_connstr.enums import EnumConnectionStringFormat

__all__: list[str] = [
    "ENV_OUTPUT_FORMAT",
    "ENV_REDACT_PASSWORD",
    "ModelConnStrCliConfig",
]

ENV_OUTPUT_FORMAT: Final[str] = "OMNIBASE_CONNSTR_OUTPUT_FORMAT"
ENV_REDACT_PASSWORD: Final[str] = "OMNIBASE_CONNSTR_REDACT_PASSWORD"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class ModelConnStrCliConfig:
    """Defaults for the connection string CLI.

    Attributes:
        output_format: Format used by ``convert`` and ``intercept`` when
            ``--to`` is not given.
        redact_password: Whether passwords are masked in output unless
            ``--no-redact`` is given.
    """

    output_format: EnumConnectionStringFormat = EnumConnectionStringFormat.URI
    redact_password: bool = False

    @classmethod
    def from_env(cls) -> ModelConnStrCliConfig:
        """Create config from environment variables.

        Reads OMNIBASE_CONNSTR_OUTPUT_FORMAT (``uri`` or ``keyvalue``) and
        OMNIBASE_CONNSTR_REDACT_PASSWORD (boolean). Unset variables keep the
        defaults.

        Raises:
            ValueError: If a variable holds an unrecognized value.
        """
        raw_format = os.environ.get(ENV_OUTPUT_FORMAT)
        raw_redact = os.environ.get(ENV_REDACT_PASSWORD)

        output_format = cls.output_format
        if raw_format is not None:
            try:
                output_format = EnumConnectionStringFormat(raw_format.strip().lower())
            except ValueError as e:
                allowed = ", ".join(f.value for f in EnumConnectionStringFormat)
                raise ValueError(
                    f"{ENV_OUTPUT_FORMAT} must be one of: {allowed}"
                ) from e

        redact_password = cls.redact_password
        if raw_redact is not None:
            normalized = raw_redact.strip().lower()
            if normalized in _TRUE_VALUES:
                redact_password = True
            elif normalized in _FALSE_VALUES:
                redact_password = False
            else:
                raise ValueError(f"{ENV_REDACT_PASSWORD} must be a boolean")

        return cls(output_format=output_format, redact_password=redact_password)
