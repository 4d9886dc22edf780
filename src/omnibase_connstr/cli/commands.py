# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Connection String CLI Commands.

Provides a CLI for inspecting and converting PostgreSQL connection strings.
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_connstr.cli.model_cli_config import ModelConnStrCliConfig
from omnibase_connstr.enums import EnumConnectionStringFormat
from omnibase_connstr.errors import ConnectionStringParseError
from omnibase_connstr.models import ModelConnectionDescriptor
from omnibase_connstr.parsing import detect_format, parse
from omnibase_connstr.transforms import intercept_param
from omnibase_connstr.utils import redact_secrets, render

console = Console()

_FORMAT_CHOICE = click.Choice([f.value for f in EnumConnectionStringFormat])


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """PostgreSQL connection string tools."""
    try:
        ctx.obj = ModelConnStrCliConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e


@cli.command("show")
@click.argument("connection_string")
@click.option(
    "--redact/--no-redact",
    default=None,
    help="Mask secrets (default: OMNIBASE_CONNSTR_REDACT_PASSWORD)",
)
@click.pass_obj
def show_cmd(
    config: ModelConnStrCliConfig,
    connection_string: str,
    redact: bool | None,
) -> None:
    """Show the components of a connection string."""
    descriptor = _parse_or_exit(connection_string)
    if _should_redact(config, redact):
        descriptor = redact_secrets(descriptor)

    source_format = detect_format(connection_string)
    table = Table(title=f"Connection string ({source_format.value})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("user", _optional(descriptor.user))
    table.add_row("password", _optional(descriptor.password))
    for index, host in enumerate(descriptor.hosts):
        port = "(default)" if host.port is None else str(host.port)
        table.add_row(f"host[{index}]", f"{escape(host.hostname)} : {port}")
    if not descriptor.hosts:
        table.add_row("hosts", "[dim](none)[/dim]")
    table.add_row("dbname", _optional(descriptor.dbname))
    for key in sorted(descriptor.params):
        table.add_row(f"param {key}", escape(descriptor.params[key]))

    console.print(table)


@cli.command("convert")
@click.argument("connection_string")
@click.option(
    "--to",
    "output_format",
    type=_FORMAT_CHOICE,
    default=None,
    help="Output format (default: OMNIBASE_CONNSTR_OUTPUT_FORMAT or uri)",
)
@click.option(
    "--redact/--no-redact",
    default=None,
    help="Mask secrets (default: OMNIBASE_CONNSTR_REDACT_PASSWORD)",
)
@click.pass_obj
def convert_cmd(
    config: ModelConnStrCliConfig,
    connection_string: str,
    output_format: str | None,
    redact: bool | None,
) -> None:
    """Re-render a connection string in URI or keyword/value form."""
    descriptor = _parse_or_exit(connection_string)
    if _should_redact(config, redact):
        descriptor = redact_secrets(descriptor)
    click.echo(render(descriptor, _resolve_format(config, output_format)))


@cli.command("intercept")
@click.argument("key")
@click.argument("connection_string")
@click.option(
    "--to",
    "output_format",
    type=_FORMAT_CHOICE,
    default=None,
    help="Format of the remaining connection string",
)
@click.option(
    "--redact/--no-redact",
    default=None,
    help="Mask secrets (default: OMNIBASE_CONNSTR_REDACT_PASSWORD)",
)
@click.pass_obj
def intercept_cmd(
    config: ModelConnStrCliConfig,
    key: str,
    connection_string: str,
    output_format: str | None,
    redact: bool | None,
) -> None:
    """Extract parameter KEY and print it followed by the remaining string."""
    descriptor = _parse_or_exit(connection_string)
    result = intercept_param(key, descriptor)
    if result is None:
        console.print(f"[bold red]Parameter not found: {escape(key)}[/bold red]")
        raise SystemExit(1)

    value, remaining = result
    if _should_redact(config, redact):
        remaining = redact_secrets(remaining)
    click.echo(value)
    click.echo(render(remaining, _resolve_format(config, output_format)))


def _parse_or_exit(connection_string: str) -> ModelConnectionDescriptor:
    try:
        return parse(connection_string)
    except ConnectionStringParseError as e:
        console.print("[bold red]Invalid connection string[/bold red]")
        console.print(escape(e.format_pretty(connection_string)), highlight=False)
        raise SystemExit(1) from e


def _should_redact(config: ModelConnStrCliConfig, redact: bool | None) -> bool:
    return config.redact_password if redact is None else redact


def _resolve_format(
    config: ModelConnStrCliConfig,
    output_format: str | None,
) -> EnumConnectionStringFormat:
    if output_format is None:
        return config.output_format
    return EnumConnectionStringFormat(output_format)


def _optional(value: str | None) -> str:
    return "[dim](not set)[/dim]" if value is None else escape(value)


if __name__ == "__main__":
    cli()
