"""Shared helpers for CLI commands — client factory, options, argument parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from armrest_cli.client.transport import ArmClient
from armrest_cli.config.manager import ConfigManager
from armrest_cli.services import SERVICES, ResourceGroupBasedService

_console = Console()

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Subscription profile"),
]
SubscriptionOpt = Annotated[
    str | None,
    typer.Option("--subscription", help="Subscription ID override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Access token override"),
]
GroupOpt = Annotated[
    str | None,
    typer.Option("--group", "-g", help="Resource group (defaults to the profile's)"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format"),
]


def make_client(
    profile: str | None,
    subscription: str | None,
    token: str | None,
    group: str | None = None,
) -> ArmClient:
    """Create an ArmClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    configuration = mgr.resolve_configuration(
        profile_name=profile,
        subscription_id=subscription,
        token=token,
        resource_group=group,
    )
    return ArmClient(configuration)


def resolve_service(name: str, client: ArmClient) -> ResourceGroupBasedService:
    """Instantiate the service registered under *name*."""
    service_class = SERVICES.get(name)
    if service_class is None:
        known = ", ".join(sorted(SERVICES))
        _console.print(f"[red]Unknown service '{name}'. Choose one of: {known}.[/]")
        raise typer.Exit(1)
    return service_class(client)


def parse_key_values(pairs: list[str] | None) -> dict[str, Any]:
    """Turn ``key=value`` arguments into a dict."""
    result: dict[str, Any] = {}
    for item in pairs or []:
        if "=" not in item:
            _console.print(f"[red]Invalid argument '{item}'. Use key=value.[/]")
            raise typer.Exit(1)
        key, value = item.split("=", 1)
        result[key.strip()] = value.strip()
    return result


def load_body(body: str | None, file: Path | None) -> dict[str, Any]:
    """Load a JSON request body from an inline string or a file."""
    if body and file:
        _console.print("[red]Use either --body or --file, not both.[/]")
        raise typer.Exit(1)
    raw = file.read_text() if file else body
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        _console.print(f"[red]Invalid JSON body: {exc}[/]")
        raise typer.Exit(1)
    if not isinstance(data, dict):
        _console.print("[red]Request body must be a JSON object.[/]")
        raise typer.Exit(1)
    return data
