"""Config commands — manage subscription profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from armrest_cli.client.errors import error_handler
from armrest_cli.config.manager import ConfigManager
from armrest_cli.config.models import ArmrestConfiguration
from armrest_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage subscription profiles and CLI configuration.")
console = Console()

_SECRET_FIELDS = ("client_key", "token")


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(value: str) -> str:
    return value[:8] + "..." if len(value) > 8 else "***"


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    subscription: Annotated[str, typer.Option("--subscription", "-s", help="Subscription ID")],
    tenant: Annotated[Optional[str], typer.Option("--tenant", help="Tenant ID")] = None,
    client_id: Annotated[Optional[str], typer.Option("--client-id", help="Service principal ID")] = None,
    client_key: Annotated[Optional[str], typer.Option("--client-key", help="Service principal secret")] = None,
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="Access token")] = None,
    resource_group: Annotated[Optional[str], typer.Option("--group", "-g", help="Default resource group")] = None,
    max_threads: Annotated[int, typer.Option("--max-threads", help="Workers for cross-group listing")] = 10,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a subscription profile."""
    mgr = _get_manager()
    profile = ArmrestConfiguration(
        name=name,
        subscription_id=subscription,
        tenant_id=tenant,
        client_id=client_id,
        client_key=client_key,
        token=token,
        resource_group=resource_group,
        max_threads=max_threads,
        verify_ssl=not no_verify_ssl,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")
    if not profile.auth_configured:
        console.print(
            "[yellow]No credentials stored; supply --token or the AZURE_* "
            "environment variables when running commands.[/]"
        )


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'armrest config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Subscription", "Resource Group", "Auth", "Default"]
    rows = []
    for name, p in profiles.items():
        auth = "token" if p.token else "client" if p.client_key else "none"
        is_default = "*" if name == default else ""
        rows.append([name, p.subscription_id, p.resource_group, auth, is_default])

    output(
        {"profiles": [p.model_dump(exclude_none=True, exclude=set(_SECRET_FIELDS)) for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="Subscription Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    for field in _SECRET_FIELDS:
        if field in data:
            data[field] = _mask(data[field])

    output(data, fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default subscription profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a subscription profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
