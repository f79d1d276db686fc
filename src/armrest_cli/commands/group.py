"""Resource group commands — list, show, create, delete."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from armrest_cli.client.errors import error_handler
from armrest_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    SubscriptionOpt,
    TokenOpt,
    make_client,
    parse_key_values,
)
from armrest_cli.output.formatter import output
from armrest_cli.services.resource_group import ResourceGroupService

app = typer.Typer(name="group", help="Manage resource groups.")
console = Console()


@app.command("list")
@error_handler
def list_groups(
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List resource groups in the subscription."""
    with make_client(profile, subscription, token) as client:
        groups = ResourceGroupService(client).list()
        columns = ["Name", "Location", "State"]
        rows = [[g.name, g.location, g.provisioning_state] for g in groups]
        output(groups, fmt, columns=columns, rows=rows, title="Resource Groups")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Resource group name")],
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a resource group."""
    with make_client(profile, subscription, token) as client:
        group = ResourceGroupService(client).get(name)
        output(group, fmt, kv=True, title=f"Resource Group: {name}")


@app.command()
@error_handler
def create(
    name: Annotated[str, typer.Argument(help="Resource group name")],
    location: Annotated[str, typer.Option("--location", "-l", help="Azure region")],
    tags: Annotated[
        list[str] | None,
        typer.Option("--tag", help="Tag as key=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create or update a resource group."""
    with make_client(profile, subscription, token) as client:
        group = ResourceGroupService(client).create(
            name, location, parse_key_values(tags) or None,
        )
        if fmt == "table":
            console.print(f"[green]Resource group '{name}' saved in {group.location}.[/]")
        output(group, fmt, kv=True, title=f"Resource Group: {name}")


@app.command()
@error_handler
def delete(
    name: Annotated[str, typer.Argument(help="Resource group name")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a resource group and every resource in it."""
    if not force:
        if not Confirm.ask(f"Delete resource group '{name}' and all its resources?"):
            console.print("Cancelled.")
            return
    with make_client(profile, subscription, token) as client:
        headers = ResourceGroupService(client).delete(name)
        console.print(f"[green]Deletion of '{name}' started.[/]")
        if headers.location:
            console.print(f"[dim]Track with: {headers.location}[/]")
