"""Resource commands — generic CRUD for resource-group based services.

Services are addressed by short name, for example:
  - ``vm`` (Microsoft.Compute/virtualMachines)
  - ``storage`` (Microsoft.Storage/storageAccounts)
  - ``deployment`` (Microsoft.Resources/deployments)

Use ``resource services`` to see all of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from armrest_cli.client.errors import error_handler
from armrest_cli.commands._common import (
    FormatOpt,
    GroupOpt,
    ProfileOpt,
    SubscriptionOpt,
    TokenOpt,
    load_body,
    make_client,
    parse_key_values,
    resolve_service,
)
from armrest_cli.output.formatter import output
from armrest_cli.output.tables import RESOURCE_COLUMNS, resource_rows
from armrest_cli.services import SERVICES

app = typer.Typer(
    name="resource",
    help="Generic CRUD for resources in resource groups (use 'resource services' for names).",
)
console = Console()

ServiceArg = Annotated[str, typer.Argument(help="Service name (e.g. vm, storage)")]
NameArg = Annotated[str, typer.Argument(help="Resource name")]


@app.command()
@error_handler
def services(fmt: FormatOpt = "table") -> None:
    """List the services this CLI can address."""
    columns = ["Name", "Provider", "Type", "API Version"]
    rows = [
        [name, cls.provider, cls.service_name, cls.api_version]
        for name, cls in sorted(SERVICES.items())
    ]
    data = [dict(zip(columns, row)) for row in rows]
    output(data, fmt, columns=columns, rows=rows, title="Services")


@app.command("list")
@error_handler
def list_resources(
    service: ServiceArg,
    all_groups: Annotated[
        bool,
        typer.Option("--all-groups", help="Query every resource group concurrently"),
    ] = False,
    group: GroupOpt = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List resources in one resource group, or in all of them."""
    if all_groups and group:
        console.print("[red]--all-groups and --group cannot be combined.[/]")
        raise typer.Exit(1)
    with make_client(profile, subscription, token, group) as client:
        svc = resolve_service(service, client)
        results = svc.list_in_all_groups() if all_groups else svc.list(group)
        output(
            results, fmt,
            columns=RESOURCE_COLUMNS, rows=resource_rows(results),
            title=f"Resources: {service}",
        )


@app.command("list-all")
@error_handler
def list_all(
    service: ServiceArg,
    filters: Annotated[
        list[str] | None,
        typer.Option("--filter", help="Keep resources where key=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List every resource of a service in the subscription."""
    with make_client(profile, subscription, token) as client:
        svc = resolve_service(service, client)
        results = svc.list_all(parse_key_values(filters))
        output(
            results, fmt,
            columns=RESOURCE_COLUMNS, rows=resource_rows(results),
            title=f"Resources: {service}",
        )


@app.command()
@error_handler
def show(
    service: ServiceArg,
    name: NameArg,
    group: GroupOpt = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single resource."""
    with make_client(profile, subscription, token, group) as client:
        obj = resolve_service(service, client).get(name, group)
        output(obj, fmt, kv=True, title=f"{service}: {name}")


@app.command()
@error_handler
def create(
    service: ServiceArg,
    name: NameArg,
    body: Annotated[
        str | None,
        typer.Option("--body", "-b", help="Request body as inline JSON"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", help="Request body JSON file", exists=True, dir_okay=False),
    ] = None,
    group: GroupOpt = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create or update a resource from a JSON body.

    The request starts a long-running operation; nothing is polled.
    """
    options = load_body(body, file)
    with make_client(profile, subscription, token, group) as client:
        obj = resolve_service(service, client).create(name, group, options)
        if obj is None:
            console.print(f"[green]Request for '{name}' accepted.[/]")
            return
        output(obj, fmt, kv=True, title=f"{service}: {name}")
        headers = obj.response_headers
        if headers and headers.azure_asyncoperation:
            console.print(f"[dim]Track with: {headers.azure_asyncoperation}[/]")


@app.command()
@error_handler
def delete(
    service: ServiceArg,
    name: NameArg,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    group: GroupOpt = None,
    profile: ProfileOpt = None,
    subscription: SubscriptionOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a resource."""
    if not force:
        if not Confirm.ask(f"Delete {service} '{name}'?"):
            console.print("Cancelled.")
            return
    with make_client(profile, subscription, token, group) as client:
        headers = resolve_service(service, client).delete(name, group)
        console.print(f"[green]Deletion of '{name}' started.[/]")
        tracking = headers.azure_asyncoperation or headers.location
        if tracking:
            console.print(f"[dim]Track with: {tracking}[/]")
