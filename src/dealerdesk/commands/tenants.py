"""Command: dealerdesk tenants - Provision and inspect tenants."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.commands import db
from dealerdesk.config import settings
from dealerdesk.core.utils.text import generate_slug
from dealerdesk.modules.tenants.models import Tenant
from dealerdesk.modules.tenants.repos import TenantRepository
from dealerdesk.modules.tenants.urls import tenant_urls


console = Console()

app = typer.Typer(help="Provision and inspect tenants.", no_args_is_help=True)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


@app.command("create")
def create(
    name: str = typer.Argument(..., help="Dealer name"),
    slug: str | None = typer.Option(None, "--slug", help="URL slug (default: from name)"),
    subdomain_prefix: str | None = typer.Option(
        None, "--subdomain-prefix", help="Extra host label routed to this tenant"
    ),
    path_prefix: str | None = typer.Option(
        None, "--path-prefix", help="Extra path segment routed to this tenant"
    ),
    inactive: bool = typer.Option(False, "--inactive", help="Create the tenant disabled"),
) -> None:
    """Create a tenant."""
    slug = slug or generate_slug(name)
    try:
        tenant = Tenant(
            name=name,
            slug=slug,
            subdomain_prefix=subdomain_prefix,
            path_prefix=path_prefix,
            is_active=not inactive,
        )
    except ValueError as e:
        _fail(str(e))

    async def operation(session: AsyncSession) -> str | None:
        repo = TenantRepository(session)
        if await repo.get_by_slug(tenant.slug) is not None:
            return f"A tenant with slug '{tenant.slug}' already exists"
        await repo.create(tenant)
        return None

    error = db.run(operation)
    if error:
        _fail(error)

    console.print(f"[green]Created tenant[/green] [bold]{name}[/bold] ({slug})")


@app.command("list")
def list_tenants() -> None:
    """List all tenants."""

    async def operation(session: AsyncSession) -> list[tuple[str, str, bool, str, str]]:
        tenants = await TenantRepository(session).list_all()
        return [
            (
                t.slug,
                t.name,
                t.is_active,
                t.subdomain_prefix or "",
                t.path_prefix or "",
            )
            for t in tenants
        ]

    rows = db.run(operation)
    if not rows:
        console.print("[yellow]No tenants yet.[/yellow]")
        return

    table = Table(title="Tenants", show_header=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Status", no_wrap=True)
    table.add_column("Subdomain prefix")
    table.add_column("Path prefix")

    for slug, name, is_active, subdomain_prefix, path_prefix in rows:
        status = "[green]active[/green]" if is_active else "[red]inactive[/red]"
        table.add_row(slug, name, status, subdomain_prefix, path_prefix)

    console.print()
    console.print(table)
    console.print()


@app.command("deactivate")
def deactivate(slug: str = typer.Argument(..., help="Tenant slug")) -> None:
    """Deactivate a tenant; its hosts and paths answer 404 from then on."""

    async def operation(session: AsyncSession) -> bool:
        tenant = await TenantRepository(session).get_by_slug(slug)
        if tenant is None:
            return False
        tenant.is_active = False
        await session.flush()
        return True

    if not db.run(operation):
        _fail(f"Tenant '{slug}' not found")

    console.print(f"[green]Deactivated tenant[/green] {slug}")


@app.command("urls")
def urls(slug: str = typer.Argument(..., help="Tenant slug")) -> None:
    """Show the URLs a tenant is reachable at."""

    async def operation(session: AsyncSession) -> bool:
        return await TenantRepository(session).get_by_slug(slug) is not None

    if not db.run(operation):
        _fail(f"Tenant '{slug}' not found")

    for kind, url in tenant_urls(
        slug, settings.primary_base_domain, settings.tenant_path_routing_enabled
    ).items():
        console.print(f"{kind}: {url}")
