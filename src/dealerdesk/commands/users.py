"""Command: dealerdesk users - Provision users inside a tenant."""

from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession

from dealerdesk.commands import db
from dealerdesk.core.errors import ConflictError
from dealerdesk.modules.tenants.repos import TenantRepository
from dealerdesk.modules.users.schemas import UserCreate
from dealerdesk.modules.users.services import UserService


console = Console()

app = typer.Typer(help="Provision users.", no_args_is_help=True)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


@app.command("create")
def create(
    tenant: str = typer.Option(..., "--tenant", "-t", help="Tenant slug"),
    email: str = typer.Option(..., "--email", help="Sign-in email"),
    full_name: str = typer.Option(..., "--full-name", help="Display name"),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, help="Initial password"
    ),
) -> None:
    """Create a user who can sign in to one tenant."""
    try:
        data = UserCreate(email=email, full_name=full_name, password=password)
    except ValidationError as e:
        _fail("; ".join(error["msg"] for error in e.errors()))

    async def operation(session: AsyncSession) -> str | None:
        found = await TenantRepository(session).get_by_slug(tenant)
        if found is None:
            return f"Tenant '{tenant}' not found"
        try:
            await UserService(session).create_user(data, found.id)
        except ConflictError as e:
            return e.message
        return None

    error = db.run(operation)
    if error:
        _fail(error)

    console.print(f"[green]Created user[/green] {data.email} in {tenant}")
