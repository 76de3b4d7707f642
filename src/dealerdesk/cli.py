"""Main DealerDesk CLI application."""

import typer
from rich.console import Console

from dealerdesk import __version__
from dealerdesk.commands import tenants, users


console = Console()

app = typer.Typer(
    name="dealerdesk",
    help="Provision tenants and users for DealerDesk.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(tenants.app, name="tenants")
app.add_typer(users.app, name="users")


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """DealerDesk CLI - Provision tenants and users."""
    if version:
        console.print(f"[bold cyan]dealerdesk[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
