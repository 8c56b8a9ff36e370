"""Userbase CLI application using Typer.

This module provides command-line utilities for the Userbase backend:
running the API server, creating the schema and generating secrets.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from userbase.infrastructure.persistence.sqlalchemy import Database
from userbase_config.settings import get_settings

app = typer.Typer(
    name="userbase",
    help="Userbase - registration and token authentication backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Listening port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes (development)"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "userbase.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,  # The app factory configures logging itself
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database schema (existing tables are left untouched)."""
    settings = get_settings()
    database = Database(settings.database_url, echo=settings.database_echo)

    async def _run() -> None:
        try:
            await database.create_tables()
        finally:
            await database.dispose()

    asyncio.run(_run())
    console.print(f"[green]Schema ready[/green] ({database!r})")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a signing secret for the Userbase configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Userbase Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 random bytes, well above the HS256 key size
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
