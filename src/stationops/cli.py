"""Command-line interface for StationOps."""

import asyncio

import click

from stationops.core.config import get_settings
from stationops.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(package_name="stationops", prog_name="StationOps")
def cli() -> None:
    """StationOps - radio station back-office API.

    Settings come from STATIONOPS_* environment variables or a .env file.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option("--workers", type=int, default=None, help="Worker processes (overrides config)")
@click.option("--reload/--no-reload", default=None, help="Auto-reload (default: on in development)")
def serve(host: str | None, port: int | None, workers: int | None, reload: bool | None) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    if reload is None:
        reload = settings.is_development

    configure_logging(settings)
    logger = get_logger(__name__)
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info(
        "Starting StationOps server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "stationops.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else (workers or settings.workers),
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all tables. Production databases use Alembic migrations."""
    from stationops.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo("ERROR: Running in production mode. Use migrations instead.", err=True)
        raise SystemExit(1)
    if not force:
        click.confirm("This will create all database tables. Continue?", abort=True)

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
        finally:
            await db.disconnect()

    asyncio.run(initialize())
    click.echo("Database initialized successfully.")


@cli.command("create-admin")
@click.option("--email", type=str, default=None, help="Admin email (prompts if omitted)")
@click.option("--name", "display_name", type=str, default=None, help="Display name")
@click.option("--password", type=str, default=None, help="Password (prompts if omitted)")
def create_admin(email: str | None, display_name: str | None, password: str | None) -> None:
    """Create an admin account.

    Admins can invite other users, including further admins.
    """
    from stationops.domain.services.account_service import (
        AccountService,
        AccountServiceError,
    )
    from stationops.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    email = email or click.prompt("Admin email", type=str)
    display_name = display_name or click.prompt(
        "Display name", type=str, default=settings.bootstrap_admin_name
    )
    password = password or click.prompt("Password", hide_input=True, confirmation_prompt=True)

    async def create() -> bool:
        db = get_db_manager()
        try:
            async with db.session() as session:
                return await AccountService(session).ensure_admin(
                    email=email,
                    password=password,
                    display_name=display_name,
                )
        finally:
            await db.disconnect()

    try:
        created = asyncio.run(create())
    except AccountServiceError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    if created:
        click.echo(f"Admin account created for {email}.")
    else:
        click.echo(f"An account for {email} already exists.")


def main() -> None:
    """Entry point for the ``stationops`` command and ``python -m stationops``."""
    cli()


if __name__ == "__main__":
    main()
