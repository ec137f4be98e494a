#!/usr/bin/env python3
"""
Main CLI entry point for the Library API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from library_api import __version__
from library_api.config import settings
from library_api.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="library-api")
def cli() -> None:
    """Library API CLI - run the server and manage the catalog database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Library API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Library API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    debug = log_level == "debug"
    settings.debug = debug
    settings.log_level = log_level
    # The --reload worker is a fresh process and reads these instead
    os.environ["LIBRARY_DEBUG"] = "true" if debug else "false"
    os.environ["LIBRARY_LOG_LEVEL"] = log_level

    try:
        if reload:
            uvicorn.run(
                "library_api.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from library_api.api.app import create_app

            uvicorn.run(
                create_app(),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Seed the database with the sample catalog."""
    from library_api.database.connection import close_store, init_store
    from library_api.database.seed_data import seed_initial_data

    configure_logging()

    async def do_seed():
        store = init_store()
        try:
            await store.ensure_indexes()
            created = await seed_initial_data(store)
            click.echo("✓ Database seeded successfully")
            click.echo(f"  Authors created: {created['authors']}")
            click.echo(f"  Books created: {created['books']}")
        except Exception as e:
            logger.error("Failed to seed database", error=str(e))
            click.echo(f"✗ Error seeding database: {e}", err=True)
            sys.exit(1)
        finally:
            close_store()

    asyncio.run(do_seed())


@cli.command("create-indexes")
def create_indexes() -> None:
    """Create the unique indexes the catalog relies on."""
    from library_api.database.connection import close_store, init_store

    configure_logging()

    async def do_create():
        store = init_store()
        try:
            await store.ensure_indexes()
            click.echo("✓ Indexes created")
        except Exception as e:
            logger.error("Failed to create indexes", error=str(e))
            click.echo(f"✗ Error creating indexes: {e}", err=True)
            sys.exit(1)
        finally:
            close_store()

    asyncio.run(do_create())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
