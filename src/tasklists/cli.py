#!/usr/bin/env python3
"""
Command line entry point: ``tasklists serve`` and ``tasklists migrate ...``.
"""

import os
from pathlib import Path

import click
import uvicorn
from alembic import command
from alembic.config import Config

from tasklists import __version__
from tasklists.config import settings
from tasklists.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = click.Choice(["debug", "info", "warning", "error"])

# src/tasklists/cli.py -> repository root holding alembic.ini
PROJECT_ROOT = Path(__file__).resolve().parents[2]


@click.group()
@click.version_option(version=__version__, prog_name="tasklists")
def cli() -> None:
    """Task Lists backend: API server and schema migrations."""


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option("--log-level", default="info", type=LOG_LEVELS, help="Log level (default: info)")
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the GraphQL API server."""
    configure_logging(log_level, json_output=log_level != "debug")

    logger.info("Starting Task Lists API server", host=host, port=port, reload=reload)

    # Reloaded/forked workers re-import the app, so pass settings through the environment
    if log_level == "debug":
        os.environ["TASKLISTS_DEBUG"] = "true"
        os.environ["TASKLISTS_LOG_LEVEL"] = "debug"

    uvicorn.run(
        "tasklists.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1,
        log_level=log_level,
    )


def get_alembic_config() -> Config:
    """Load ``alembic.ini`` from the repository root."""
    alembic_ini = PROJECT_ROOT / "alembic.ini"
    if not alembic_ini.exists():
        raise click.ClickException(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config


def run_alembic(action: str, *args: str) -> None:
    """Run an Alembic command, turning failures into a non-zero exit."""
    config = get_alembic_config()
    try:
        getattr(command, action)(config, *args)
    except Exception as e:
        logger.error("Migration command failed", action=action, error=str(e))
        raise click.ClickException(str(e)) from e


@cli.group()
@click.option("--log-level", default="info", type=LOG_LEVELS, help="Log level (default: info)")
def migrate(log_level: str) -> None:
    """Manage the users, task_lists and todos schema."""
    configure_logging(log_level, json_output=False)


@migrate.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    logger.info("Upgrading database", revision=revision)
    run_alembic("upgrade", revision)
    logger.info("Database upgraded", revision=revision)


@migrate.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    logger.info("Downgrading database", revision=revision)
    run_alembic("downgrade", revision)
    logger.info("Database downgraded", revision=revision)


@migrate.command()
def current() -> None:
    """Show the revision the database is at."""
    run_alembic("current")


@migrate.command()
def history() -> None:
    """List known migrations."""
    run_alembic("history")


if __name__ == "__main__":
    cli()
