#!/usr/bin/env python3
"""
Main CLI entry point for the foodgraph server.
"""

import os
import sys

import click
import uvicorn

from foodgraph import __version__
from foodgraph.config import load_settings
from foodgraph.errors import SchemaCompositionError, StartupConfigError
from foodgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="foodgraph")
def cli() -> None:
    """foodgraph CLI - serve the food GraphQL API and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: LOG_LEVEL or info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str | None) -> None:
    """Start the foodgraph API server."""
    try:
        settings = load_settings()
    except StartupConfigError as e:
        configure_logging(debug=True)
        logger.error("Refusing to start", error=str(e))
        sys.exit(1)

    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(debug=not settings.is_production, level=settings.log_level)

    logger.info(
        "Starting foodgraph API server",
        host=settings.host,
        port=settings.port,
        reload=reload,
        node_env=settings.node_env,
    )

    try:
        if reload:
            # The reloader imports the app factory itself and reads settings from env
            os.environ["HOST"] = settings.host
            os.environ["PORT"] = str(settings.port)
            os.environ["LOG_LEVEL"] = settings.log_level
            uvicorn.run(
                "foodgraph.api.app:create_app",
                factory=True,
                host=settings.host,
                port=settings.port,
                reload=True,
                log_level=settings.log_level.lower(),
            )
        else:
            from foodgraph.api.app import create_app

            uvicorn.run(
                create_app(settings),
                host=settings.host,
                port=settings.port,
                log_level=settings.log_level.lower(),
            )
    except SchemaCompositionError as e:
        logger.error("GraphQL schema composition failed", error=str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")


@cli.command()
def schema() -> None:
    """Print the composed GraphQL schema (SDL)."""
    from foodgraph.graphql.schema import print_schema

    configure_logging(level="warning")
    try:
        click.echo(print_schema())
    except SchemaCompositionError as e:
        click.echo(f"✗ Schema composition failed: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
