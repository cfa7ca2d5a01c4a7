"""Option store database CLI commands."""

import typer
from loguru import logger

db_app = typer.Typer()


@db_app.command("init")
def init() -> None:
    """Create the options table if it does not exist."""
    from wpl_common.core.config import get_settings
    from wpl_common.core.database import create_tables, dispose_engine, init_engine

    settings = get_settings()
    init_engine(settings.database_url)
    try:
        logger.info("Creating option store tables")
        create_tables()
        typer.echo("Option store ready.")
    finally:
        dispose_engine()
