"""Typer CLI root application."""

import typer

from wpl_common.core.config import get_settings
from wpl_common.core.logging import setup_logging

app = typer.Typer(name="wpl-common", help="Theme helper tools: geocoding cache, map markup, and icon picker")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from wpl_common.cli.db_cmd import db_app
    from wpl_common.cli.geocode_cmd import geocode_app
    from wpl_common.cli.icons_cmd import icons_app
    from wpl_common.cli.map_cmd import map_app

    app.add_typer(db_app, name="db", help="Option store database commands")
    app.add_typer(geocode_app, name="geocode", help="Geocoding commands")
    app.add_typer(map_app, name="map", help="Map widget commands")
    app.add_typer(icons_app, name="icons", help="Icon picker commands")


_register_subcommands()
