"""Geocoding CLI commands for resolving addresses and inspecting the cache."""

import typer
from loguru import logger

geocode_app = typer.Typer()


@geocode_app.command("resolve")
def resolve(
    address: str = typer.Argument(..., help="Address to geocode (used verbatim as the cache key)"),
    api_key: str | None = typer.Option(None, "--api-key", help="Google Maps API key (defaults to GOOGLE_MAPS_API_KEY)"),
) -> None:
    """Resolve an address to coordinates, using the cache when possible."""
    from wpl_common.cli._resolver import open_resolver
    from wpl_common.core.config import get_settings
    from wpl_common.lib.geocoder import GeocodeFailure

    settings = get_settings()
    key = api_key if api_key is not None else settings.google_maps_api_key or ""

    with open_resolver(settings) as resolver:
        result = resolver.resolve(address, key)

    logger.bind(
        json_output=True,
        outcome=result.kind.value if isinstance(result, GeocodeFailure) else "resolved",
        option_name=resolver.option_name,
    ).info("Geocode resolve finished")

    if isinstance(result, GeocodeFailure):
        typer.echo(result.message, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{result.latitude}, {result.longitude}")


@geocode_app.command("cache")
def show_cache() -> None:
    """List cached addresses and their coordinates."""
    from wpl_common.cli._resolver import open_resolver
    from wpl_common.core.config import get_settings

    settings = get_settings()
    with open_resolver(settings) as resolver:
        entries = resolver.cached_addresses()

    if not entries:
        typer.echo("Coordinate cache is empty.")
        return
    for address, coordinates in entries.items():
        typer.echo(f"{address}\t{coordinates.latitude}, {coordinates.longitude}")
    typer.echo(f"\n{len(entries)} cached address(es)")
