"""Map widget CLI commands."""

import typer

map_app = typer.Typer()


@map_app.command("render")
def render(
    address: str | None = typer.Option(None, "--address", help="Human-readable address"),
    maps_address: str | None = typer.Option(None, "--maps-address", help="Address or place ID used for geocoding"),
    latitude: float | None = typer.Option(None, "--latitude", help="Latitude, when no address is given"),
    longitude: float | None = typer.Option(None, "--longitude", help="Longitude, when no address is given"),
    marker: str | None = typer.Option(None, "--marker", help="Marker image URL"),
    marker_width: int | None = typer.Option(None, "--marker-width", help="Marker image width"),
    marker_height: int | None = typer.Option(None, "--marker-height", help="Marker image height"),
    css_class: str | None = typer.Option(None, "--class", help="Extra CSS class"),
    height: int | None = typer.Option(None, "--height", help="Map height in pixels"),
    zoom: float | None = typer.Option(None, "--zoom", help="Zoom level (1-20)"),
    saturation: float | None = typer.Option(None, "--saturation", help="Map saturation"),
    lightness: float | None = typer.Option(None, "--lightness", help="Map lightness"),
    hue: str | None = typer.Option(None, "--hue", help="Map hue colour"),
    api_key: str | None = typer.Option(None, "--api-key", help="Google Maps API key (defaults to GOOGLE_MAPS_API_KEY)"),
) -> None:
    """Print the map container markup."""
    from wpl_common.cli._resolver import open_resolver
    from wpl_common.core.config import get_settings
    from wpl_common.lib.maps import MapArgs, render_map

    settings = get_settings()
    key = api_key if api_key is not None else settings.google_maps_api_key or ""
    args = MapArgs(
        human_address=address,
        maps_address=maps_address,
        latitude=latitude,
        longitude=longitude,
        marker=marker,
        marker_width=marker_width,
        marker_height=marker_height,
        css_class=css_class,
        height=height,
        zoom=zoom,
        saturation=saturation,
        lightness=lightness,
        hue=hue,
    )

    with open_resolver(settings) as resolver:
        html = render_map(args, resolver, key)

    if html is None:
        typer.echo("No map could be rendered: no location given or geocoding failed.", err=True)
        raise typer.Exit(code=1)
    typer.echo(html)
