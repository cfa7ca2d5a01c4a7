"""Icon picker CLI commands."""

import typer

icons_app = typer.Typer()


@icons_app.command("list")
def list_icons(
    iconset: str = typer.Option("font-awesome", "--iconset", help="Icon set name"),
) -> None:
    """Print the CSS classes of an icon set."""
    from wpl_common.lib.icons import get_iconset

    try:
        icons = get_iconset(iconset)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    for icon in icons:
        typer.echo(icon)


@icons_app.command("picker")
def picker(
    iconset: str = typer.Option("font-awesome", "--iconset", help="Icon set name"),
    selected: str | None = typer.Option(None, "--selected", help="Icon class to highlight"),
) -> None:
    """Print the icon picker markup."""
    from wpl_common.lib.icons import render_icon_picker

    try:
        html = render_icon_picker(iconset, selected=selected)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    typer.echo(html)
