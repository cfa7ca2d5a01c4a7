"""Jinja2 environment for server-rendered widget markup."""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared Jinja2 environment for the package templates."""
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: str, **context: object) -> str:
    """Render a package template with the supplied context."""
    return get_environment().get_template(template_name).render(**context)
