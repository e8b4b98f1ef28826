"""Banner comment prepended to generated documents."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    trim_blocks=True,
    lstrip_blocks=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def render_banner(generator: str, version: str, source: str | None = None) -> list[str]:
    """Return the lines of the "generated file" warning comment."""
    rendered = _TEMPLATE_ENV.get_template("banner.md.j2").render(
        generator=generator,
        version=version,
        source=source,
    )
    return rendered.splitlines()
