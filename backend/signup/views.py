"""signup/views.py — HTML shown when a signup post is rejected."""

from __future__ import annotations

from typing import Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader("signup", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_error_page(errors: Sequence[str], back_url: str) -> str:
    return _env.get_template("errors.html").render(errors=errors, back_url=back_url)
