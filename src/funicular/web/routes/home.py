from __future__ import annotations

from flask import Blueprint

from funicular.markup.nodes import Element, el
from funicular.web.routes import render_page

home_bp = Blueprint("home", __name__)


def home_content() -> Element:
    return el(
        "section",
        el("h1", "Hello, World!", cls="text-lg"),
        el(
            "p",
            "Consequatur accusamus itaque illo ut saepe corporis voluptatem. "
            "Aut provident quasi voluptatem. Sunt non fuga officiis fugit aliquam "
            "numquam hic. Voluptatem ratione magni dolor ut.",
            cls="p-2 text-red",
        ),
    )


@home_bp.route("/")
def index():
    """Hello page."""
    return render_page(home_content())
