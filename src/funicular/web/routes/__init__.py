from __future__ import annotations

from flask import current_app

from funicular.markup.nodes import MarkupNode
from funicular.web.page import page_html


def render_page(content: MarkupNode, overlay: MarkupNode | None = None) -> str:
    """Render a page with the app's resolver and CSS delivery settings."""
    return page_html(
        content,
        overlay,
        resolver=current_app.extensions["resolver"],
        inline_css=current_app.extensions["config"].inline_css,
    )
