"""Precomputed site stylesheet served at /site.css."""

from __future__ import annotations

from funicular.catalog import views
from funicular.markup.nodes import Element
from funicular.model.game import Game
from funicular.stylesheet.resolver import Resolver
from funicular.stylesheet.serializer import serialize_stylesheet
from funicular.stylesheet.synthesizer import merge_stylesheets, synthesize
from funicular.web.page import document
from funicular.web.routes.home import home_content

# Stand-in row so the table markup is part of the sample pages.
_SAMPLE_GAME = Game(slug="sample", name="Sample", description="Sample game")


def sample_documents() -> list[Element]:
    """One document per page variant the site can render."""
    return [
        document(home_content()),
        document(views.listing([_SAMPLE_GAME]), views.add_dialog()),
        document(views.listing([])),
        document(views.detail(_SAMPLE_GAME)),
    ]


def build_site_css(resolver: Resolver | None = None) -> str:
    """Synthesize every page variant and merge the results into one stylesheet."""
    sheets = [synthesize(tree, resolver) for tree in sample_documents()]
    return serialize_stylesheet(merge_stylesheets(*sheets))
