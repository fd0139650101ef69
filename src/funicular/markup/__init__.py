from funicular.markup.nodes import Element, MarkupNode, Raw, Text, el, walk
from funicular.markup.render import render_html

__all__ = ["Element", "MarkupNode", "Raw", "Text", "el", "walk", "render_html"]
