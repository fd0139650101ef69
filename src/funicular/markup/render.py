"""HTML serializer for markup trees."""

from __future__ import annotations

from markupsafe import escape

from funicular.markup.nodes import Element, MarkupNode, Raw, Text

__all__ = ["render_html"]

# Elements that never have content or a closing tag.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def _render_attributes(element: Element) -> str:
    parts: list[str] = []
    for name, value in element.attributes.items():
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(value)}"')
    if element.class_list:
        parts.append(f' class="{escape(" ".join(element.class_list))}"')
    return "".join(parts)


def _render(node: MarkupNode, out: list[str]) -> None:
    if isinstance(node, Text):
        out.append(str(escape(node.content)))
        return
    if isinstance(node, Raw):
        out.append(node.content)
        return
    out.append(f"<{node.tag}{_render_attributes(node)}>")
    if node.tag in VOID_ELEMENTS:
        return
    for child in node.children:
        _render(child, out)
    out.append(f"</{node.tag}>")


def render_html(node: MarkupNode) -> str:
    """Serialize a markup tree to an HTML string.

    Text content and attribute values are escaped; ``Raw`` nodes are written
    as-is.  The tree is only read.
    """
    out: list[str] = []
    _render(node, out)
    return "".join(out)
