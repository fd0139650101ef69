"""Render a Stylesheet as CSS text."""

from __future__ import annotations

from funicular.stylesheet.model import StyleRule, Stylesheet

__all__ = ["serialize_rule", "serialize_stylesheet"]


def serialize_rule(rule: StyleRule) -> str:
    """Render one rule on a single line, wrapped in ``@media`` when needed."""
    body = "".join(f"{prop}:{value};" for prop, value in rule.declarations)
    css = f"{rule.selector}{{{body}}}"
    if rule.media_query:
        css = f"@media {rule.media_query}{{{css}}}"
    return css


def serialize_stylesheet(stylesheet: Stylesheet) -> str:
    """Render every rule in stylesheet order, one per line."""
    if not stylesheet.rules:
        return ""
    return "\n".join(serialize_rule(rule) for rule in stylesheet.rules) + "\n"
