"""Derive the minimal stylesheet for a markup tree."""

from __future__ import annotations

import logging

from funicular.markup.nodes import Element, MarkupNode, walk
from funicular.stylesheet.model import StyleRule, Stylesheet
from funicular.stylesheet.parser import parse_token
from funicular.stylesheet.resolver import DEFAULT_RESOLVER, Resolver

__all__ = ["synthesize", "merge_stylesheets"]

logger = logging.getLogger(__name__)


def synthesize(tree: MarkupNode, resolver: Resolver | None = None) -> Stylesheet:
    """Collect the classes used in *tree* and resolve them into a Stylesheet.

    Elements are visited depth-first in pre-order and each class list in
    declaration order.  A rule is kept the first time its
    ``(selector, media_query)`` key is seen; classes that do not resolve are
    skipped.  The tree is only read.
    """
    resolver = resolver or DEFAULT_RESOLVER
    rules: list[StyleRule] = []
    seen: set[tuple[str, str | None]] = set()
    classes = 0

    for node in walk(tree):
        if not isinstance(node, Element):
            continue
        for raw in node.class_list:
            classes += 1
            token = parse_token(raw)
            if token is None:
                continue
            rule = resolver.resolve(token)
            if rule is None or rule.key in seen:
                continue
            seen.add(rule.key)
            rules.append(rule)

    logger.debug("Synthesized %d rules from %d class references", len(rules), classes)
    return Stylesheet(rules=tuple(rules))


def merge_stylesheets(*stylesheets: Stylesheet) -> Stylesheet:
    """Concatenate stylesheets in order, keeping the first rule for each key."""
    rules: list[StyleRule] = []
    seen: set[tuple[str, str | None]] = set()
    for stylesheet in stylesheets:
        for rule in stylesheet.rules:
            if rule.key in seen:
                continue
            seen.add(rule.key)
            rules.append(rule)
    return Stylesheet(rules=tuple(rules))
