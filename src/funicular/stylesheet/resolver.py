"""Resolve parsed class tokens into concrete style rules."""

from __future__ import annotations

import logging
import re

from funicular.stylesheet.model import (
    BREAKPOINTS,
    PSEUDO_SELECTORS,
    ClassToken,
    StyleRule,
    VariantKind,
)
from funicular.stylesheet.rules import Declarations, Utility, lookup

__all__ = ["DARK_MODES", "Resolver", "escape_class", "resolve"]

logger = logging.getLogger(__name__)

DARK_MODES = ("media", "class")

DARK_MEDIA_QUERY = "(prefers-color-scheme: dark)"
DARK_CLASS_SELECTOR = ".dark"

_IDENT_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9_-]")
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")
_ALPHA_RE = re.compile(r"^(100|[1-9]?[0-9])$")


def escape_class(name: str) -> str:
    """Escape a class name for use in a CSS class selector."""
    escaped = _IDENT_UNSAFE_RE.sub(lambda m: "\\" + m.group(0), name)
    if name[:1].isdigit():
        # A leading digit must be written as a code point escape.
        escaped = f"\\3{name[0]} {escaped[1:]}"
    return escaped


def _with_alpha(value: str, alpha: str) -> str | None:
    match = _HEX_RE.match(value)
    if match is None:
        return None
    digits = match.group(1)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgb({red} {green} {blue} / {int(alpha) / 100:g})"


def _color_with_alpha(utility: Utility, alpha: str) -> Declarations | None:
    if not utility.color or not _ALPHA_RE.match(alpha):
        return None
    declarations = []
    for prop, value in utility.declarations:
        converted = _with_alpha(value, alpha)
        if converted is None:
            return None
        declarations.append((prop, converted))
    return tuple(declarations)


def _declarations(token: ClassToken) -> Declarations | None:
    if token.arbitrary_value is not None:
        utility = lookup(token.utility)
        if utility is None or not utility.arbitrary:
            return None
        return tuple((prop, token.arbitrary_value) for prop in utility.arbitrary)

    utility = lookup(token.utility)
    if utility is not None:
        return utility.declarations or None

    base, sep, alpha = token.utility.rpartition("/")
    if sep and base:
        utility = lookup(base)
        if utility is not None:
            return _color_with_alpha(utility, alpha)
    return None


class Resolver:
    """Turns ClassTokens into StyleRules using the rule table.

    ``dark_mode`` selects how the ``dark:`` variant is expressed:

    - ``media``: a ``(prefers-color-scheme: dark)`` media condition.
    - ``class``: the rule only applies below an element with class ``dark``.
    """

    def __init__(self, dark_mode: str = "media") -> None:
        if dark_mode not in DARK_MODES:
            raise ValueError(
                f"Invalid dark mode {dark_mode!r}; expected one of {DARK_MODES}"
            )
        self.dark_mode = dark_mode

    def resolve(self, token: ClassToken) -> StyleRule | None:
        """Return the rule for *token*, or None when it is not a known utility."""
        declarations = _declarations(token)
        if declarations is None:
            logger.debug("No utility for class %r", token.raw)
            return None

        selector = "." + escape_class(token.raw)
        conditions: list[str] = []
        dark_ancestor = False
        for variant in token.variants:
            kind = variant.kind
            if kind is VariantKind.BREAKPOINT:
                conditions.append(f"(min-width: {BREAKPOINTS[variant]})")
            elif kind is VariantKind.COLOR_SCHEME:
                if self.dark_mode == "media":
                    conditions.append(DARK_MEDIA_QUERY)
                else:
                    dark_ancestor = True
            else:
                selector += PSEUDO_SELECTORS[variant]
        if dark_ancestor:
            selector = f"{DARK_CLASS_SELECTOR} {selector}"

        return StyleRule(
            selector=selector,
            declarations=declarations,
            media_query=" and ".join(conditions) or None,
        )


DEFAULT_RESOLVER = Resolver()


def resolve(token: ClassToken) -> StyleRule | None:
    """Resolve *token* with the default (media query) dark mode."""
    return DEFAULT_RESOLVER.resolve(token)
