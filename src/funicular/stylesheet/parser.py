"""Hand-written parser for utility class tokens.

Syntax example:
    p-4                     utility only
    sm:flex-row             breakpoint variant
    dark:hover:text-white   variants compose left to right
    w-[37px]                arbitrary value in brackets

Unrecognized variant prefixes never raise: the whole string becomes one
opaque utility name, which the resolver will simply not find.
"""

from __future__ import annotations

import re

from funicular.stylesheet.model import ClassToken, Variant

__all__ = ["parse_token", "split_variants"]

VARIANT_SEPARATOR = ":"

_VARIANTS = {variant.value: variant for variant in Variant}

# Matches a utility carrying an arbitrary value: name-[value]
_ARBITRARY_RE = re.compile(
    r"""
    ^(?P<name>[^\[\]]+?)    # utility name before the bracket
    -\[                      # dash and opening bracket
    (?P<value>.+)            # the literal value, taken verbatim
    \]$                      # closing bracket ends the token
    """,
    re.VERBOSE | re.DOTALL,
)


def split_variants(raw: str) -> list[str]:
    """Split a class string on the variant separator, ignoring bracketed text."""
    segments: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(raw):
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == VARIANT_SEPARATOR and depth == 0:
            segments.append(raw[start:index])
            start = index + 1
    segments.append(raw[start:])
    return segments


def _split_arbitrary(segment: str) -> tuple[str, str | None]:
    match = _ARBITRARY_RE.match(segment)
    if match is None:
        return segment, None
    return match.group("name"), match.group("value")


def parse_token(raw: str) -> ClassToken | None:
    """Parse one class string into a ClassToken.

    Returns None only for the empty string. *raw* is kept exactly as given,
    so the selector built from it matches the literal class attribute value.
    """
    if not raw:
        return None

    *prefixes, last = split_variants(raw)
    variants: list[Variant] = []
    for prefix in prefixes:
        variant = _VARIANTS.get(prefix)
        if variant is None:
            return ClassToken(raw=raw, utility=raw)
        variants.append(variant)

    utility, arbitrary_value = _split_arbitrary(last)
    return ClassToken(
        raw=raw,
        utility=utility,
        variants=tuple(variants),
        arbitrary_value=arbitrary_value,
    )
