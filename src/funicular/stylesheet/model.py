"""Stylesheet model: Variant, ClassToken, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class VariantKind(StrEnum):
    BREAKPOINT = "breakpoint"
    COLOR_SCHEME = "color_scheme"
    PSEUDO = "pseudo"


class Variant(StrEnum):
    """A prefix that changes where or when a utility applies."""

    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"
    DARK = "dark"
    HOVER = "hover"
    FOCUS = "focus"
    INVALID = "invalid"
    OPEN = "open"
    TARGET = "target"
    LAST = "last"

    @property
    def kind(self) -> VariantKind:
        if self in BREAKPOINTS:
            return VariantKind.BREAKPOINT
        if self is Variant.DARK:
            return VariantKind.COLOR_SCHEME
        return VariantKind.PSEUDO


# Minimum viewport widths for the responsive variants.
BREAKPOINTS: dict[Variant, str] = {
    Variant.SM: "640px",
    Variant.MD: "768px",
    Variant.LG: "1024px",
    Variant.XL: "1280px",
    Variant.XXL: "1536px",
}

# Selector suffixes for the pseudo-state variants.
PSEUDO_SELECTORS: dict[Variant, str] = {
    Variant.HOVER: ":hover",
    Variant.FOCUS: ":focus",
    Variant.INVALID: ":invalid",
    Variant.OPEN: "[open]",
    Variant.TARGET: ":target",
    Variant.LAST: ":last-child",
}


@dataclass(frozen=True)
class ClassToken:
    """A parsed utility class reference.

    ``raw`` is the class string exactly as written in the markup; the
    selector of the resolved rule is built from it.
    """

    raw: str
    utility: str
    variants: tuple[Variant, ...] = ()
    arbitrary_value: str | None = None


@dataclass(frozen=True)
class StyleRule:
    """A resolved CSS rule: one selector, an optional media condition, declarations."""

    selector: str
    declarations: tuple[tuple[str, str], ...]
    media_query: str | None = None

    @property
    def key(self) -> tuple[str, str | None]:
        """Deduplication key within a stylesheet."""
        return (self.selector, self.media_query)


@dataclass(frozen=True)
class Stylesheet:
    """An ordered collection of style rules, unique by ``(selector, media_query)``."""

    rules: tuple[StyleRule, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def selectors(self) -> tuple[str, ...]:
        return tuple(rule.selector for rule in self.rules)
