"""The utility rule table.

Maps a utility name (``p-4``, ``text-violet-500``, ``flex``) to a template
holding its declarations.  Names that accept a bracketed arbitrary value
(``w-[37px]``) are keyed by their bare prefix (``w``) and list the properties
the value is written to.

The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote

from funicular.stylesheet.palette import (
    BLURS,
    COLORS,
    CONTAINER_SIZES,
    DEFAULT_SHADE,
    FONT_SIZES,
    FONT_WEIGHTS,
    PLAIN_COLORS,
    RADII,
    SPACING,
)

__all__ = ["Utility", "RULE_TABLE", "lookup"]

Declarations = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class Utility:
    """Declaration template for one utility name.

    ``declarations`` are used when the token has no arbitrary value;
    ``arbitrary`` lists the properties an arbitrary value is written to.
    ``color`` marks utilities whose value accepts an opacity modifier.
    """

    declarations: Declarations = ()
    arbitrary: tuple[str, ...] = ()
    color: bool = False


def _decl(*pairs: tuple[str, str]) -> Utility:
    return Utility(declarations=tuple(pairs))


_SPACING_PROPERTIES: dict[str, tuple[str, ...]] = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
    "gap": ("gap",),
    "gap-x": ("column-gap",),
    "gap-y": ("row-gap",),
    "w": ("width",),
    "h": ("height",),
    "inset": ("inset",),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
}

_COLOR_PROPERTIES: dict[str, str] = {
    "text": "color",
    "bg": "background-color",
    "border": "border-color",
    "ring": "--un-ring-color",
    "outline": "outline-color",
}

_RING_COLOR = "var(--un-ring-color, rgb(147 197 253 / 0.5))"

# Tabler icons, 24x24 stroke paths.
_TABLER_ICONS: dict[str, str] = {
    "plus": "M12 5v14m-7-7h14",
    "x": "M18 6L6 18M6 6l12 12",
    "trash": "M4 7h16m-10 4v6m4-6v6M5 7l1 12a2 2 0 0 0 2 2h8a2 2 0 0 0 2-2l1-12M9 7V4a1 1 0 0 1 1-1h4a1 1 0 0 1 1 1v3",
}


def _icon(path: str) -> Utility:
    svg = (
        "<svg xmlns='http://www.w3.org/2000/svg' width='24' height='24' viewBox='0 0 24 24'>"
        "<path fill='none' stroke='currentColor' stroke-linecap='round' "
        f"stroke-linejoin='round' stroke-width='2' d='{path}'/></svg>"
    )
    url = 'url("data:image/svg+xml;utf8,' + quote(svg, safe=" '=:/;,.-") + '")'
    return _decl(
        ("--un-icon", url),
        ("-webkit-mask", "var(--un-icon) no-repeat"),
        ("mask", "var(--un-icon) no-repeat"),
        ("-webkit-mask-size", "100% 100%"),
        ("mask-size", "100% 100%"),
        ("background-color", "currentColor"),
        ("color", "inherit"),
        ("display", "inline-block"),
        ("width", "1.2em"),
        ("height", "1.2em"),
    )


def _layout() -> dict[str, Utility]:
    table: dict[str, Utility] = {
        "block": _decl(("display", "block")),
        "inline-block": _decl(("display", "inline-block")),
        "inline": _decl(("display", "inline")),
        "flex": _decl(("display", "flex")),
        "inline-flex": _decl(("display", "inline-flex")),
        "grid": _decl(("display", "grid")),
        "hidden": _decl(("display", "none")),
        "flex-row": _decl(("flex-direction", "row")),
        "flex-col": _decl(("flex-direction", "column")),
        "flex-wrap": _decl(("flex-wrap", "wrap")),
        "flex-1": _decl(("flex", "1 1 0%")),
        "grow": _decl(("flex-grow", "1")),
        "container": _decl(("width", "100%")),
        "static": _decl(("position", "static")),
        "fixed": _decl(("position", "fixed")),
        "absolute": _decl(("position", "absolute")),
        "relative": _decl(("position", "relative")),
        "sticky": _decl(("position", "sticky")),
        "z": Utility(arbitrary=("z-index",)),
        "grid-cols": Utility(arbitrary=("grid-template-columns",)),
    }
    for name in ("start", "center", "end", "between", "around", "evenly"):
        value = {"start": "flex-start", "end": "flex-end"}.get(name, name)
        if name in ("between", "around", "evenly"):
            value = f"space-{name}"
        table[f"justify-{name}"] = _decl(("justify-content", value))
    for name in ("start", "center", "end", "baseline", "stretch"):
        value = {"start": "flex-start", "end": "flex-end"}.get(name, name)
        table[f"items-{name}"] = _decl(("align-items", value))
    for level in ("0", "10", "20", "30", "40", "50"):
        table[f"z-{level}"] = _decl(("z-index", level))
    for columns in range(1, 13):
        table[f"grid-cols-{columns}"] = _decl(
            ("grid-template-columns", f"repeat({columns}, minmax(0, 1fr))")
        )
    return table


def _spacing() -> dict[str, Utility]:
    table: dict[str, Utility] = {}
    for prefix, properties in _SPACING_PROPERTIES.items():
        table[prefix] = Utility(arbitrary=properties)
        for step, value in SPACING.items():
            table[f"{prefix}-{step}"] = _decl(*((prop, value) for prop in properties))
    for prefix in ("m", "mx", "my", "mt", "mr", "mb", "ml", "w", "h"):
        properties = _SPACING_PROPERTIES[prefix]
        table[f"{prefix}-auto"] = _decl(*((prop, "auto") for prop in properties))
    table["w-full"] = _decl(("width", "100%"))
    table["w-screen"] = _decl(("width", "100vw"))
    table["h-full"] = _decl(("height", "100%"))
    table["h-screen"] = _decl(("height", "100vh"))
    table["min-w"] = Utility(arbitrary=("min-width",))
    table["max-w"] = Utility(arbitrary=("max-width",))
    for size, value in CONTAINER_SIZES.items():
        table[f"min-w-{size}"] = _decl(("min-width", value))
        table[f"max-w-{size}"] = _decl(("max-width", value))
    return table


def _typography() -> dict[str, Utility]:
    table: dict[str, Utility] = {
        "text-left": _decl(("text-align", "left")),
        "text-center": _decl(("text-align", "center")),
        "text-right": _decl(("text-align", "right")),
        "underline": _decl(("text-decoration-line", "underline")),
        "no-underline": _decl(("text-decoration-line", "none")),
        "uppercase": _decl(("text-transform", "uppercase")),
        "italic": _decl(("font-style", "italic")),
        "font": Utility(arbitrary=("font-weight",)),
    }
    for size, (font_size, line_height) in FONT_SIZES.items():
        table[f"text-{size}"] = _decl(("font-size", font_size), ("line-height", line_height))
    for weight, value in FONT_WEIGHTS.items():
        table[f"font-{weight}"] = _decl(("font-weight", value))
    return table


def _colors() -> dict[str, Utility]:
    table: dict[str, Utility] = {}
    for prefix, prop in _COLOR_PROPERTIES.items():
        for name, value in PLAIN_COLORS.items():
            table[f"{prefix}-{name}"] = Utility(declarations=((prop, value),), color=True)
        for name, shades in COLORS.items():
            table[f"{prefix}-{name}"] = Utility(
                declarations=((prop, shades[DEFAULT_SHADE]),), color=True
            )
            for shade, value in shades.items():
                table[f"{prefix}-{name}-{shade}"] = Utility(
                    declarations=((prop, value),), color=True
                )
    table["text"] = Utility(arbitrary=("color",))
    table["bg"] = Utility(arbitrary=("background-color",))
    return table


def _borders() -> dict[str, Utility]:
    table: dict[str, Utility] = {
        "border": Utility(
            declarations=(("border-width", "1px"), ("border-style", "solid")),
            arbitrary=("border-color",),
        ),
        "rounded": Utility(
            declarations=(("border-radius", RADII[""]),),
            arbitrary=("border-radius",),
        ),
    }
    for width in ("0", "2", "4", "8"):
        table[f"border-{width}"] = _decl(("border-width", f"{width}px"), ("border-style", "solid"))
    for side, prop in (("t", "top"), ("r", "right"), ("b", "bottom"), ("l", "left")):
        table[f"border-{side}"] = _decl(
            (f"border-{prop}-width", "1px"), (f"border-{prop}-style", "solid")
        )
    for size, value in RADII.items():
        if size:
            table[f"rounded-{size}"] = _decl(("border-radius", value))
    return table


def _effects() -> dict[str, Utility]:
    table: dict[str, Utility] = {
        "outline-none": _decl(("outline", "2px solid transparent"), ("outline-offset", "2px")),
        "ring": _decl(("box-shadow", f"0 0 0 3px {_RING_COLOR}")),
        "opacity": Utility(arbitrary=("opacity",)),
        "shadow": _decl(("box-shadow", "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)")),
        "shadow-lg": _decl(
            ("box-shadow", "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)")
        ),
        "cursor-pointer": _decl(("cursor", "pointer")),
    }
    for width in ("0", "1", "2", "4", "8"):
        table[f"ring-{width}"] = _decl(("box-shadow", f"0 0 0 {width}px {_RING_COLOR}"))
    for level in ("0", "25", "50", "75", "100"):
        table[f"opacity-{level}"] = _decl(("opacity", f"{int(level) / 100:g}"))
    for size, value in BLURS.items():
        name = f"backdrop-blur-{size}" if size else "backdrop-blur"
        table[name] = _decl(("backdrop-filter", f"blur({value})"))
    for name, path in _TABLER_ICONS.items():
        table[f"i-tabler-{name}"] = _icon(path)
    return table


def _build_table() -> Mapping[str, Utility]:
    table: dict[str, Utility] = {}
    for section in (_layout, _spacing, _typography, _colors, _borders, _effects):
        table.update(section())
    return MappingProxyType(table)


RULE_TABLE: Mapping[str, Utility] = _build_table()


def lookup(name: str) -> Utility | None:
    """Return the template for a utility name, or None if it is not a utility."""
    return RULE_TABLE.get(name)
