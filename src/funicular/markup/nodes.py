"""Markup tree model: Element, Text, and Raw nodes plus a small builder."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass
class Element:
    """An HTML element with ordered attributes, classes, and children.

    An attribute whose value is ``None`` is rendered as a boolean attribute
    (``<input required>``).  Classes are kept apart from ``attributes`` so the
    stylesheet synthesizer can read them without parsing attribute strings.
    """

    tag: str
    attributes: dict[str, str | None] = field(default_factory=dict)
    class_list: list[str] = field(default_factory=list)
    children: list[MarkupNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("Element tag must be a non-empty string")

    def append(self, *children: Child) -> Element:
        """Append children (strings become Text nodes) and return self."""
        self.children.extend(_flatten(children))
        return self


@dataclass(frozen=True)
class Text:
    """Character data; escaped when serialized."""

    content: str


@dataclass(frozen=True)
class Raw:
    """Trusted markup emitted verbatim (doctype, inline style bodies)."""

    content: str


MarkupNode = Union[Element, Text, Raw]
Child = Union[MarkupNode, str, None, Iterable["Child"]]


def _flatten(children: Iterable[Child]) -> Iterator[MarkupNode]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, str):
            yield Text(child)
        elif isinstance(child, (Element, Text, Raw)):
            yield child
        else:
            yield from _flatten(child)


def _attr_name(name: str) -> str:
    # type_ -> type, aria_label -> aria-label
    return name.rstrip("_").replace("_", "-")


def el(tag: str, *children: Child, cls: str = "", **attrs: str | bool | None) -> Element:
    """Build an Element.

    ``cls`` is a whitespace-separated class string.  Keyword attributes with
    value ``True`` become boolean attributes; ``False`` and ``None`` are
    omitted.  Children may be nodes, strings, ``None`` (skipped) or nested
    iterables of those.
    """
    attributes: dict[str, str | None] = {}
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        attributes[_attr_name(name)] = None if value is True else str(value)
    return Element(
        tag=tag,
        attributes=attributes,
        class_list=cls.split(),
        children=list(_flatten(children)),
    )


def walk(node: MarkupNode) -> Iterator[MarkupNode]:
    """Yield every node of the tree in depth-first pre-order."""
    stack: list[MarkupNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Element):
            stack.extend(reversed(current.children))
