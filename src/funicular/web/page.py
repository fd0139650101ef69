"""Page composer: wraps page content in the site shell and synthesizes its CSS."""

from __future__ import annotations

from dataclasses import dataclass

from funicular.markup.nodes import Element, MarkupNode, Raw, el
from funicular.markup.render import render_html
from funicular.stylesheet.resolver import DEFAULT_RESOLVER, Resolver
from funicular.stylesheet.serializer import serialize_stylesheet
from funicular.stylesheet.synthesizer import synthesize

__all__ = ["NavLink", "NAV_LINKS", "ComposedPage", "document", "compose", "page_html"]

TITLE = "Funicular"
DOCTYPE = "<!DOCTYPE html>"
STYLESHEET_HREF = "/site.css"

FAVICON = (
    "data:image/svg+xml;base64,PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciIHdpZHRo"
    "PSIxZW0iIGhlaWdodD0iMWVtIiB2aWV3Qm94PSIwIDAgMjQgMjQiPjxwYXRoIGZpbGw9Im5vbmUiIHN0cm9r"
    "ZT0iY3VycmVudENvbG9yIiBkPSJNNy40NzggMTguMTQ5YTEuNSAxLjUgMCAwIDEtMi45NTQuNTJtMTEuOTk5"
    "LTIuMjVhMS41IDEuNSAwIDAgMCAyLjk1NC0uNTJNOCAxMS43NThWNC42MzZtOCA1LjY0OFYzLjE4Mm02Ljk3"
    "IDYuMjNjLjAxOS0uNDc3LjAzLS45OC4wMy0xLjUwM0MyMyA0LjQxIDIyLjUgMiAyMi41IDJsLTIxIDMuODE4"
    "UzEgOC40MSAxIDExLjkxYzAgLjUyMy4wMTEgMS4wMjIuMDMgMS40OTJtMjEuOTQtMy45OUMyMi44NjIgMTIu"
    "MTI3IDIyLjUgMTQgMjIuNSAxNGwtMjEgMy44MThzLS4zNjItMS43NDMtLjQ3LTQuNDE3bTIxLjk0LTMuOTlj"
    "LTEwLjY1Ni45NzMtMjEuMzAyIDMuODE4LTIxLjk0IDMuOTlNMjMgMTlMMSAyMyIvPjwvc3ZnPg=="
)


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("/", "Home"),
    NavLink("/games", "Games"),
)


@dataclass(frozen=True)
class ComposedPage:
    """Rendered HTML together with the CSS synthesized from the same tree."""

    html: str
    css: str


def _nav() -> Element:
    return el(
        "nav",
        el(
            "ul",
            [
                el("li", el("a", link.label, href=link.href, cls="hover:text-violet-500"))
                for link in NAV_LINKS
            ],
            cls="flex flex-col gap-4 justify-center items-center sm:flex-row",
        ),
        cls="py-4",
    )


def document(
    content: MarkupNode,
    overlay: MarkupNode | None = None,
    *,
    title: str = TITLE,
    stylesheet_href: str | None = STYLESHEET_HREF,
    dark_mode: str = "media",
) -> Element:
    """Build the full ``<html>`` tree around *content*.

    *overlay* (e.g. a modal dialog) goes first in the body so it can cover the
    whole page.  With ``stylesheet_href=None`` no ``<link>`` is emitted.  In
    ``class`` dark mode the root carries the ``dark`` class that the
    ``.dark``-scoped rules hang off.
    """
    head = el(
        "head",
        el("meta", charset="utf-8"),
        el("meta", name="viewport", content="width=device-width,initial-scale=1"),
        el("title", title),
        el("link", rel="icon", type_="image/svg+xml", href=FAVICON),
        el("link", rel="stylesheet", type_="text/css", href=stylesheet_href)
        if stylesheet_href
        else None,
    )
    body = el(
        "body",
        overlay,
        _nav(),
        el(
            "main",
            content,
            cls="container flex flex-col gap-4 justify-center items-center mx-auto",
        ),
        cls="dark:text-white dark:bg-slate-900",
    )
    root_cls = "dark" if dark_mode == "class" else ""
    return el("html", head, body, lang="en", cls=root_cls)


def _style_body(css: str) -> str:
    # A literal "</" would end the <style> element early.
    return css.replace("</", "<\\/")


def compose(
    content: MarkupNode,
    overlay: MarkupNode | None = None,
    *,
    resolver: Resolver | None = None,
    inline_css: bool = False,
    title: str = TITLE,
) -> ComposedPage:
    """Assemble, synthesize, and serialize one page.

    The stylesheet is synthesized from the complete document, so shell and
    navigation classes are covered along with *content* and *overlay*.  With
    *inline_css* the CSS is also written into a ``<style>`` element in the
    head; otherwise the page links to the site stylesheet.
    """
    resolver = resolver or DEFAULT_RESOLVER
    tree = document(
        content,
        overlay,
        title=title,
        stylesheet_href=None if inline_css else STYLESHEET_HREF,
        dark_mode=resolver.dark_mode,
    )
    css = serialize_stylesheet(synthesize(tree, resolver))
    if inline_css:
        head = tree.children[0]
        assert isinstance(head, Element)
        head.append(el("style", Raw(_style_body(css))))
    return ComposedPage(html=DOCTYPE + render_html(tree), css=css)


def page_html(
    content: MarkupNode,
    overlay: MarkupNode | None = None,
    *,
    resolver: Resolver | None = None,
    inline_css: bool = False,
    title: str = TITLE,
) -> str:
    """Render one page to HTML.

    Linked pages rely on the precomputed site stylesheet, so synthesis only
    runs when the CSS is inlined.
    """
    if inline_css:
        return compose(
            content, overlay, resolver=resolver, inline_css=True, title=title
        ).html
    dark_mode = (resolver or DEFAULT_RESOLVER).dark_mode
    tree = document(content, overlay, title=title, dark_mode=dark_mode)
    return DOCTYPE + render_html(tree)
