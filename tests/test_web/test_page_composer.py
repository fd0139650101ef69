from __future__ import annotations

from funicular.markup import el
from funicular.stylesheet import Resolver
from funicular.web import page as page_module
from funicular.web.page import NAV_LINKS, ComposedPage, compose, document, page_html


class TestDocument:
    def test_shell_structure(self):
        tree = document(el("p", "x"))
        assert tree.tag == "html"
        assert [c.tag for c in tree.children] == ["head", "body"]
        body = tree.children[1]
        assert [c.tag for c in body.children] == ["nav", "main"]

    def test_overlay_goes_first_in_body(self):
        tree = document(el("p", "x"), el("dialog"))
        body = tree.children[1]
        assert [c.tag for c in body.children] == ["dialog", "nav", "main"]

    def test_nav_built_from_links(self):
        tree = document(el("p"))
        nav = tree.children[1].children[0]
        items = nav.children[0].children
        assert len(items) == len(NAV_LINKS)

    def test_root_has_no_class_in_media_mode(self):
        assert document(el("p")).class_list == []

    def test_root_marked_dark_in_class_mode(self):
        assert document(el("p"), dark_mode="class").class_list == ["dark"]

    def test_no_stylesheet_link(self):
        tree = document(el("p"), stylesheet_href=None)
        head = tree.children[0]
        assert not any(
            c.tag == "link" and c.attributes.get("rel") == "stylesheet" for c in head.children
        )


class TestCompose:
    def test_returns_html_and_css(self):
        page = compose(el("h1", "Hi", cls="text-lg"))
        assert isinstance(page, ComposedPage)
        assert page.html.startswith('<!DOCTYPE html><html lang="en">')
        assert ".text-lg{" in page.css

    def test_css_includes_shell_classes(self):
        page = compose(el("p", "plain"))
        assert ".sm\\:flex-row" in page.css
        assert ".hover\\:text-violet-500:hover" in page.css
        assert ".container{width:100%;}" in page.css

    def test_css_includes_overlay_classes(self):
        without = compose(el("p"))
        with_overlay = compose(el("p"), el("div", cls="backdrop-blur-sm"))
        assert ".backdrop-blur-sm" not in without.css
        assert ".backdrop-blur-sm" in with_overlay.css

    def test_linked_css_not_inlined(self):
        page = compose(el("p"))
        assert "<style>" not in page.html
        assert 'href="/site.css"' in page.html

    def test_inline_css(self):
        page = compose(el("p", cls="p-2"), inline_css=True)
        assert f"<style>{page.css}</style>" in page.html
        assert 'href="/site.css"' not in page.html

    def test_inline_css_cannot_close_style_early(self):
        page = compose(el("p", cls="bg-[</style>]"), inline_css=True)
        assert "background-color:</style>;" in page.css
        assert page.html.count("</style>") == 1

    def test_deterministic(self):
        content = el("div", el("p", cls="p-2 dark:hover:text-violet-300"), cls="flex")
        assert compose(content) == compose(content)

    def test_resolver_is_used(self):
        page = compose(el("p"), resolver=Resolver(dark_mode="class"))
        assert ".dark .dark\\:text-white{color:#ffffff;}" in page.css

    def test_custom_title(self):
        page = compose(el("p"), title="Games")
        assert "<title>Games</title>" in page.html

    def test_class_dark_mode_root_activates_dark_rules(self):
        page = compose(el("p", "x"), resolver=Resolver(dark_mode="class"))
        assert '<html lang="en" class="dark">' in page.html
        assert ".dark .dark\\:text-white{color:#ffffff;}" in page.css

    def test_media_dark_mode_root_is_unmarked(self):
        page = compose(el("p", "x"))
        assert page.html.startswith('<!DOCTYPE html><html lang="en"><head>')


class TestPageHtml:
    def test_linked_page_matches_compose(self):
        content = el("p", "x", cls="p-2")
        assert page_html(content) == compose(content).html

    def test_linked_page_skips_synthesis(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("synthesized a linked page")

        monkeypatch.setattr(page_module, "synthesize", fail)
        html = page_html(el("p", "x"))
        assert 'href="/site.css"' in html

    def test_linked_page_keeps_dark_class(self):
        html = page_html(el("p"), resolver=Resolver(dark_mode="class"))
        assert '<html lang="en" class="dark">' in html

    def test_inline_page_matches_compose(self):
        content = el("p", "x", cls="p-2")
        assert page_html(content, inline_css=True) == compose(content, inline_css=True).html
