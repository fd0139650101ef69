"""Tests for stylesheet synthesis from markup trees."""

from funicular.markup import Text, el
from funicular.stylesheet import (
    Resolver,
    StyleRule,
    Stylesheet,
    merge_stylesheets,
    parse_token,
    serialize_stylesheet,
    synthesize,
)


def _page():
    return el(
        "body",
        el("nav", el("a", "Home", cls="hover:text-violet-500 p-2"), cls="py-4"),
        el(
            "main",
            el("p", "one", cls="p-2 js-hook"),
            el("p", "two", cls="p-2 sm:flex-row"),
            cls="flex flex-col",
        ),
        cls="dark:bg-slate-900",
    )


def _classes(tree) -> set[str]:
    from funicular.markup import Element, walk

    return {c for node in walk(tree) if isinstance(node, Element) for c in node.class_list}


class TestOrdering:
    def test_pre_order_then_class_order(self):
        sheet = synthesize(_page())
        assert sheet.selectors == (
            ".dark\\:bg-slate-900",
            ".py-4",
            ".hover\\:text-violet-500:hover",
            ".p-2",
            ".flex",
            ".flex-col",
            ".sm\\:flex-row",
        )

    def test_parent_classes_come_before_children(self):
        tree = el("div", el("span", cls="flex"), cls="p-4")
        assert synthesize(tree).selectors == (".p-4", ".flex")


class TestDeduplication:
    def test_same_class_on_two_elements_yields_one_rule(self):
        tree = el("div", el("p", cls="p-2"), el("p", cls="p-2"))
        sheet = synthesize(tree)
        assert sheet.selectors == (".p-2",)

    def test_repeated_class_on_one_element(self):
        sheet = synthesize(el("div", cls="flex flex"))
        assert len(sheet) == 1


class TestUnknownTokens:
    def test_unknown_classes_are_skipped(self):
        sheet = synthesize(el("div", cls="js-hook totally-unknown p-2"))
        assert sheet.selectors == (".p-2",)

    def test_only_unknown_classes_gives_empty_stylesheet(self):
        sheet = synthesize(el("div", cls="js-hook"))
        assert sheet == Stylesheet()
        assert serialize_stylesheet(sheet) == ""

    def test_text_only_tree(self):
        assert synthesize(Text("hello")) == Stylesheet()


class TestMinimality:
    def test_every_rule_comes_from_a_class_in_the_tree(self):
        tree = _page()
        resolver = Resolver()
        expected = {
            resolver.resolve(parse_token(c)).selector
            for c in _classes(tree)
            if resolver.resolve(parse_token(c)) is not None
        }
        assert set(synthesize(tree).selectors) == expected


class TestDeterminism:
    def test_synthesis_is_byte_identical(self):
        tree = _page()
        first = serialize_stylesheet(synthesize(tree))
        second = serialize_stylesheet(synthesize(tree))
        assert first == second

    def test_tree_is_not_modified(self):
        tree = _page()
        before = repr(tree)
        synthesize(tree)
        assert repr(tree) == before


class TestResolverChoice:
    def test_class_dark_mode(self):
        sheet = synthesize(el("body", cls="dark:bg-slate-900"), Resolver(dark_mode="class"))
        assert sheet.rules == (
            StyleRule(
                selector=".dark .dark\\:bg-slate-900",
                declarations=(("background-color", "#0f172a"),),
            ),
        )


class TestMerge:
    def test_merge_keeps_first_rule_per_key(self):
        first = Stylesheet(rules=(StyleRule(".a", (("color", "red"),)),))
        second = Stylesheet(
            rules=(
                StyleRule(".a", (("color", "blue"),)),
                StyleRule(".b", (("color", "blue"),)),
            )
        )
        merged = merge_stylesheets(first, second)
        assert merged.rules == (
            StyleRule(".a", (("color", "red"),)),
            StyleRule(".b", (("color", "blue"),)),
        )

    def test_same_selector_different_media_kept(self):
        first = Stylesheet(rules=(StyleRule(".a", (("color", "red"),)),))
        second = Stylesheet(rules=(StyleRule(".a", (("color", "red"),), "(min-width: 640px)"),))
        assert len(merge_stylesheets(first, second)) == 2
