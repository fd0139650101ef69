"""Markup fragments for the games catalog."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from funicular.markup.nodes import Element, el
from funicular.model.game import Game

BUTTON = (
    "bg-transparent border font-medium focus:outline-none px-4 py-2 focus:ring-4 "
    "rounded text-sm text-center hover:text-white inline-flex"
)

# Button tone -> palette color.
BUTTON_TONES = MappingProxyType({"primary": "violet", "success": "green", "error": "red"})

TD = "p-2 border border-slate-300 dark:border-slate-600"

DIALOG = (
    "p-4 dark:bg-slate-900 dark:text-white rounded border sm:min-w-sm "
    "open:flex open:flex-col gap-4 fixed inset-0 z-20"
)

FIELD = "rounded invalid:border-red dark:bg-slate-900"

LINK = "hover:text-violet-500"

EMPTY_MESSAGE = "No games..."


def button_classes(tone: str) -> str:
    """Class string for a button in one of the BUTTON_TONES."""
    color = BUTTON_TONES[tone]
    return (
        f"{BUTTON} hover:bg-{color}-500 dark:hover:bg-{color}-400 "
        f"border-{color}-600 dark:border-{color}-300 "
        f"focus:ring-{color}-400 dark:focus:ring-{color}-500 "
        f"text-{color}-600 dark:text-{color}-300"
    )


def _games_table(games: Sequence[Game]) -> Element:
    return el(
        "table",
        el(
            "thead",
            el(
                "tr",
                el(
                    "th",
                    el(
                        "input",
                        type_="checkbox",
                        name="slugs_all",
                        value="on",
                        title="Select all",
                        cls="dark:bg-slate-900",
                    ),
                    cls=TD,
                ),
                el("th", "Name", cls=TD),
            ),
        ),
        el(
            "tbody",
            [
                el(
                    "tr",
                    el(
                        "td",
                        el(
                            "input",
                            type_="checkbox",
                            name="slugs",
                            value=game.slug,
                            cls="dark:bg-slate-900",
                        ),
                        cls=TD,
                    ),
                    el("td", el("a", game.name, href=game.href, cls=LINK), cls=TD),
                )
                for game in games
            ],
        ),
    )


def listing(games: Sequence[Game]) -> Element:
    """The games page body: toolbar form plus the table or the empty state."""
    return el(
        "section",
        el("h1", "Games", cls="text-xl font-bold"),
        el(
            "form",
            el(
                "div",
                el(
                    "a",
                    el("span", cls="i-tabler-plus w-4 h-4"),
                    href="/games?add",
                    title="Add game",
                    cls=button_classes("primary"),
                ),
                el(
                    "button",
                    "Remove",
                    type_="submit",
                    name="submit",
                    value="remove",
                    cls=button_classes("error"),
                ),
                cls="flex flex-row gap-2",
            ),
            _games_table(games) if games else el("p", EMPTY_MESSAGE),
            method="post",
            action="/games",
            cls="flex flex-col gap-4 justify-center items-center",
        ),
        cls="flex flex-col gap-4 items-center",
    )


def add_dialog() -> Element:
    """Modal add form with a backdrop link that closes it."""
    dialog = el(
        "dialog",
        el("h2", "Add Game", cls="text-xl"),
        el(
            "form",
            el(
                "input",
                type_="text",
                name="name",
                placeholder="Name",
                required=True,
                autofocus=True,
                cls=FIELD,
            ),
            el("textarea", name="description", placeholder="Description", cls=FIELD),
            el(
                "div",
                el(
                    "button",
                    "Submit",
                    type_="submit",
                    name="submit",
                    value="add",
                    cls=button_classes("success"),
                ),
                el("a", "Close", href="/games", cls=button_classes("primary")),
                cls="flex justify-between",
            ),
            method="post",
            action="/games",
            cls="flex flex-col gap-4 justify-center",
        ),
        open=True,
        cls=DIALOG,
    )
    backdrop = el("a", href="/games", cls="fixed inset-0 z-10 bg-black/50 backdrop-blur-sm")
    return el("div", dialog, backdrop)


def detail(game: Game) -> Element:
    """Single game page."""
    return el(
        "article",
        el("h1", game.name, cls="text-xl font-bold"),
        el("p", game.description or "No description.", cls="p-2"),
        el("a", "Back", href="/games", cls=button_classes("primary")),
        cls="flex flex-col gap-4 items-center",
    )
