"""Catalog resource handler: list, add, and remove games."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum

from funicular.catalog import views
from funicular.markup.nodes import Element
from funicular.model.game import Game
from funicular.store.errors import StorageError
from funicular.store.repositories import GameRepository

logger = logging.getLogger(__name__)

ADD_DIALOG_PARAM = "add"


class CatalogState(StrEnum):
    LISTING = "listing"
    ADD_PENDING = "add_pending"


def state_from_args(args: Mapping[str, str]) -> CatalogState:
    """Derive the view state from query parameters (``?add`` opens the dialog)."""
    if ADD_DIALOG_PARAM in args:
        return CatalogState.ADD_PENDING
    return CatalogState.LISTING


class CatalogHandler:
    """Stateless per-request operations on the games catalog.

    Reads degrade to an empty listing when storage fails; writes let
    StorageError propagate to the transport.
    """

    def __init__(self, repo: GameRepository) -> None:
        self._repo = repo

    def list_games(self) -> tuple[Game, ...]:
        """All games in storage order, or an empty tuple if storage fails."""
        try:
            return self._repo.list_all()
        except StorageError as exc:
            logger.warning("Listing games failed: %s", exc)
            return ()

    def get(self, slug: str) -> Game | None:
        try:
            return self._repo.get(slug)
        except StorageError as exc:
            logger.warning("Loading game %r failed: %s", slug, exc)
            return None

    def add(self, name: str, description: str = "") -> Game:
        """Insert one game; the name is validated by the submitting form."""
        game = self._repo.create(name, description)
        logger.info("Added game %s (%r)", game.slug, game.name)
        return game

    def remove(self, slugs: Iterable[str] = (), all_flag: bool = False) -> int:
        """Delete every game when *all_flag* is set, else just *slugs*."""
        if all_flag:
            removed = self._repo.delete_all()
        else:
            removed = self._repo.delete_many(slugs)
        logger.info("Removed %d game(s)%s", removed, " (all)" if all_flag else "")
        return removed

    def render(
        self, state: CatalogState = CatalogState.LISTING
    ) -> tuple[Element, Element | None]:
        """Return the listing fragment and, when adding, the dialog overlay."""
        content = views.listing(self.list_games())
        overlay = views.add_dialog() if state is CatalogState.ADD_PENDING else None
        return content, overlay
