from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class Game:
    slug: str
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.slug:
            raise ValueError("Game slug must be a non-empty string")

    @property
    def href(self) -> str:
        return f"/games/{self.slug}"


def slugify(name: str) -> str:
    """Lowercase ASCII slug of *name*: 'Ticket to Ride!' -> 'ticket-to-ride'."""
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_SLUG_RE.sub("-", ascii_name.lower()).strip("-")
