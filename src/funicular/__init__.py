"""Funicular: games catalog with on-demand utility CSS."""
from __future__ import annotations

from funicular.config import FunicularConfig
from funicular.web.page import compose
from funicular.stylesheet import synthesize

__all__ = [
    "FunicularConfig",
    "compose",
    "synthesize",
]
