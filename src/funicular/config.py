from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from funicular.stylesheet.resolver import DARK_MODES

SQLITE_URL_PREFIX = "sqlite:///"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class FunicularConfig:
    db_path: str = "funicular.db"
    db_timeout: float = 3.0  # seconds to wait on a locked database
    host: str = "0.0.0.0"
    port: int = 1111
    dark_mode: str = "media"  # "media" or "class"
    inline_css: bool = False  # inline <style> per page instead of /site.css
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.dark_mode not in DARK_MODES:
            raise ValueError(
                f"Invalid dark_mode {self.dark_mode!r}; expected one of {DARK_MODES}"
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port {self.port}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FunicularConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            db_path=db_path_from_url(env.get("DATABASE_URL", defaults.db_path)),
            db_timeout=float(env.get("FUNICULAR_DB_TIMEOUT", defaults.db_timeout)),
            host=env.get("FUNICULAR_HOST", defaults.host),
            port=int(env.get("FUNICULAR_PORT", defaults.port)),
            dark_mode=env.get("FUNICULAR_DARK_MODE", defaults.dark_mode),
            inline_css=env.get("FUNICULAR_INLINE_CSS", "").lower() in _TRUE_VALUES,
            log_level=env.get("FUNICULAR_LOG_LEVEL", defaults.log_level).upper(),
        )


def db_path_from_url(url: str) -> str:
    """Accept either a plain path or a ``sqlite:///path`` URL."""
    if url.startswith(SQLITE_URL_PREFIX):
        return url[len(SQLITE_URL_PREFIX):] or ":memory:"
    return url
