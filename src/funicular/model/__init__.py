from funicular.model.game import Game, slugify

__all__ = ["Game", "slugify"]
