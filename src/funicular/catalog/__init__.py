from funicular.catalog.handler import CatalogHandler, CatalogState, state_from_args

__all__ = ["CatalogHandler", "CatalogState", "state_from_args"]
