"""Services package."""

from .catalog_store import CatalogStore, catalog_scope

__all__ = ["CatalogStore", "catalog_scope"]
