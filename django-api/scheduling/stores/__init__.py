from scheduling.stores.interfaces import CatalogStore
from scheduling.stores.memory_store import InMemoryCatalogStore

__all__ = ["CatalogStore", "InMemoryCatalogStore"]
