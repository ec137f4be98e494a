"""
Document store module for the Library API
"""

from .connection import close_store, get_store, init_store
from .store import LibraryStore

__all__ = ["LibraryStore", "close_store", "get_store", "init_store"]
