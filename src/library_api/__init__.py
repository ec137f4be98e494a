"""
Library API
GraphQL catalog of books and authors backed by MongoDB
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
