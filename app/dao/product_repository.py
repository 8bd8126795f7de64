"""Persistence contract for products.

The controller only talks to this interface; the SQL DAO and the
in-memory DAO are interchangeable implementations.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Store a product, assigning an id when it has none, and return it."""

    @abstractmethod
    async def find_all(self, *, skip: int = 0, limit: Optional[int] = None) -> List[Product]:
        """Return every stored product, ordered by id."""

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[Product]:
        """Return the product with this id, or None."""

    @abstractmethod
    async def delete_by_id(self, id: int) -> None:
        """Remove the product with this id. Unknown ids are ignored."""
