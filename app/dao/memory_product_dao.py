import asyncio
from typing import Dict, List, Optional

import structlog

from app.dao.product_repository import ProductRepository
from app.models.product import Product

logger = structlog.get_logger()


def _copy(product: Product) -> Product:
    # Callers must not be able to mutate stored records
    return Product(**product.model_dump())


class InMemoryProductDAO(ProductRepository):
    """Dict-backed product store. Ids start at 1 and are never reused."""

    def __init__(self):
        self._store: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def save(self, product: Product) -> Product:
        async with self._lock:
            if product.id is None:
                product.id = self._next_id
                self._next_id += 1
            else:
                self._next_id = max(self._next_id, product.id + 1)
            self._store[product.id] = _copy(product)
        logger.info("Saved Product", id=str(product.id), backend="memory")
        return product

    async def find_all(self, *, skip: int = 0, limit: Optional[int] = None) -> List[Product]:
        products = [_copy(self._store[key]) for key in sorted(self._store)]
        end = None if limit is None else skip + limit
        return products[skip:end]

    async def find_by_id(self, id: int) -> Optional[Product]:
        product = self._store.get(id)
        return _copy(product) if product is not None else None

    async def delete_by_id(self, id: int) -> None:
        async with self._lock:
            if self._store.pop(id, None) is not None:
                logger.info("Deleted Product", id=str(id), backend="memory")

    def clear(self) -> None:
        """Drop every product and restart ids at 1."""
        self._store.clear()
        self._next_id = 1


in_memory_product_dao = InMemoryProductDAO()
