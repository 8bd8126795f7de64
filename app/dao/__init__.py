# Export all DAO classes
from .base_dao import BaseDAO
from .product_repository import ProductRepository
from .product_dao import ProductDAO
from .memory_product_dao import InMemoryProductDAO, in_memory_product_dao

__all__ = [
    "BaseDAO",
    "ProductRepository",
    "ProductDAO",
    "InMemoryProductDAO",
    "in_memory_product_dao",
]
