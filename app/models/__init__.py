# Import all models so SQLModel.metadata knows every table
from .product import Product, ProductCreate, ProductRead

__all__ = [
    "Product", "ProductCreate", "ProductRead",
]
