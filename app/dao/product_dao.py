from sqlalchemy.ext.asyncio import AsyncSession
from app.dao.base_dao import BaseDAO
from app.dao.product_repository import ProductRepository
from app.models.product import Product


class ProductDAO(BaseDAO[Product], ProductRepository):
    """SQL-backed product repository, bound to one request's session."""

    def __init__(self, db: AsyncSession):
        super().__init__(Product, db)
