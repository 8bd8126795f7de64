from contextlib import asynccontextmanager
from typing import AsyncIterator
from app.core.config import settings
from app.core.database import get_async_session
from app.dao.memory_product_dao import in_memory_product_dao
from app.dao.product_dao import ProductDAO
from app.dao.product_repository import ProductRepository

session_scope = asynccontextmanager(get_async_session)


async def get_product_repository() -> AsyncIterator[ProductRepository]:
    """FastAPI dependency selecting the configured product store.

    A database session is only opened for the SQL backend.
    """
    if settings.storage_backend == "memory":
        yield in_memory_product_dao
        return
    async with session_scope() as db:
        yield ProductDAO(db)
