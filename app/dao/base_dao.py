from typing import Generic, TypeVar, Type, Optional, List
from sqlmodel import SQLModel, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseDAO(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    async def save(self, obj: ModelType) -> ModelType:
        try:
            self.db.add(obj)
            await self.db.commit()
            await self.db.refresh(obj)
            logger.info(f"Saved {self.model.__name__}", id=str(obj.id))
            return obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error saving {self.model.__name__}", error=str(e))
            raise

    async def find_by_id(self, id: int) -> Optional[ModelType]:
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == id))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting {self.model.__name__} by id", id=str(id), error=str(e))
            raise

    async def find_all(
        self, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        try:
            query = select(self.model).order_by(self.model.id).offset(skip)
            if limit is not None:
                query = query.limit(limit)
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error getting multiple {self.model.__name__}", error=str(e))
            raise

    async def delete_by_id(self, id: int) -> None:
        try:
            obj = await self.find_by_id(id)
            if obj:
                await self.db.delete(obj)
                await self.db.commit()
                logger.info(f"Deleted {self.model.__name__}", id=str(id))
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting {self.model.__name__}", id=str(id), error=str(e))
            raise
