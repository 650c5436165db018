from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from availability_api.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Read and Delete by primary key.

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        return await db.get(self.model, id)

    async def get_multi(self, db: AsyncSession, *, order_by: Any = None) -> List[ModelType]:
        query = select(self.model)
        if order_by is not None:
            query = query.order_by(order_by)
        result = await db.execute(query)
        return result.scalars().all()

    async def remove(self, db: AsyncSession, *, id: Any) -> None:
        # Bulk delete so a missing row is a no-op rather than an error
        pk = self.model.__mapper__.primary_key[0]
        await db.execute(delete(self.model).where(pk == id))
        await db.commit()

    async def exists_check(self, db: AsyncSession) -> None:
        """Cheapest query that proves the table is reachable."""
        await db.execute(select(self.model).limit(1))
