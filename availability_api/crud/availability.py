from typing import Any, Dict, List
from sqlalchemy.exc import CompileError
from sqlalchemy.ext.asyncio import AsyncSession
from availability_api.crud.base import CRUDBase
from availability_api.models.availability import Availability

class CRUDAvailability(CRUDBase[Availability]):
    async def get_all_by_date(self, db: AsyncSession) -> List[Availability]:
        return await self.get_multi(db, order_by=Availability.date.asc())

    async def upsert(self, db: AsyncSession, *, values: Dict[str, Any]) -> Availability:
        """
        Insert the row, or overwrite every column of the row with the same date.
        Returns the row as persisted.
        """
        dialect = db.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            raise CompileError(f"Upsert is not supported on {dialect}")

        stmt = insert(Availability).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Availability.date],
            set_={
                "status": stmt.excluded.status,
                "message": stmt.excluded.message,
                "time_slots": stmt.excluded.time_slots,
            },
        ).returning(Availability)

        result = await db.execute(stmt, execution_options={"populate_existing": True})
        row = result.scalars().one()
        await db.commit()
        return row

availability = CRUDAvailability(Availability)
