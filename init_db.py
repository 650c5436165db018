"""
Database initialization script
Creates the availability table if it is missing
"""
import asyncio
from availability_api.core.database import engine, Base
from availability_api.models import availability  # noqa: F401 registers the table

async def init_db():
    """Create all tables (safe - skips existing)"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    print("Database initialized successfully!")
    print("Note: Existing columns are not modified. If you changed a model, you may need a migration.")

if __name__ == "__main__":
    asyncio.run(init_db())
