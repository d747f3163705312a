from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker
from app.core.config import settings
from app.db.models import Base

# Future=True for 2.0 style syntax
engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, future=True)
SessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create the quotes table if it does not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
