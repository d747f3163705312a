from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db.session import SessionLocal
from app.services.quote_store import QuoteStore, SqlAlchemyQuoteStore
from app.services.quotes import QuoteService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session


def get_quote_store(db: AsyncSession = Depends(get_db)) -> QuoteStore:
    return SqlAlchemyQuoteStore(db)


def get_quote_service(store: QuoteStore = Depends(get_quote_store)) -> QuoteService:
    return QuoteService(store, persist_raw_on_create=settings.PERSIST_RAW_ON_CREATE)
