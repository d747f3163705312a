"""
Persistence for quotes.

``QuoteStore`` is the capability the quote service depends on. It performs no
validation of its own: every method either returns the affected rows or raises
``StoreError``. ``SqlAlchemyQuoteStore`` implements it on top of an
``AsyncSession`` bound to the ``quotes`` table.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.exc import (
    DataError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import models
from app.services.errors import StoreError

logger = logging.getLogger("backend.store")


class QuoteStore(ABC):
    """Abstract persistence capability for quotes."""

    @abstractmethod
    async def list_quotes(self) -> List[Any]:
        """All quotes, most recently created first."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, quote_id: Any) -> List[Any]:
        """Zero or one quote matching ``quote_id``."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, fields: Dict[str, Any]) -> List[Any]:
        """Insert a quote and return the inserted row."""
        raise NotImplementedError

    @abstractmethod
    async def update_by_id(self, quote_id: Any, fields: Dict[str, Any]) -> List[Any]:
        """Update only if the quote exists; returns the updated rows (empty when missing)."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_id(self, quote_id: Any) -> List[Any]:
        """Delete only if the quote exists; returns the deleted ids (empty when missing)."""
        raise NotImplementedError


def status_for(exc: SQLAlchemyError) -> Optional[int]:
    """HTTP status implied by a database failure, or None when it has none."""
    if isinstance(exc, IntegrityError):
        return 409
    if isinstance(exc, DataError):
        return 400
    if isinstance(exc, (OperationalError, InterfaceError)):
        return 503
    return None


MAX_ID = 2**31 - 1  # INTEGER primary key range


def coerce_id(quote_id: Any) -> Optional[int]:
    """Integer key for ``quote_id``, or None when no row could ever have it."""
    if isinstance(quote_id, bool):
        return None
    if isinstance(quote_id, int):
        key = quote_id
    else:
        text = str(quote_id)
        # int() would also accept "1_0", " 10" and non-ASCII digits
        if not (text.isascii() and text.isdigit()):
            return None
        key = int(text)
    if not 1 <= key <= MAX_ID:
        return None
    return key


class SqlAlchemyQuoteStore(QuoteStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, operation: str, exc: SQLAlchemyError) -> StoreError:
        logger.warning(f"Store operation '{operation}' failed: {exc}")
        try:
            await self.db.rollback()
        except SQLAlchemyError as rollback_exc:
            # The original failure is the one reported
            logger.warning(f"Rollback after '{operation}' failed: {rollback_exc}")
        return StoreError(operation, f"Database error during {operation}", status_for(exc))

    async def list_quotes(self) -> List[models.Quote]:
        stmt = select(models.Quote).order_by(
            models.Quote.created_at.desc(), models.Quote.id.desc()
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("list", exc) from exc
        return list(result.scalars().all())

    async def get_by_id(self, quote_id: Any) -> List[models.Quote]:
        key = coerce_id(quote_id)
        if key is None:
            return []
        try:
            result = await self.db.execute(select(models.Quote).where(models.Quote.id == key))
        except SQLAlchemyError as exc:
            raise await self._fail("get", exc) from exc
        return list(result.scalars().all())

    async def insert(self, fields: Dict[str, Any]) -> List[models.Quote]:
        quote = models.Quote(**fields)
        self.db.add(quote)
        try:
            await self.db.commit()
            await self.db.refresh(quote)
        except SQLAlchemyError as exc:
            raise await self._fail("insert", exc) from exc
        return [quote]

    async def update_by_id(self, quote_id: Any, fields: Dict[str, Any]) -> List[models.Quote]:
        key = coerce_id(quote_id)
        if key is None:
            return []
        # Single conditional statement: no row, no update
        stmt = (
            update(models.Quote)
            .where(models.Quote.id == key)
            .values(**fields)
            .returning(models.Quote)
        )
        try:
            result = await self.db.execute(stmt)
            rows = list(result.scalars().all())
            await self.db.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("update", exc) from exc
        return rows

    async def delete_by_id(self, quote_id: Any) -> List[int]:
        key = coerce_id(quote_id)
        if key is None:
            return []
        stmt = (
            delete(models.Quote)
            .where(models.Quote.id == key)
            .returning(models.Quote.id)
        )
        try:
            result = await self.db.execute(stmt)
            deleted = list(result.scalars().all())
            await self.db.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("delete", exc) from exc
        return deleted
