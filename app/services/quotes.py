"""
Quote service: validation and mutation orchestration for the quotes resource.

Every operation returns a ``Result``. Validation failures, missing quotes and
store failures come back as typed errors; nothing is retried.
"""
import logging
from typing import Any, Dict, List, Optional

from app.services.errors import (
    InternalError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from app.services.quote_store import QuoteStore
from app.services.result import Result

logger = logging.getLogger("backend.quotes")


def clean(value: Optional[str]) -> Optional[str]:
    """Trimmed value, or None when it is missing or blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class QuoteService:
    def __init__(self, store: QuoteStore, persist_raw_on_create: bool = False):
        self.store = store
        self.persist_raw_on_create = persist_raw_on_create

    def _unexpected(self, action: str) -> Result:
        logger.exception(f"Unexpected error while {action}")
        return Result.failure(InternalError(f"An unexpected error occurred while {action}"))

    def _store_failed(self, exc: StoreError) -> Result:
        logger.warning(f"Store error during {exc.operation}: {exc.message} (status {exc.status})")
        return Result.failure(exc)

    async def list_quotes(self) -> Result[List[Any]]:
        try:
            quotes = await self.store.list_quotes()
        except StoreError as exc:
            return self._store_failed(exc)
        except Exception:
            return self._unexpected("listing quotes")
        return Result.success(quotes)

    async def get_quote(self, quote_id: Any) -> Result[Any]:
        try:
            rows = await self.store.get_by_id(quote_id)
        except StoreError as exc:
            return self._store_failed(exc)
        except Exception:
            return self._unexpected("getting a quote")

        if not rows:
            logger.debug(f"Quote {quote_id} not found")
            return Result.failure(NotFoundError(quote_id))
        return Result.success(rows[0])

    async def create_quote(
        self, author: Optional[str], content: Optional[str]
    ) -> Result[List[Any]]:
        clean_author = clean(author)
        if clean_author is None:
            logger.debug("Create rejected: author missing")
            return Result.failure(ValidationError("Author is required"))
        clean_content = clean(content)
        if clean_content is None:
            logger.debug("Create rejected: content missing")
            return Result.failure(ValidationError("Content is required"))

        if self.persist_raw_on_create:
            fields = {"author": author, "content": content}
        else:
            fields = {"author": clean_author, "content": clean_content}

        try:
            rows = await self.store.insert(fields)
        except StoreError as exc:
            return self._store_failed(exc)
        except Exception:
            return self._unexpected("creating a quote")

        logger.info(f"Created quote {[getattr(row, 'id', None) for row in rows]}")
        return Result.success(rows)

    async def update_quote(
        self,
        quote_id: Any,
        author: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Result[List[Any]]:
        fields: Dict[str, str] = {}
        clean_author = clean(author)
        if clean_author is not None:
            fields["author"] = clean_author
        clean_content = clean(content)
        if clean_content is not None:
            fields["content"] = clean_content

        if not fields:
            logger.debug(f"Update of quote {quote_id} rejected: no author or content")
            return Result.failure(ValidationError("Must contain author or content"))

        # The store only touches an existing row, so an empty result means not found
        try:
            rows = await self.store.update_by_id(quote_id, fields)
        except StoreError as exc:
            return self._store_failed(exc)
        except Exception:
            return self._unexpected("updating a quote")

        if not rows:
            logger.debug(f"Quote {quote_id} not found for update")
            return Result.failure(NotFoundError(quote_id))

        logger.info(f"Updated quote {quote_id}: {sorted(fields)}")
        return Result.success(rows)

    async def delete_quote(self, quote_id: Any) -> Result[bool]:
        try:
            deleted = await self.store.delete_by_id(quote_id)
        except StoreError as exc:
            return self._store_failed(exc)
        except Exception:
            return self._unexpected("deleting a quote")

        if not deleted:
            logger.debug(f"Quote {quote_id} not found for delete")
            return Result.failure(NotFoundError(quote_id))

        logger.info(f"Deleted quote {quote_id}")
        return Result.success(True)
