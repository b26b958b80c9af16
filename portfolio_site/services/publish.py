# services/publish.py
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ConflictError, PreconditionError
from ..schemas import PortfolioRead
from . import entity_store
from .locking import portfolio_write_lock
from .versions import get_published

logger = logging.getLogger(__name__)


async def publish(db: AsyncSession) -> PortfolioRead:
    """Promote the draft to published and delete the draft.

    Published keeps its id and created_at; its fields and entries are
    replaced by the draft's. When nothing was published yet the draft is
    copied into a new published row. All of it commits or none of it does.
    """
    try:
        async with portfolio_write_lock(db):
            draft = await entity_store.latest_content(db, is_draft=True)
            if draft is None:
                raise PreconditionError("No draft to publish")
            draft_id = draft.id
            fields = entity_store.content_fields(draft)

            published = await entity_store.latest_content(db, is_draft=False)
            if published is not None:
                await entity_store.update_content(db, published, fields)
                await entity_store.delete_entries(db, published.id)
            else:
                published = await entity_store.create_content(db, fields, is_draft=False)
            published_id = published.id

            await entity_store.clone_entries(db, draft_id, published_id)
            await entity_store.delete_content(db, draft_id)
            await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError("Portfolio changed while publishing") from exc
    except Exception:
        await db.rollback()
        raise

    logger.info("Draft %s published into %s", draft_id, published_id)
    return await get_published(db)


__all__ = ["publish"]
