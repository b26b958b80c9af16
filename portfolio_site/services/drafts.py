# services/drafts.py
"""The single write path for portfolio fields before they are published."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ConflictError, PreconditionError
from ..models import PortfolioContent
from ..schemas import PortfolioContentUpdate
from . import entity_store
from .locking import portfolio_write_lock

logger = logging.getLogger(__name__)


async def _branch_from_published(db: AsyncSession, changes: dict) -> PortfolioContent:
    published = await entity_store.latest_content(db, is_draft=False)
    if published is None:
        raise PreconditionError("No published version to branch from")
    fields = entity_store.content_fields(published)
    fields.update(changes)
    draft = await entity_store.create_content(db, fields, is_draft=True)
    copied = await entity_store.clone_entries(db, published.id, draft.id)
    logger.info("Draft %s created from published %s (%d entries)", draft.id, published.id, copied)
    return draft


async def save_draft(db: AsyncSession, changes: PortfolioContentUpdate) -> PortfolioContent:
    """Merge ``changes`` into the draft, creating the draft from published first if needed.

    Exactly one draft row exists once this returns.
    """
    fields = changes.model_dump(exclude_unset=True)
    try:
        async with portfolio_write_lock(db):
            draft = await entity_store.latest_content(db, is_draft=True)
            if draft is None:
                draft = await _branch_from_published(db, fields)
            else:
                draft = await entity_store.update_content(db, draft, fields)
            await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError("Another draft was created concurrently") from exc
    except Exception:
        await db.rollback()
        raise
    return draft


async def discard_draft(db: AsyncSession) -> None:
    """Throw the draft (and its entries) away; published is untouched."""
    try:
        async with portfolio_write_lock(db):
            draft = await entity_store.latest_content(db, is_draft=True)
            if draft is None:
                raise PreconditionError("No draft to discard")
            draft_id = draft.id
            await entity_store.delete_content(db, draft_id)
            await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Draft %s discarded", draft_id)


__all__ = ["save_draft", "discard_draft"]
