# services/versions.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import PortfolioContent
from ..schemas import PortfolioRead


async def _load_aggregate(db: AsyncSession, *, is_draft: bool) -> Optional[PortfolioRead]:
    # populate_existing: rows already in the session may hold stale collections
    row = (
        await db.execute(
            select(PortfolioContent)
            .options(
                selectinload(PortfolioContent.experiences),
                selectinload(PortfolioContent.education),
                selectinload(PortfolioContent.skills),
            )
            .where(PortfolioContent.is_draft == is_draft)
            .order_by(PortfolioContent.updated_at.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
    ).scalars().first()
    if row is None:
        return None
    return PortfolioRead.model_validate(row)


async def get_published(db: AsyncSession) -> Optional[PortfolioRead]:
    return await _load_aggregate(db, is_draft=False)


async def get_draft(db: AsyncSession) -> Optional[PortfolioRead]:
    return await _load_aggregate(db, is_draft=True)


async def get_working_copy(db: AsyncSession) -> Optional[PortfolioRead]:
    """What the editor shows: the draft if one exists, otherwise published."""
    draft = await get_draft(db)
    if draft is not None:
        return draft
    return await get_published(db)


__all__ = ["get_published", "get_draft", "get_working_copy"]
