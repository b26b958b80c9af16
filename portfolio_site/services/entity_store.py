# services/entity_store.py
"""CRUD for portfolio versions and their child entries.

Everything here only flushes; committing is up to the caller so that the
draft/publish services can group several calls into one transaction.
"""
from __future__ import annotations

import copy
from typing import Any, Iterable, Optional, Sequence, Type
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import NotFoundError, PayloadValidationError, PortfolioReferenceError
from ..models import (
    CONTENT_FIELDS,
    ENTRY_FIELDS,
    Education,
    Experience,
    PortfolioContent,
    Skill,
    utcnow,
)


EntryModel = Type[Experience] | Type[Education] | Type[Skill]

# URL segment -> model
ENTRY_KINDS: dict[str, EntryModel] = {
    "experiences": Experience,
    "education": Education,
    "skills": Skill,
}

_EDITABLE_ENTRY_COLUMNS = {model: set(fields) | {"order"} for model, fields in ENTRY_FIELDS.items()}


def _label(model) -> str:
    return model.__name__.lower()


def _reject_cleared_required(model, fields: dict[str, Any]) -> None:
    columns = model.__table__.c
    for name, value in fields.items():
        if value is None and not columns[name].nullable:
            raise PayloadValidationError(f"{name} cannot be cleared")


# ---------------------------
# Portfolio versions
# ---------------------------
async def latest_content(db: AsyncSession, *, is_draft: bool) -> Optional[PortfolioContent]:
    """The row carrying the flag; the most recently updated one if several do."""
    return (
        await db.execute(
            select(PortfolioContent)
            .where(PortfolioContent.is_draft == is_draft)
            .order_by(PortfolioContent.updated_at.desc())
            .limit(1)
        )
    ).scalars().first()


async def get_content(db: AsyncSession, portfolio_id: UUID) -> PortfolioContent:
    row = await db.get(PortfolioContent, portfolio_id)
    if row is None:
        raise NotFoundError(f"Portfolio {portfolio_id} not found")
    return row


def content_fields(row: PortfolioContent) -> dict[str, Any]:
    """Copy of the editable columns of a version, safe to hand to another row."""
    return {name: copy.deepcopy(getattr(row, name)) for name in CONTENT_FIELDS}


async def create_content(db: AsyncSession, fields: dict[str, Any], *, is_draft: bool) -> PortfolioContent:
    unknown = set(fields) - set(CONTENT_FIELDS)
    if unknown:
        raise PayloadValidationError(f"Unknown portfolio fields: {', '.join(sorted(unknown))}")
    _reject_cleared_required(PortfolioContent, fields)
    row = PortfolioContent(is_draft=is_draft, **fields)
    db.add(row)
    await db.flush()
    return row


async def update_content(db: AsyncSession, row: PortfolioContent, fields: dict[str, Any]) -> PortfolioContent:
    unknown = set(fields) - set(CONTENT_FIELDS)
    if unknown:
        raise PayloadValidationError(f"Unknown portfolio fields: {', '.join(sorted(unknown))}")
    _reject_cleared_required(PortfolioContent, fields)
    for name, value in fields.items():
        setattr(row, name, value)
    row.updated_at = utcnow()
    await db.flush()
    return row


async def delete_content(db: AsyncSession, portfolio_id: UUID) -> None:
    """Delete a version together with its entries."""
    await delete_entries(db, portfolio_id)
    await db.execute(delete(PortfolioContent).where(PortfolioContent.id == portfolio_id))
    await db.flush()


# ---------------------------
# Child entries
# ---------------------------
async def create_entry(db: AsyncSession, model: EntryModel, portfolio_id: UUID, fields: dict[str, Any]):
    if await db.get(PortfolioContent, portfolio_id) is None:
        raise PortfolioReferenceError(f"Portfolio {portfolio_id} does not exist")
    unknown = set(fields) - _EDITABLE_ENTRY_COLUMNS[model] - {"key"}
    if unknown:
        raise PayloadValidationError(f"Unknown {_label(model)} fields: {', '.join(sorted(unknown))}")
    _reject_cleared_required(model, {k: v for k, v in fields.items() if k != "key"})
    row = model(portfolio_id=portfolio_id, **fields)
    db.add(row)
    await db.flush()
    return row


async def get_entry(db: AsyncSession, model: EntryModel, entry_id: UUID):
    row = await db.get(model, entry_id)
    if row is None:
        raise NotFoundError(f"{model.__name__} {entry_id} not found")
    return row


async def update_entry(db: AsyncSession, model: EntryModel, entry_id: UUID, fields: dict[str, Any]):
    row = await get_entry(db, model, entry_id)
    unknown = set(fields) - _EDITABLE_ENTRY_COLUMNS[model]
    if unknown:
        raise PayloadValidationError(f"Unknown {_label(model)} fields: {', '.join(sorted(unknown))}")
    _reject_cleared_required(model, fields)
    for name, value in fields.items():
        setattr(row, name, value)
    row.updated_at = utcnow()
    await db.flush()
    return row


async def delete_entry(db: AsyncSession, model: EntryModel, entry_id: UUID) -> None:
    row = await get_entry(db, model, entry_id)
    await db.delete(row)
    await db.flush()


async def list_entries(db: AsyncSession, model: EntryModel, portfolio_id: UUID) -> Sequence:
    return (
        await db.execute(
            select(model)
            .where(model.portfolio_id == portfolio_id)
            .order_by(model.order, model.created_at)
        )
    ).scalars().all()


async def reorder_entries(
    db: AsyncSession, model: EntryModel, portfolio_id: UUID, ordered_ids: Iterable[UUID]
) -> None:
    """Set ``order`` to each id's position; ids from other versions are skipped."""
    for index, entry_id in enumerate(ordered_ids):
        await db.execute(
            update(model)
            .where(model.id == entry_id, model.portfolio_id == portfolio_id)
            .values(order=index)
        )
    await db.flush()


async def delete_entries(db: AsyncSession, portfolio_id: UUID) -> None:
    for model in ENTRY_FIELDS:
        await db.execute(delete(model).where(model.portfolio_id == portfolio_id))


async def clone_entries(db: AsyncSession, source_id: UUID, target_id: UUID) -> int:
    """Copy every entry of one version onto another, keeping key, order and created_at."""
    copied = 0
    for model, fields in ENTRY_FIELDS.items():
        for row in await list_entries(db, model, source_id):
            db.add(
                model(
                    portfolio_id=target_id,
                    key=row.key,
                    order=row.order,
                    created_at=row.created_at,
                    **{name: copy.deepcopy(getattr(row, name)) for name in fields},
                )
            )
            copied += 1
    await db.flush()
    return copied


__all__ = [
    "ENTRY_KINDS",
    "latest_content",
    "get_content",
    "content_fields",
    "create_content",
    "update_content",
    "delete_content",
    "create_entry",
    "get_entry",
    "update_entry",
    "delete_entry",
    "list_entries",
    "reorder_entries",
    "delete_entries",
    "clone_entries",
]
