"""CRUD + reorder routes for experiences, education and skills.

The three kinds share one shape, so their routers are built by ``_entry_router``.
Callers address whichever version they hold: in the normal flow that is the
draft's id, resolved from ``GET /api/portfolio/draft``.
"""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..schemas import (
    EducationCreate,
    EducationRead,
    EducationUpdate,
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
    MessageResponse,
    ReorderRequest,
    SkillCreate,
    SkillRead,
    SkillUpdate,
)
from ..services import entity_store
from ..utils import require_admin_user


def _entry_router(kind: str, label: str, create_schema, update_schema, read_schema) -> APIRouter:
    model = entity_store.ENTRY_KINDS[kind]
    router = APIRouter(prefix=f"/api/{kind}", tags=[kind])

    # declared before /{entry_id} so "reorder" is never read as an id
    @router.post("/reorder", response_model=MessageResponse)
    async def reorder(
        payload: ReorderRequest,
        db: AsyncSession = Depends(get_db),
        admin=Depends(require_admin_user),
    ):
        await entity_store.reorder_entries(db, model, payload.portfolio_id, payload.ordered_ids)
        await db.commit()
        return {"message": f"{kind.capitalize()} reordered"}

    @router.post("", response_model=read_schema)
    async def create(
        payload: create_schema,
        db: AsyncSession = Depends(get_db),
        admin=Depends(require_admin_user),
    ):
        fields = payload.model_dump(exclude={"portfolio_id"})
        row = await entity_store.create_entry(db, model, payload.portfolio_id, fields)
        await db.commit()
        return row

    @router.put("/{entry_id}", response_model=read_schema)
    async def update(
        entry_id: UUID,
        payload: update_schema,
        db: AsyncSession = Depends(get_db),
        admin=Depends(require_admin_user),
    ):
        row = await entity_store.update_entry(db, model, entry_id, payload.model_dump(exclude_unset=True))
        await db.commit()
        return row

    @router.delete("/{entry_id}", response_model=MessageResponse)
    async def remove(
        entry_id: UUID,
        db: AsyncSession = Depends(get_db),
        admin=Depends(require_admin_user),
    ):
        await entity_store.delete_entry(db, model, entry_id)
        await db.commit()
        return {"message": f"{label} deleted"}

    return router


experiences_router = _entry_router("experiences", "Experience", ExperienceCreate, ExperienceUpdate, ExperienceRead)
education_router = _entry_router("education", "Education", EducationCreate, EducationUpdate, EducationRead)
skills_router = _entry_router("skills", "Skill", SkillCreate, SkillUpdate, SkillRead)

__all__ = ["experiences_router", "education_router", "skills_router"]
