from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..errors import NotFoundError
from ..schemas import (
    MessageResponse,
    PortfolioContentRead,
    PortfolioContentUpdate,
    PortfolioDiff,
    PortfolioRead,
)
from ..services import diff, drafts, versions
from ..services.publish import publish
from ..utils import require_admin_user

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("/published", response_model=PortfolioRead)
async def portfolio_published(db: AsyncSession = Depends(get_db)):
    portfolio = await versions.get_published(db)
    if portfolio is None:
        raise NotFoundError("No published portfolio found")
    return portfolio


@router.get("/draft", response_model=PortfolioRead)
async def portfolio_draft(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin_user),
):
    # falls back to published; reading never creates a draft
    portfolio = await versions.get_working_copy(db)
    if portfolio is None:
        raise NotFoundError("No portfolio found")
    return portfolio


@router.post("/save-draft", response_model=PortfolioContentRead)
async def portfolio_save_draft(
    payload: PortfolioContentUpdate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin_user),
):
    return await drafts.save_draft(db, payload)


@router.delete("/draft", response_model=MessageResponse)
async def portfolio_discard_draft(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin_user),
):
    await drafts.discard_draft(db)
    return {"message": "Draft discarded"}


@router.post("/publish", response_model=PortfolioRead)
async def portfolio_publish(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin_user),
):
    return await publish(db)


@router.get("/diff", response_model=PortfolioDiff)
async def portfolio_diff(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin_user),
):
    draft = await versions.get_draft(db)
    published = await versions.get_published(db)
    return diff.compare(draft, published)


__all__ = ["router"]
