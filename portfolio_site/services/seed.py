# services/seed.py
"""Startup seeding: the first published portfolio and the bootstrap admin."""
from __future__ import annotations

import json
import logging
from typing import List, Optional

from fastapi_users.password import PasswordHelper
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import AdminUser, Education, Experience, Skill
from ..schemas import (
    CamelModel,
    EducationBase,
    ExperienceBase,
    PortfolioContentCreate,
    SectionVisibility,
    SkillBase,
    ThemeColors,
    ThemeFonts,
)
from ..settings.config import settings
from . import entity_store

logger = logging.getLogger(__name__)


class SeedProfile(CamelModel):
    name: str
    title: str
    description: str
    email: str
    location: str
    image_url: Optional[str] = None


class SeedHero(CamelModel):
    title: str
    subtitle: str
    status: str


class SeedTheme(CamelModel):
    colors: Optional[ThemeColors] = None
    fonts: Optional[ThemeFonts] = None


class SeedDocument(CamelModel):
    profile: SeedProfile
    hero: SeedHero
    about: Optional[str] = None
    theme: Optional[SeedTheme] = None
    sections: Optional[SectionVisibility] = None
    experiences: List[ExperienceBase] = []
    education: List[EducationBase] = []
    skills: List[SkillBase] = []


async def seed_portfolio(db: AsyncSession, document: SeedDocument) -> bool:
    """Create the published version from ``document`` unless one already exists."""
    if await entity_store.latest_content(db, is_draft=False) is not None:
        return False

    theme = document.theme or SeedTheme()
    content = PortfolioContentCreate(
        profile_name=document.profile.name,
        profile_title=document.profile.title,
        profile_description=document.profile.description,
        profile_email=document.profile.email,
        profile_location=document.profile.location,
        profile_image_url=document.profile.image_url,
        hero_title=document.hero.title,
        hero_subtitle=document.hero.subtitle,
        hero_status=document.hero.status,
        about_text=document.about,
        theme_colors=theme.colors,
        theme_fonts=theme.fonts,
        section_visibility=document.sections,
    )
    published = await entity_store.create_content(db, content.model_dump(exclude_none=True), is_draft=False)
    for model, items in ((Experience, document.experiences), (Education, document.education), (Skill, document.skills)):
        for order, item in enumerate(items):
            await entity_store.create_entry(db, model, published.id, {**item.model_dump(), "order": order})
    await db.commit()
    logger.info(
        "Seeded published portfolio %s (%d experiences, %d education, %d skills)",
        published.id, len(document.experiences), len(document.education), len(document.skills),
    )
    return True


async def seed_portfolio_from_file(db: AsyncSession, path: str) -> bool:
    with open(path, "r", encoding="utf-8") as f:
        document = SeedDocument.model_validate(json.load(f))
    return await seed_portfolio(db, document)


async def create_admin_user(db: AsyncSession) -> Optional[AdminUser]:
    admin_email = settings.ADMIN_EMAIL
    admin_password = settings.ADMIN_PASSWORD
    if not admin_email or not admin_password:
        logger.warning("ADMIN_EMAIL or ADMIN_PASSWORD not set; skipping admin creation.")
        return None

    existing = (await db.execute(select(AdminUser).where(AdminUser.email == admin_email))).scalars().first()
    if existing:
        logger.info("Admin user already exists: %s", admin_email)
        return existing

    admin = AdminUser(
        email=admin_email,
        hashed_password=PasswordHelper().hash(admin_password),
        username=settings.ADMIN_USERNAME,
        is_superuser=True,
        is_active=True,
        is_verified=True,
    )
    db.add(admin)
    await db.commit()
    logger.info("Admin user created: %s", admin_email)
    return admin


__all__ = ["SeedDocument", "seed_portfolio", "seed_portfolio_from_file", "create_admin_user"]
