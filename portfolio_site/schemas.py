import enum
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; reads ORM rows directly."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# =========================
# ADMIN SCHEMAS
# =========================
class AdminRead(CamelModel):
    id: int
    email: str
    username: Optional[str] = None
    is_superuser: bool = False


class MessageResponse(BaseModel):
    message: str


# =========================
# NESTED CONTENT BLOBS
# =========================
class ThemeColors(CamelModel):
    primary: Optional[str] = None
    accent: Optional[str] = None
    background: Optional[str] = None
    foreground: Optional[str] = None


class ThemeFonts(CamelModel):
    serif: Optional[str] = None
    sans: Optional[str] = None


class SectionVisibility(CamelModel):
    # a missing flag means the section is shown
    experience: Optional[bool] = None
    education: Optional[bool] = None
    skills: Optional[bool] = None
    cta: Optional[bool] = None


class CourseEntry(CamelModel):
    name: str
    url: Optional[str] = None


# =========================
# PORTFOLIO CONTENT SCHEMAS
# =========================
class PortfolioContentBase(CamelModel):
    profile_name: str
    profile_title: str
    profile_description: str
    profile_email: str
    profile_location: str
    profile_image_url: Optional[str] = None
    hero_title: str
    hero_subtitle: str
    hero_status: str
    about_text: Optional[str] = None
    theme_colors: Optional[ThemeColors] = None
    theme_fonts: Optional[ThemeFonts] = None
    section_visibility: Optional[SectionVisibility] = None


class PortfolioContentCreate(PortfolioContentBase):
    pass


class PortfolioContentUpdate(CamelModel):
    """Partial update: unset fields are left alone, explicit nulls clear the field."""
    profile_name: Optional[str] = None
    profile_title: Optional[str] = None
    profile_description: Optional[str] = None
    profile_email: Optional[str] = None
    profile_location: Optional[str] = None
    profile_image_url: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_status: Optional[str] = None
    about_text: Optional[str] = None
    theme_colors: Optional[ThemeColors] = None
    theme_fonts: Optional[ThemeFonts] = None
    section_visibility: Optional[SectionVisibility] = None


class PortfolioContentRead(PortfolioContentBase):
    id: UUID
    is_draft: bool
    created_at: datetime
    updated_at: datetime


# =========================
# CHILD ENTRY SCHEMAS
# =========================
class EntryRead(CamelModel):
    id: UUID
    portfolio_id: UUID
    key: UUID
    order: int
    created_at: datetime
    updated_at: datetime


class ExperienceBase(CamelModel):
    company: str
    role: str
    type: str
    location: str
    start_date: str
    end_date: str
    bullets: List[str] = []
    logo_url: Optional[str] = None


class ExperienceCreate(ExperienceBase):
    portfolio_id: UUID
    order: int = 0


class ExperienceUpdate(CamelModel):
    company: Optional[str] = None
    role: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    bullets: Optional[List[str]] = None
    logo_url: Optional[str] = None
    order: Optional[int] = None


class ExperienceRead(ExperienceBase, EntryRead):
    pass


class EducationBase(CamelModel):
    school: str
    degree: str
    dates: str
    details: Optional[str] = None
    courses: Optional[List[CourseEntry]] = None


class EducationCreate(EducationBase):
    portfolio_id: UUID
    order: int = 0


class EducationUpdate(CamelModel):
    school: Optional[str] = None
    degree: Optional[str] = None
    dates: Optional[str] = None
    details: Optional[str] = None
    courses: Optional[List[CourseEntry]] = None
    order: Optional[int] = None


class EducationRead(EducationBase, EntryRead):
    pass


class SkillBase(CamelModel):
    name: str


class SkillCreate(SkillBase):
    portfolio_id: UUID
    order: int = 0


class SkillUpdate(CamelModel):
    name: Optional[str] = None
    order: Optional[int] = None


class SkillRead(SkillBase, EntryRead):
    pass


class ReorderRequest(CamelModel):
    portfolio_id: UUID
    ordered_ids: List[UUID]


# =========================
# AGGREGATE
# =========================
class PortfolioRead(PortfolioContentRead):
    experiences: List[ExperienceRead] = []
    education: List[EducationRead] = []
    skills: List[SkillRead] = []


# =========================
# DIFF
# =========================
class DiffStatus(str, enum.Enum):
    published = "published"
    modified = "modified"
    new = "new"


class EntryDiff(CamelModel):
    id: UUID
    key: UUID
    status: DiffStatus


class CollectionDiff(CamelModel):
    items: List[EntryDiff] = []
    # keys that exist in published but were removed from the draft
    removed: List[UUID] = []


class PortfolioDiff(CamelModel):
    has_draft: bool
    has_unpublished_changes: bool
    profile: Optional[DiffStatus] = None
    theme: Optional[DiffStatus] = None
    sections: Optional[DiffStatus] = None
    experiences: CollectionDiff = CollectionDiff()
    education: CollectionDiff = CollectionDiff()
    skills: CollectionDiff = CollectionDiff()
