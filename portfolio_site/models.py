import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Boolean, ForeignKey, Text, DateTime, Index, JSON,
    UniqueConstraint, Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .database import Base

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------
# ADMIN ACCOUNTS
# ---------------------------
class AdminUser(Base):
    __tablename__ = "admin_user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(320), unique=True, index=True, nullable=False)
    username = Column(String, index=True)
    hashed_password = Column(String(1024), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_superuser = Column(Boolean, default=False, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


# ---------------------------
# PORTFOLIO VERSIONS
# ---------------------------
class PortfolioContent(Base):
    """One version of the portfolio: the published row or the draft row."""
    __tablename__ = "portfolio_content"
    # a unique index on a boolean allows one draft and one published row
    __table_args__ = (
        Index("uq_portfolio_content_is_draft", "is_draft", unique=True),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    is_draft = Column(Boolean, nullable=False, default=True)

    # Profile
    profile_name = Column(Text, nullable=False)
    profile_title = Column(Text, nullable=False)
    profile_description = Column(Text, nullable=False)
    profile_email = Column(Text, nullable=False)
    profile_location = Column(Text, nullable=False)
    profile_image_url = Column(Text, nullable=True)

    # Hero section
    hero_title = Column(Text, nullable=False)
    hero_subtitle = Column(Text, nullable=False)
    hero_status = Column(Text, nullable=False)

    # About section
    about_text = Column(Text, nullable=True)

    # Theme / layout
    theme_colors = Column(JSONType, nullable=True)        # {primary, accent, background, foreground}
    theme_fonts = Column(JSONType, nullable=True)         # {serif, sans}
    section_visibility = Column(JSONType, nullable=True)  # {experience, education, skills, cta}

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    experiences = relationship(
        "Experience",
        order_by=lambda: [Experience.order, Experience.created_at],
        viewonly=True,
    )
    education = relationship(
        "Education",
        order_by=lambda: [Education.order, Education.created_at],
        viewonly=True,
    )
    skills = relationship(
        "Skill",
        order_by=lambda: [Skill.order, Skill.created_at],
        viewonly=True,
    )

    def __repr__(self):
        return f"<PortfolioContent {self.id} draft={self.is_draft}>"


# Every column of PortfolioContent that the admin edits and publish copies
CONTENT_FIELDS = (
    "profile_name",
    "profile_title",
    "profile_description",
    "profile_email",
    "profile_location",
    "profile_image_url",
    "hero_title",
    "hero_subtitle",
    "hero_status",
    "about_text",
    "theme_colors",
    "theme_fonts",
    "section_visibility",
)
REQUIRED_CONTENT_FIELDS = tuple(
    name for name in CONTENT_FIELDS if not PortfolioContent.__table__.c[name].nullable
)


# ---------------------------
# CHILD ENTRIES
# ---------------------------
class Experience(Base):
    __tablename__ = "experiences"
    __table_args__ = (UniqueConstraint("portfolio_id", "key", name="uq_experience_portfolio_key"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    portfolio_id = Column(Uuid, ForeignKey("portfolio_content.id", ondelete="CASCADE"), index=True, nullable=False)
    # shared by a draft entry and its published counterpart
    key = Column(Uuid, nullable=False, default=uuid.uuid4)
    company = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    start_date = Column(Text, nullable=False)
    end_date = Column(Text, nullable=False)
    bullets = Column(JSONType, nullable=False, default=list)
    logo_url = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Education(Base):
    __tablename__ = "education"
    __table_args__ = (UniqueConstraint("portfolio_id", "key", name="uq_education_portfolio_key"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    portfolio_id = Column(Uuid, ForeignKey("portfolio_content.id", ondelete="CASCADE"), index=True, nullable=False)
    key = Column(Uuid, nullable=False, default=uuid.uuid4)
    school = Column(Text, nullable=False)
    degree = Column(Text, nullable=False)
    dates = Column(Text, nullable=False)
    details = Column(Text, nullable=True)
    courses = Column(JSONType, nullable=True)  # [{name, url}]
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Skill(Base):
    __tablename__ = "skills"
    __table_args__ = (UniqueConstraint("portfolio_id", "key", name="uq_skill_portfolio_key"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    portfolio_id = Column(Uuid, ForeignKey("portfolio_content.id", ondelete="CASCADE"), index=True, nullable=False)
    key = Column(Uuid, nullable=False, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


# Content columns per child kind; excludes identity, FK, key, order and timestamps
ENTRY_FIELDS = {
    Experience: ("company", "role", "type", "location", "start_date", "end_date", "bullets", "logo_url"),
    Education: ("school", "degree", "dates", "details", "courses"),
    Skill: ("name",),
}
