"""portfolio baseline

Revision ID: 4b1e0c9d2a77
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '4b1e0c9d2a77'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entry_columns():
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "portfolio_id",
            sa.Uuid(),
            sa.ForeignKey("portfolio_content.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("key", sa.Uuid(), nullable=False),
    ]


def _entry_tail():
    return [
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Upgrade schema: admin accounts, portfolio versions and their entries."""
    op.create_table(
        "admin_user",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True, index=True),
        sa.Column("username", sa.String(), nullable=True, index=True),
        sa.Column("hashed_password", sa.String(1024), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_superuser", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "portfolio_content",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("is_draft", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("profile_name", sa.Text(), nullable=False),
        sa.Column("profile_title", sa.Text(), nullable=False),
        sa.Column("profile_description", sa.Text(), nullable=False),
        sa.Column("profile_email", sa.Text(), nullable=False),
        sa.Column("profile_location", sa.Text(), nullable=False),
        sa.Column("profile_image_url", sa.Text(), nullable=True),
        sa.Column("hero_title", sa.Text(), nullable=False),
        sa.Column("hero_subtitle", sa.Text(), nullable=False),
        sa.Column("hero_status", sa.Text(), nullable=False),
        sa.Column("about_text", sa.Text(), nullable=True),
        sa.Column("theme_colors", postgresql.JSONB(), nullable=True),
        sa.Column("theme_fonts", postgresql.JSONB(), nullable=True),
        sa.Column("section_visibility", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    # one draft row and one published row at most
    op.create_index("uq_portfolio_content_is_draft", "portfolio_content", ["is_draft"], unique=True)

    op.create_table(
        "experiences",
        *_entry_columns(),
        sa.Column("company", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("location", sa.Text(), nullable=False),
        sa.Column("start_date", sa.Text(), nullable=False),
        sa.Column("end_date", sa.Text(), nullable=False),
        sa.Column("bullets", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("logo_url", sa.Text(), nullable=True),
        *_entry_tail(),
        sa.UniqueConstraint("portfolio_id", "key", name="uq_experience_portfolio_key"),
    )

    op.create_table(
        "education",
        *_entry_columns(),
        sa.Column("school", sa.Text(), nullable=False),
        sa.Column("degree", sa.Text(), nullable=False),
        sa.Column("dates", sa.Text(), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("courses", postgresql.JSONB(), nullable=True),
        *_entry_tail(),
        sa.UniqueConstraint("portfolio_id", "key", name="uq_education_portfolio_key"),
    )

    op.create_table(
        "skills",
        *_entry_columns(),
        sa.Column("name", sa.Text(), nullable=False),
        *_entry_tail(),
        sa.UniqueConstraint("portfolio_id", "key", name="uq_skill_portfolio_key"),
    )


def downgrade() -> None:
    """Downgrade schema: drop everything created above."""
    op.drop_table("skills")
    op.drop_table("education")
    op.drop_table("experiences")
    op.drop_index("uq_portfolio_content_is_draft", table_name="portfolio_content")
    op.drop_table("portfolio_content")
    op.drop_table("admin_user")
