# services/diff.py
"""Draft vs. published comparison for the admin's side-by-side view.

Entries are matched across versions by their ``key``, which is copied
whenever entries are cloned into a draft or published. Pure functions; no
database access.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..models import ENTRY_FIELDS, Education, Experience, Skill
from ..schemas import (
    CollectionDiff,
    DiffStatus,
    EducationRead,
    EntryDiff,
    ExperienceRead,
    PortfolioDiff,
    PortfolioRead,
    SkillRead,
)

PROFILE_FIELDS = (
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
)
THEME_FIELDS = ("theme_colors", "theme_fonts")
SECTION_FIELDS = ("section_visibility",)

_READ_FIELDS = {
    ExperienceRead: ENTRY_FIELDS[Experience],
    EducationRead: ENTRY_FIELDS[Education],
    SkillRead: ENTRY_FIELDS[Skill],
}

COLLECTIONS = ("experiences", "education", "skills")


def _entry_fields(item) -> Sequence[str]:
    for read_type, fields in _READ_FIELDS.items():
        if isinstance(item, read_type):
            return fields
    raise TypeError(f"Not a portfolio entry: {type(item).__name__}")


def _plain(value: Any) -> Any:
    # nested models compare by content, not by instance
    if hasattr(value, "model_dump"):
        return value.model_dump()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def _same(a, b, fields: Iterable[str]) -> bool:
    return all(_plain(getattr(a, name)) == _plain(getattr(b, name)) for name in fields)


def classify(draft_item, published_items: Sequence) -> DiffStatus:
    match = next((p for p in published_items if p.key == draft_item.key), None)
    if match is None:
        return DiffStatus.new
    if _same(draft_item, match, _entry_fields(draft_item)):
        return DiffStatus.published
    return DiffStatus.modified


def _section_status(draft: PortfolioRead, published: Optional[PortfolioRead], fields) -> DiffStatus:
    if published is None:
        return DiffStatus.new
    return DiffStatus.published if _same(draft, published, fields) else DiffStatus.modified


def profile_status(draft: PortfolioRead, published: Optional[PortfolioRead]) -> DiffStatus:
    return _section_status(draft, published, PROFILE_FIELDS)


def theme_status(draft: PortfolioRead, published: Optional[PortfolioRead]) -> DiffStatus:
    return _section_status(draft, published, THEME_FIELDS)


def sections_status(draft: PortfolioRead, published: Optional[PortfolioRead]) -> DiffStatus:
    return _section_status(draft, published, SECTION_FIELDS)


def removed_keys(draft_items: Sequence, published_items: Sequence) -> list:
    draft_keys = {item.key for item in draft_items}
    return [item.key for item in published_items if item.key not in draft_keys]


def _collection_changed(draft_items: Sequence, published_items: Sequence) -> bool:
    if len(draft_items) != len(published_items):
        return True
    if any(classify(item, published_items) is not DiffStatus.published for item in draft_items):
        return True
    # same entries, different order
    return [i.key for i in draft_items] != [i.key for i in published_items]


def has_unpublished_changes(draft: Optional[PortfolioRead], published: Optional[PortfolioRead]) -> bool:
    if draft is None:
        return False
    if published is None:
        return True
    if not _same(draft, published, PROFILE_FIELDS + THEME_FIELDS + SECTION_FIELDS):
        return True
    return any(
        _collection_changed(getattr(draft, name), getattr(published, name)) for name in COLLECTIONS
    )


def _collection_diff(draft_items: Sequence, published_items: Sequence) -> CollectionDiff:
    return CollectionDiff(
        items=[
            EntryDiff(id=item.id, key=item.key, status=classify(item, published_items))
            for item in draft_items
        ],
        removed=removed_keys(draft_items, published_items),
    )


def compare(draft: Optional[PortfolioRead], published: Optional[PortfolioRead]) -> PortfolioDiff:
    if draft is None:
        return PortfolioDiff(has_draft=False, has_unpublished_changes=False)
    empty: list = []
    return PortfolioDiff(
        has_draft=True,
        has_unpublished_changes=has_unpublished_changes(draft, published),
        profile=profile_status(draft, published),
        theme=theme_status(draft, published),
        sections=sections_status(draft, published),
        experiences=_collection_diff(draft.experiences, published.experiences if published else empty),
        education=_collection_diff(draft.education, published.education if published else empty),
        skills=_collection_diff(draft.skills, published.skills if published else empty),
    )


__all__ = [
    "classify",
    "profile_status",
    "theme_status",
    "sections_status",
    "removed_keys",
    "has_unpublished_changes",
    "compare",
]
