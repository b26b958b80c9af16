"""Classification of draft entries against published ones."""

import uuid
from datetime import datetime

from portfolio_site.schemas import (
    DiffStatus,
    EducationRead,
    ExperienceRead,
    PortfolioRead,
    SkillRead,
)
from portfolio_site.services import diff

NOW = datetime(2026, 1, 1, 12, 0, 0)


def _meta(key=None, portfolio_id=None, order=0):
    return {
        "id": uuid.uuid4(),
        "portfolio_id": portfolio_id or uuid.uuid4(),
        "key": key or uuid.uuid4(),
        "order": order,
        "created_at": NOW,
        "updated_at": NOW,
    }


def skill(name, key=None, order=0):
    return SkillRead(name=name, **_meta(key, order=order))


def experience(bullets, key=None):
    return ExperienceRead(
        company="Acme",
        role="Intern",
        type="Internship",
        location="Remote",
        start_date="May 2024",
        end_date="Aug 2024",
        bullets=bullets,
        **_meta(key),
    )


def education(courses, key=None):
    return EducationRead(school="State", degree="B.A.", dates="2021 - 2025", courses=courses, **_meta(key))


def portfolio(is_draft=True, **overrides):
    fields = {
        "id": uuid.uuid4(),
        "is_draft": is_draft,
        "profile_name": "Avery",
        "profile_title": "Analyst",
        "profile_description": "Numbers person.",
        "profile_email": "avery@example.com",
        "profile_location": "Boston",
        "hero_title": "A",
        "hero_subtitle": "Sub",
        "hero_status": "Open",
        "created_at": NOW,
        "updated_at": NOW,
    }
    fields.update(overrides)
    return PortfolioRead(**fields)


def test_entry_only_in_draft_is_new():
    assert diff.classify(skill("Go"), [skill("Go")]) is DiffStatus.new


def test_identical_entry_is_published():
    key = uuid.uuid4()
    # different ids, portfolios, timestamps; same key and content
    assert diff.classify(skill("SQL", key), [skill("SQL", key)]) is DiffStatus.published


def test_order_alone_does_not_modify_entry():
    key = uuid.uuid4()
    assert diff.classify(skill("SQL", key, order=3), [skill("SQL", key, order=0)]) is DiffStatus.published


def test_changed_bullet_is_modified():
    key = uuid.uuid4()
    draft = experience(["Reconciled accounts", "Wrote better reports"], key)
    live = experience(["Reconciled accounts", "Wrote reports"], key)
    assert diff.classify(draft, [live]) is DiffStatus.modified


def test_bullet_order_matters():
    key = uuid.uuid4()
    assert diff.classify(experience(["b", "a"], key), [experience(["a", "b"], key)]) is DiffStatus.modified


def test_nested_course_change_is_modified():
    key = uuid.uuid4()
    draft = education([{"name": "Accounting I", "url": "https://example.com"}], key)
    live = education([{"name": "Accounting I"}], key)
    assert diff.classify(draft, [live]) is DiffStatus.modified
    assert diff.classify(education([{"name": "Accounting I"}], key), [live]) is DiffStatus.published


def test_two_draft_skills_against_one_published():
    key = uuid.uuid4()
    draft_skills = [skill("SQL", key), skill("Python")]
    published_skills = [skill("SQL", key)]
    statuses = [diff.classify(s, published_skills) for s in draft_skills]
    assert statuses == [DiffStatus.published, DiffStatus.new]


def test_removed_keys():
    kept, dropped = uuid.uuid4(), uuid.uuid4()
    assert diff.removed_keys([skill("a", kept)], [skill("a", kept), skill("b", dropped)]) == [dropped]


def test_section_statuses():
    live = portfolio(is_draft=False, theme_colors={"primary": "#000"})
    draft = portfolio(hero_title="B", theme_colors={"primary": "#000"})
    assert diff.profile_status(draft, live) is DiffStatus.modified
    assert diff.theme_status(draft, live) is DiffStatus.published
    assert diff.sections_status(draft, live) is DiffStatus.published
    assert diff.profile_status(draft, None) is DiffStatus.new


def test_has_unpublished_changes_edges():
    live = portfolio(is_draft=False)
    assert diff.has_unpublished_changes(None, live) is False
    assert diff.has_unpublished_changes(portfolio(), None) is True
    assert diff.has_unpublished_changes(portfolio(), live) is False
    assert diff.has_unpublished_changes(portfolio(about_text="Hi"), live) is True
    assert diff.has_unpublished_changes(portfolio(theme_fonts={"serif": "Lora"}), live) is True


def test_has_unpublished_changes_on_collections():
    k1, k2 = uuid.uuid4(), uuid.uuid4()
    live = portfolio(is_draft=False, skills=[skill("a", k1, 0), skill("b", k2, 1)])

    same = portfolio(skills=[skill("a", k1, 0), skill("b", k2, 1)])
    assert diff.has_unpublished_changes(same, live) is False

    shorter = portfolio(skills=[skill("a", k1, 0)])
    assert diff.has_unpublished_changes(shorter, live) is True

    renamed = portfolio(skills=[skill("a", k1, 0), skill("bee", k2, 1)])
    assert diff.has_unpublished_changes(renamed, live) is True

    reordered = portfolio(skills=[skill("b", k2, 0), skill("a", k1, 1)])
    assert diff.has_unpublished_changes(reordered, live) is True


def test_compare_builds_full_report():
    key = uuid.uuid4()
    live = portfolio(is_draft=False, skills=[skill("SQL", key), skill("Excel")])
    draft = portfolio(hero_title="B", skills=[skill("SQL", key), skill("Python")])

    report = diff.compare(draft, live)
    assert report.has_draft is True
    assert report.has_unpublished_changes is True
    assert report.profile is DiffStatus.modified
    assert [i.status for i in report.skills.items] == [DiffStatus.published, DiffStatus.new]
    assert report.skills.removed == [live.skills[1].key]
    assert report.experiences.items == []


def test_compare_without_draft():
    report = diff.compare(None, portfolio(is_draft=False))
    assert report.has_draft is False
    assert report.has_unpublished_changes is False
    assert report.profile is None
