"""Tests for the HTTP endpoints."""

import uuid

import pytest


@pytest.mark.asyncio
async def test_health_endpoint(anon_client):
    response = await anon_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_published_missing_is_404(anon_client):
    response = await anon_client.get("/api/portfolio/published")
    assert response.status_code == 404
    assert response.json()["message"] == "No published portfolio found"


@pytest.mark.asyncio
async def test_published_is_public_and_camel_cased(published, anon_client):
    response = await anon_client.get("/api/portfolio/published")
    assert response.status_code == 200
    body = response.json()
    assert body["heroTitle"] == "A"
    assert body["isDraft"] is False
    assert [s["name"] for s in body["skills"]] == ["Excel", "SQL"]
    assert body["experiences"][0]["startDate"] == "May 2024"


@pytest.mark.asyncio
async def test_admin_routes_require_auth(published, anon_client):
    assert (await anon_client.get("/api/portfolio/draft")).status_code == 401
    assert (await anon_client.post("/api/portfolio/save-draft", json={"heroTitle": "X"})).status_code == 401
    assert (await anon_client.post("/api/portfolio/publish")).status_code == 401
    response = await anon_client.post("/api/skills", json={"portfolioId": str(published.id), "name": "Go"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_draft_falls_back_to_published_without_creating(published, client):
    response = await client.get("/api/portfolio/draft")
    assert response.status_code == 200
    assert response.json()["id"] == str(published.id)

    diff = (await client.get("/api/portfolio/diff")).json()
    assert diff["hasDraft"] is False


@pytest.mark.asyncio
async def test_edit_compare_publish_flow(published, client):
    """Save a draft, edit its skills, check the diff, publish."""
    saved = await client.post("/api/portfolio/save-draft", json={"heroTitle": "B"})
    assert saved.status_code == 200
    draft_id = saved.json()["id"]
    assert saved.json()["isDraft"] is True
    assert draft_id != str(published.id)

    draft = (await client.get("/api/portfolio/draft")).json()
    assert draft["id"] == draft_id
    assert draft["heroTitle"] == "B"

    created = await client.post("/api/skills", json={"portfolioId": draft_id, "name": "Python", "order": 2})
    assert created.status_code == 200
    new_skill = created.json()

    sql = draft["skills"][1]
    updated = await client.put(f"/api/skills/{sql['id']}", json={"name": "PostgreSQL"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "PostgreSQL"

    report = (await client.get("/api/portfolio/diff")).json()
    assert report["hasUnpublishedChanges"] is True
    assert report["profile"] == "modified"
    assert report["theme"] == "published"
    statuses = {item["id"]: item["status"] for item in report["skills"]["items"]}
    assert statuses == {
        draft["skills"][0]["id"]: "published",
        sql["id"]: "modified",
        new_skill["id"]: "new",
    }

    published_again = await client.post("/api/portfolio/publish")
    assert published_again.status_code == 200
    body = published_again.json()
    assert body["id"] == str(published.id)
    assert body["heroTitle"] == "B"
    assert [s["name"] for s in body["skills"]] == ["Excel", "PostgreSQL", "Python"]

    live = (await client.get("/api/portfolio/published")).json()
    assert live["heroTitle"] == "B"
    after = (await client.get("/api/portfolio/diff")).json()
    assert after["hasDraft"] is False
    assert after["hasUnpublishedChanges"] is False


@pytest.mark.asyncio
async def test_publish_without_draft_is_conflict(published, client):
    response = await client.post("/api/portfolio/publish")
    assert response.status_code == 409
    assert response.json()["message"] == "No draft to publish"


@pytest.mark.asyncio
async def test_save_draft_without_published_is_conflict(client):
    response = await client.post("/api/portfolio/save-draft", json={"heroTitle": "X"})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_save_draft_rejects_clearing_required_field(published, client):
    response = await client.post("/api/portfolio/save-draft", json={"profileName": None})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_save_draft_rejects_wrong_types(published, client):
    response = await client.post("/api/portfolio/save-draft", json={"themeColors": "blue"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_discard_draft(published, client):
    await client.post("/api/portfolio/save-draft", json={"heroTitle": "B"})
    response = await client.delete("/api/portfolio/draft")
    assert response.status_code == 200
    assert (await client.get("/api/portfolio/draft")).json()["heroTitle"] == "A"
    assert (await client.delete("/api/portfolio/draft")).status_code == 409


@pytest.mark.asyncio
async def test_create_entry_for_unknown_portfolio(client):
    response = await client.post(
        "/api/experiences",
        json={
            "portfolioId": str(uuid.uuid4()),
            "company": "Acme",
            "role": "Intern",
            "type": "Internship",
            "location": "Remote",
            "startDate": "Jan 2025",
            "endDate": "Present",
            "bullets": [],
        },
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_and_delete_unknown_entry(client):
    missing = uuid.uuid4()
    assert (await client.put(f"/api/education/{missing}", json={"school": "X"})).status_code == 404
    assert (await client.delete(f"/api/education/{missing}")).status_code == 404


@pytest.mark.asyncio
async def test_education_courses_round_trip(published, client):
    response = await client.put(
        f"/api/education/{published.education[0].id}",
        json={"courses": [{"name": "Audit", "url": "https://example.com/audit"}]},
    )
    assert response.status_code == 200
    assert response.json()["courses"] == [{"name": "Audit", "url": "https://example.com/audit"}]


@pytest.mark.asyncio
async def test_reorder_and_delete_skills(published, client):
    excel, sql = published.skills
    response = await client.post(
        "/api/skills/reorder",
        json={"portfolioId": str(published.id), "orderedIds": [str(sql.id), str(excel.id)]},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Skills reordered"}
    live = (await client.get("/api/portfolio/published")).json()
    assert [s["name"] for s in live["skills"]] == ["SQL", "Excel"]

    response = await client.delete(f"/api/skills/{excel.id}")
    assert response.json() == {"message": "Skill deleted"}
    live = (await client.get("/api/portfolio/published")).json()
    assert [s["name"] for s in live["skills"]] == ["SQL"]
