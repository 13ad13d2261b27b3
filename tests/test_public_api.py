"""Tests for the public /api endpoints."""

import asyncio

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from vacancies_service.main import create_app
from vacancies_service.models import Base, Vacancy


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_vacancies_empty(client):
    response = client.get("/api/vacancies")

    assert response.status_code == 200
    assert response.json() == {"vacancies": []}


def test_vacancy_uses_camel_case_fields(client, create_vacancy):
    created = create_vacancy(
        title="Engineer",
        headerImage="/img/eng.png",
        bgGradient="linear-gradient(#000, #fff)",
        techStack=["python", "postgres"],
        requirements=["3+ years"],
    )

    vacancy = client.get(f"/api/vacancies/{created['id']}").json()

    assert vacancy["headerImage"] == "/img/eng.png"
    assert vacancy["bgGradient"] == "linear-gradient(#000, #fff)"
    assert vacancy["techStack"] == ["python", "postgres"]
    assert vacancy["requirements"] == ["3+ years"]
    assert "createdAt" in vacancy and "updatedAt" in vacancy


def test_get_vacancy_not_found(client):
    response = client.get("/api/vacancies/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Vacancy not found"


def test_get_vacancy_invalid_id(client):
    response = client.get("/api/vacancies/abc")

    assert response.status_code == 400


def test_list_reflects_writes(client, create_vacancy):
    create_vacancy(title="Engineer")
    assert [v["title"] for v in client.get("/api/vacancies").json()["vacancies"]] == ["Engineer"]

    second = create_vacancy(title="Designer")
    titles = [v["title"] for v in client.get("/api/vacancies").json()["vacancies"]]
    assert titles == ["Engineer", "Designer"]

    client.put(f"/admin/vacancy/{second['id']}", json={"title": "Lead Designer"})
    titles = [v["title"] for v in client.get("/api/vacancies").json()["vacancies"]]
    assert titles == ["Engineer", "Lead Designer"]

    client.delete(f"/admin/vacancy/{second['id']}")
    titles = [v["title"] for v in client.get("/api/vacancies").json()["vacancies"]]
    assert titles == ["Engineer"]


def test_list_vacancies_store_failure(client, context, monkeypatch):
    async def broken_store(db):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr("vacancies_service.api.public.load_vacancies", broken_store)

    response = client.get("/api/vacancies")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to query vacancies"
    assert "disk I/O error" not in response.text
    assert not context.vacancy_cache.populated


def test_apply_forces_pending_status(client):
    response = client.post(
        "/api/apply",
        json={"name": "A", "primaryContact": "a@example.com", "vacancyId": 42, "status": "processed"},
    )

    assert response.status_code == 201
    assert response.json() == {"status": "application received"}

    application = client.get("/admin/applications").json()["applications"][0]
    detail = client.get(f"/admin/application/{application['id']}").json()
    assert detail["status"] == "pending"
    assert detail["vacancyId"] == 42


def test_apply_rejects_malformed_body(client):
    response = client.post(
        "/api/apply",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]


def test_public_cors_allows_any_origin(client):
    response = client.options(
        "/api/vacancies",
        headers={
            "Origin": "https://jobs.example.org",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_public_cors_rejects_put(client):
    response = client.options(
        "/api/vacancies",
        headers={
            "Origin": "https://jobs.example.org",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_concurrent_cold_reads_return_same_collection(settings):
    app = create_app(settings)
    context = app.state.context
    async with context.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with context.session_factory() as session:
        session.add_all([Vacancy(title="Engineer"), Vacancy(title="Designer")])
        await session.commit()

    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            first, second = await asyncio.gather(
                client.get("/api/vacancies"),
                client.get("/api/vacancies"),
            )
    finally:
        await context.engine.dispose()

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert [v["title"] for v in first.json()["vacancies"]] == ["Engineer", "Designer"]
