"""Test configuration and fixtures."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import update

from vacancies_service.config import Settings
from vacancies_service.main import create_app

ADMIN_ORIGIN = "https://admin.example.com"
LONG_AGO = datetime(2000, 1, 1)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        admin_allowed_origins=[ADMIN_ORIGIN],
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_username="hr@example.com",
        smtp_password="secret",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def context(app):
    return app.state.context


@pytest.fixture
def client(app):
    """Client running the app lifespan, so tables exist for every test."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_vacancy(client):
    def _create(**fields):
        response = client.post("/admin/vacancy", json=fields)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def submit_application(client):
    def _submit(**fields):
        response = client.post("/api/apply", json=fields)
        assert response.status_code == 201, response.text
        return client.get("/admin/applications").json()["applications"][-1]

    return _submit


@pytest.fixture
def backdate(client, context):
    """Push a row's updated_at into the past, on the app's own event loop."""

    def _backdate(model, row_id):
        async def _update():
            async with context.session_factory() as session:
                await session.execute(
                    update(model).where(model.id == row_id).values(updated_at=LONG_AGO)
                )
                await session.commit()

        client.portal.call(_update)

    return _backdate
