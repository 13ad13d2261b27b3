"""Pydantic schemas for Application model."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict

from vacancies_service.schemas.base import CamelModel

STATUS_PENDING = "pending"


class ApplicationBase(CamelModel):
    """Base fields for application."""

    primary_contact: str = ""
    additional_contacts: Any = None
    name: str = ""
    about: str = ""
    vacancy_id: int | None = None
    status: str = ""
    salary_expectation: str = ""
    available_from: str = ""


class ApplicationCreate(ApplicationBase):
    """Public submission. Any status sent by the client is overridden."""


class ApplicationUpdate(ApplicationBase):
    """Full replacement; omitted fields fall back to their defaults."""


class ApplicationRead(ApplicationBase):
    """Full application output."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class ApplicationList(CamelModel):
    applications: list[ApplicationRead]


class EmailRequest(CamelModel):
    subject: str = ""
    body: str = ""


class StatusResponse(CamelModel):
    status: str
