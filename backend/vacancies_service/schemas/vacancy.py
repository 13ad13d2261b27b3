"""Pydantic schemas for Vacancy model."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict

from vacancies_service.schemas.base import CamelModel


class VacancyBase(CamelModel):
    """Base fields for vacancy."""

    title: str = ""
    subtitle: str = ""
    description: str = ""
    header_image: str = ""
    bg_gradient: str = ""
    requirements: Any = None
    tech_stack: Any = None


class VacancyCreate(VacancyBase):
    """Fields for creating a vacancy. Ids and timestamps are assigned by the store."""


class VacancyUpdate(CamelModel):
    """Partial update; only non-empty values replace what is stored."""

    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    header_image: str | None = None
    bg_gradient: str | None = None
    requirements: Any = None
    tech_stack: Any = None

    def changes(self) -> dict[str, Any]:
        return {
            field: value
            for field, value in self.model_dump().items()
            if value is not None and value != ""
        }


class VacancyRead(VacancyBase):
    """Full vacancy output. Frozen because instances are shared through the cache."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime
    updated_at: datetime


class VacancyList(CamelModel):
    vacancies: list[VacancyRead]
