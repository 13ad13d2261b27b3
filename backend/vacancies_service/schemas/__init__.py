"""Pydantic schemas package."""

from vacancies_service.schemas.vacancy import (
    VacancyBase,
    VacancyCreate,
    VacancyList,
    VacancyRead,
    VacancyUpdate,
)
from vacancies_service.schemas.application import (
    ApplicationBase,
    ApplicationCreate,
    ApplicationList,
    ApplicationRead,
    ApplicationUpdate,
    EmailRequest,
    StatusResponse,
)

__all__ = [
    # Vacancy
    "VacancyBase",
    "VacancyCreate",
    "VacancyList",
    "VacancyRead",
    "VacancyUpdate",
    # Application
    "ApplicationBase",
    "ApplicationCreate",
    "ApplicationList",
    "ApplicationRead",
    "ApplicationUpdate",
    "EmailRequest",
    "StatusResponse",
]
