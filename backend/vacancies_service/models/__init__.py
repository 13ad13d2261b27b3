"""SQLAlchemy models package."""

from vacancies_service.models.base import Base, TimestampMixin
from vacancies_service.models.vacancy import Vacancy
from vacancies_service.models.application import Application

__all__ = [
    "Base",
    "TimestampMixin",
    "Vacancy",
    "Application",
]
