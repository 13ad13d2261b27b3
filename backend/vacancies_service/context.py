"""Process-wide application context shared by every request handler."""

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from vacancies_service.config import Settings
from vacancies_service.models.base import create_engine_from_settings, create_session_factory
from vacancies_service.services.notifier import Notifier
from vacancies_service.services.vacancy_cache import VacancyCache


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    notifier: Notifier
    vacancy_cache: VacancyCache = field(default_factory=VacancyCache)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = create_engine_from_settings(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            notifier=Notifier.from_settings(settings),
        )
