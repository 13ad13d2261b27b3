"""FastAPI dependencies resolving the application context."""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vacancies_service.context import AppContext
from vacancies_service.services.notifier import Notifier
from vacancies_service.services.vacancy_cache import VacancyCache


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db(context: AppContext = Depends(get_context)) -> AsyncGenerator[AsyncSession, None]:
    async with context.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_vacancy_cache(context: AppContext = Depends(get_context)) -> VacancyCache:
    return context.vacancy_cache


def get_notifier(context: AppContext = Depends(get_context)) -> Notifier:
    return context.notifier
