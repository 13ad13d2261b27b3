"""Store queries backing the vacancy cache."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vacancies_service.models.vacancy import Vacancy
from vacancies_service.schemas.vacancy import VacancyRead


async def load_vacancies(db: AsyncSession) -> list[VacancyRead]:
    result = await db.execute(select(Vacancy).order_by(Vacancy.id))
    return [VacancyRead.model_validate(vacancy) for vacancy in result.scalars().all()]


async def load_vacancy(db: AsyncSession, vacancy_id: int) -> VacancyRead | None:
    vacancy = await db.get(Vacancy, vacancy_id)
    if vacancy is None:
        return None
    return VacancyRead.model_validate(vacancy)
