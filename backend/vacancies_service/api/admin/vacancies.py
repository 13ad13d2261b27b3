"""Admin vacancy endpoints. Every successful write invalidates the vacancy cache."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vacancies_service.api.public import list_vacancies
from vacancies_service.dependencies.context import get_db, get_vacancy_cache
from vacancies_service.models.vacancy import Vacancy
from vacancies_service.schemas.vacancy import VacancyCreate, VacancyList, VacancyRead, VacancyUpdate
from vacancies_service.services.vacancy_cache import VacancyCache

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin-vacancies"])

# Same handler as the public listing, cache included.
router.add_api_route("/vacancies", list_vacancies, methods=["GET"], response_model=VacancyList)


@router.post("/vacancy", response_model=VacancyRead, status_code=201)
async def create_vacancy(
    payload: VacancyCreate,
    db: AsyncSession = Depends(get_db),
    cache: VacancyCache = Depends(get_vacancy_cache),
):
    """Create a vacancy."""
    vacancy = Vacancy(**payload.model_dump())
    db.add(vacancy)
    try:
        await db.commit()
        await db.refresh(vacancy)
    except SQLAlchemyError:
        logger.exception("Failed to create vacancy")
        raise HTTPException(status_code=500, detail="Failed to create vacancy")

    await cache.invalidate()
    logger.info("Created vacancy %s (%r)", vacancy.id, vacancy.title)
    return vacancy


@router.put("/vacancy/{vacancy_id}", response_model=VacancyRead)
async def update_vacancy(
    vacancy_id: int,
    payload: VacancyUpdate,
    db: AsyncSession = Depends(get_db),
    cache: VacancyCache = Depends(get_vacancy_cache),
):
    """Merge non-empty fields from the payload into the stored vacancy."""
    try:
        vacancy = await db.get(Vacancy, vacancy_id)
    except SQLAlchemyError:
        logger.exception("Failed to load vacancy %s", vacancy_id)
        raise HTTPException(status_code=500, detail="Failed to query vacancy")

    if not vacancy:
        raise HTTPException(status_code=404, detail="Vacancy not found")

    for field, value in payload.changes().items():
        setattr(vacancy, field, value)
    vacancy.updated_at = func.now()

    try:
        await db.commit()
        await db.refresh(vacancy)
    except SQLAlchemyError:
        logger.exception("Failed to update vacancy %s", vacancy_id)
        raise HTTPException(status_code=500, detail="Failed to update vacancy")

    await cache.invalidate()
    return vacancy


@router.delete("/vacancy/{vacancy_id}", status_code=204)
async def delete_vacancy(
    vacancy_id: int,
    db: AsyncSession = Depends(get_db),
    cache: VacancyCache = Depends(get_vacancy_cache),
):
    """Delete a vacancy. Deleting an unknown id is not an error."""
    try:
        await db.execute(delete(Vacancy).where(Vacancy.id == vacancy_id))
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Failed to delete vacancy %s", vacancy_id)
        raise HTTPException(status_code=500, detail="Failed to delete vacancy")

    await cache.invalidate()
    return Response(status_code=204)
