"""Public endpoints: vacancy listing and application submission."""

import logging
from functools import partial

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vacancies_service.dependencies.context import get_db, get_vacancy_cache
from vacancies_service.models.application import Application
from vacancies_service.schemas.application import STATUS_PENDING, ApplicationCreate, StatusResponse
from vacancies_service.schemas.vacancy import VacancyList, VacancyRead
from vacancies_service.services.vacancies import load_vacancies, load_vacancy
from vacancies_service.services.vacancy_cache import VacancyCache

logger = logging.getLogger(__name__)

router = APIRouter(tags=["public"])


@router.get("/vacancies", response_model=VacancyList)
async def list_vacancies(
    db: AsyncSession = Depends(get_db),
    cache: VacancyCache = Depends(get_vacancy_cache),
):
    """List all vacancies, served from the cache when it is warm."""
    try:
        vacancies = await cache.get_all(partial(load_vacancies, db))
    except SQLAlchemyError:
        logger.exception("Failed to load vacancies")
        raise HTTPException(status_code=500, detail="Failed to query vacancies")
    return VacancyList(vacancies=list(vacancies))


@router.get("/vacancies/{vacancy_id}", response_model=VacancyRead)
async def get_vacancy(
    vacancy_id: int,
    db: AsyncSession = Depends(get_db),
    cache: VacancyCache = Depends(get_vacancy_cache),
):
    """Get a single vacancy, checking the cached list before the store."""
    try:
        vacancy = await cache.get_one(vacancy_id, partial(load_vacancy, db))
    except SQLAlchemyError:
        logger.exception("Failed to load vacancy %s", vacancy_id)
        raise HTTPException(status_code=500, detail="Failed to query vacancy")

    if vacancy is None:
        raise HTTPException(status_code=404, detail="Vacancy not found")
    return vacancy


@router.post("/apply", response_model=StatusResponse, status_code=201)
async def apply(
    payload: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
):
    """Submit an application. New applications always start as pending."""
    data = payload.model_dump()
    data["status"] = STATUS_PENDING
    application = Application(**data)
    db.add(application)
    try:
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Failed to save application")
        raise HTTPException(status_code=500, detail="Failed to save application")

    logger.info(
        "New application %s from %r for vacancy %s",
        application.id,
        application.name,
        application.vacancy_id,
    )
    return StatusResponse(status="application received")
