"""Admin router aggregation."""

from fastapi import APIRouter

from vacancies_service.api.admin.vacancies import router as vacancies_router
from vacancies_service.api.admin.applications import router as applications_router

router = APIRouter()

router.include_router(vacancies_router)
router.include_router(applications_router)
