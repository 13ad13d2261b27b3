"""Admin application endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vacancies_service.dependencies.context import get_db, get_notifier
from vacancies_service.models.application import Application
from vacancies_service.schemas.application import (
    ApplicationList,
    ApplicationRead,
    ApplicationUpdate,
    EmailRequest,
    StatusResponse,
)
from vacancies_service.services.notifier import Notifier, NotifierError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin-applications"])


async def _get_application_or_404(db: AsyncSession, application_id: int) -> Application:
    try:
        application = await db.get(Application, application_id)
    except SQLAlchemyError:
        logger.exception("Failed to load application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to query application")

    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


@router.get("/applications", response_model=ApplicationList)
async def list_applications(db: AsyncSession = Depends(get_db)):
    """List all applications."""
    try:
        result = await db.execute(select(Application).order_by(Application.id))
    except SQLAlchemyError:
        logger.exception("Failed to load applications")
        raise HTTPException(status_code=500, detail="Failed to query applications")

    return ApplicationList(
        applications=[ApplicationRead.model_validate(app) for app in result.scalars().all()]
    )


@router.get("/application/{application_id}", response_model=ApplicationRead)
async def get_application(application_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_application_or_404(db, application_id)


@router.put("/application/{application_id}", response_model=ApplicationRead)
async def update_application(
    application_id: int,
    payload: ApplicationUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace every writable field; anything omitted is reset to its default."""
    application = await _get_application_or_404(db, application_id)

    for field, value in payload.model_dump().items():
        setattr(application, field, value)
    application.updated_at = func.now()

    try:
        await db.commit()
        await db.refresh(application)
    except SQLAlchemyError:
        logger.exception("Failed to update application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to update application")

    return application


@router.delete("/application/{application_id}", status_code=204)
async def delete_application(application_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(delete(Application).where(Application.id == application_id))
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Failed to delete application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to delete application")

    return Response(status_code=204)


@router.post("/application/{application_id}/send-email", response_model=StatusResponse)
async def send_email(
    application_id: int,
    payload: EmailRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Email the applicant's primary contact."""
    application = await _get_application_or_404(db, application_id)

    try:
        await notifier.send(application.primary_contact, payload.subject, payload.body)
    except NotifierError as e:
        logger.error("Failed to send email for application %s: %s", application_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to send email: {e}")

    return StatusResponse(status="email sent")
