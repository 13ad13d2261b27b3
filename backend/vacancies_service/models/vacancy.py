"""Vacancy model: a job posting shown on the public site."""

from sqlalchemy import Column, String, Text

from vacancies_service.models.base import Base, IntegerIDMixin, JSONType, TimestampMixin


class Vacancy(IntegerIDMixin, TimestampMixin, Base):
    __tablename__ = "vacancies"

    title = Column(String(255), nullable=False, default="")
    subtitle = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")

    # Presentation assets
    header_image = Column(String(500), nullable=False, default="")  # image URL or path
    bg_gradient = Column(String(255), nullable=False, default="")  # CSS gradient

    # Opaque JSON lists
    requirements = Column(JSONType)
    tech_stack = Column(JSONType)

    __table_args__ = {"sqlite_autoincrement": True}
