"""Application model: a candidacy submitted against a vacancy."""

from sqlalchemy import Column, Index, Integer, String, Text

from vacancies_service.models.base import Base, IntegerIDMixin, JSONType, TimestampMixin


class Application(IntegerIDMixin, TimestampMixin, Base):
    __tablename__ = "applications"

    # Contacts
    primary_contact = Column(String(255), nullable=False, default="")
    additional_contacts = Column(JSONType)

    name = Column(String(255), nullable=False, default="")
    about = Column(Text, nullable=False, default="")

    # Informational only, not a constraint: applications may reference removed vacancies.
    vacancy_id = Column(Integer)

    status = Column(String(50), nullable=False, default="pending")  # pending, processed, rejected
    salary_expectation = Column(String(255), nullable=False, default="")
    available_from = Column(String(255), nullable=False, default="")  # free text, not a date

    __table_args__ = (
        Index("idx_application_vacancy", "vacancy_id"),
        Index("idx_application_status", "status"),
        {"sqlite_autoincrement": True},
    )
