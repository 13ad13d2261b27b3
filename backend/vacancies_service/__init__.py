"""Recruitment listing backend: public vacancies, admin postings and applications."""

__version__ = "0.1.0"
