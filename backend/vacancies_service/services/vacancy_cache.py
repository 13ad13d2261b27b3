"""In-memory read cache for the full vacancy list."""

import logging
from typing import Awaitable, Callable, Iterable

from vacancies_service.schemas.vacancy import VacancyRead
from vacancies_service.services.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

FetchAll = Callable[[], Awaitable[Iterable[VacancyRead]]]
FetchOne = Callable[[int], Awaitable[VacancyRead | None]]


class VacancyCache:
    """Whole-collection cache of vacancies shared by every request handler.

    The store is always queried outside the lock; the write lock is only taken
    to publish or clear the cached tuple. Every invalidation bumps a generation
    counter, and a cold fetch only publishes its result if the generation it
    started under is still current, so a read racing a write can never put
    pre-write data back into the cache.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._vacancies: tuple[VacancyRead, ...] | None = None
        self._generation = 0

    @property
    def populated(self) -> bool:
        return self._vacancies is not None

    async def get_all(self, fetch: FetchAll) -> tuple[VacancyRead, ...]:
        """Return the cached list, loading it with ``fetch`` on a cold cache.

        Errors raised by ``fetch`` propagate and leave the cache empty.
        """
        async with self._lock.read():
            cached = self._vacancies
            generation = self._generation
        if cached is not None:
            return cached

        vacancies = tuple(await fetch())

        async with self._lock.write():
            if self._generation == generation:
                self._vacancies = vacancies
                logger.debug("Vacancy cache populated with %d entries", len(vacancies))
            else:
                logger.debug("Vacancy cache invalidated during fetch, result not cached")
        return vacancies

    async def get_one(self, vacancy_id: int, fetch_one: FetchOne) -> VacancyRead | None:
        """Look ``vacancy_id`` up in the cached list, else ask the store."""
        async with self._lock.read():
            if self._vacancies is not None:
                for vacancy in self._vacancies:
                    if vacancy.id == vacancy_id:
                        return vacancy
        return await fetch_one(vacancy_id)

    async def invalidate(self) -> None:
        async with self._lock.write():
            self._vacancies = None
            self._generation += 1
        logger.debug("Vacancy cache invalidated")
