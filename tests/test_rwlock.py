"""Tests for the asyncio reader/writer lock."""

import asyncio

import pytest

from vacancies_service.services.rwlock import ReadWriteLock


@pytest.mark.asyncio
async def test_readers_share_the_lock():
    lock = ReadWriteLock()
    peak = 0

    async def reader():
        nonlocal peak
        async with lock.read():
            peak = max(peak, lock.readers)
            await asyncio.sleep(0.01)

    await asyncio.gather(*(reader() for _ in range(5)))

    assert peak == 5
    assert lock.readers == 0


@pytest.mark.asyncio
async def test_writer_waits_for_active_readers():
    lock = ReadWriteLock()
    acquired = asyncio.Event()

    async def writer():
        async with lock.write():
            acquired.set()

    async with lock.read():
        task = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        assert not acquired.is_set()

    await asyncio.wait_for(task, timeout=1)
    assert acquired.is_set()


@pytest.mark.asyncio
async def test_readers_wait_for_active_writer():
    lock = ReadWriteLock()
    observed = []

    async def reader():
        async with lock.read():
            observed.append(lock.writer_active)

    async with lock.write():
        task = asyncio.create_task(reader())
        await asyncio.sleep(0.01)
        assert observed == []

    await asyncio.wait_for(task, timeout=1)
    assert observed == [False]


@pytest.mark.asyncio
async def test_cancelled_writer_releases_queued_readers():
    lock = ReadWriteLock()

    async def writer():
        async with lock.write():
            pass

    async with lock.read():
        waiting_writer = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        waiting_writer.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiting_writer

    async with lock.read():
        assert lock.readers == 1


@pytest.mark.asyncio
async def test_queued_writer_goes_before_later_readers():
    lock = ReadWriteLock()
    order = []

    async def writer():
        async with lock.write():
            order.append("writer")

    async def late_reader():
        async with lock.read():
            order.append("reader")

    async with lock.read():
        writer_task = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        reader_task = asyncio.create_task(late_reader())
        await asyncio.sleep(0.01)
        assert order == []
        assert lock.readers == 1

    await asyncio.wait_for(asyncio.gather(writer_task, reader_task), timeout=1)
    assert order == ["writer", "reader"]
