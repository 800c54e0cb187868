"""Tests for FileCounterRepository — real files under tmp_path."""

import asyncio

import pytest

from app.adapters.persistence.file_counter import FileCounterRepository
from app.domain.errors import MalformedStoredValue, StorageUnavailable


@pytest.mark.asyncio
async def test_get_reads_stored_value(file_repo):
    assert await file_repo.get() == 5


@pytest.mark.asyncio
async def test_increment_returns_and_persists_new_value(file_repo, counter_file):
    assert await file_repo.increment() == 6
    assert counter_file.read_text() == "6"


@pytest.mark.asyncio
async def test_sequential_increments_add_up(file_repo):
    for _ in range(10):
        await file_repo.increment()
    assert await file_repo.get() == 15


@pytest.mark.asyncio
async def test_missing_file_reads_as_zero_and_is_created(tmp_path):
    path = tmp_path / "db.txt"
    repo = FileCounterRepository(path)
    assert await repo.get() == 0
    assert path.read_text() == "0"


@pytest.mark.asyncio
async def test_missing_parent_directory_is_created(tmp_path):
    path = tmp_path / "nested" / "db.txt"
    repo = FileCounterRepository(path)
    assert await repo.increment() == 1
    assert path.read_text() == "1"


@pytest.mark.asyncio
async def test_trailing_newline_is_tolerated(counter_file, file_repo):
    counter_file.write_text("12\n")
    assert await file_repo.get() == 12


@pytest.mark.asyncio
async def test_malformed_content_raises(counter_file, file_repo):
    counter_file.write_text("lots")
    with pytest.raises(MalformedStoredValue):
        await file_repo.get()


@pytest.mark.asyncio
async def test_malformed_content_is_not_overwritten_by_increment(counter_file, file_repo):
    counter_file.write_text("lots")
    with pytest.raises(MalformedStoredValue):
        await file_repo.increment()
    assert counter_file.read_text() == "lots"


@pytest.mark.asyncio
async def test_unreadable_path_raises_storage_unavailable(tmp_path):
    # A directory where the file should be
    path = tmp_path / "db.txt"
    path.mkdir()
    repo = FileCounterRepository(path)
    with pytest.raises(StorageUnavailable):
        await repo.get()


@pytest.mark.asyncio
async def test_unwritable_location_raises_storage_unavailable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    repo = FileCounterRepository(blocker / "db.txt")
    with pytest.raises(StorageUnavailable):
        await repo.increment()


@pytest.mark.asyncio
async def test_no_temp_file_left_behind(file_repo, counter_file):
    await file_repo.increment()
    assert sorted(p.name for p in counter_file.parent.iterdir()) == ["db.txt"]


@pytest.mark.asyncio
async def test_set_overwrites_value(file_repo, counter_file):
    assert await file_repo.set(100) == 100
    assert counter_file.read_text() == "100"


@pytest.mark.asyncio
async def test_concurrent_increments_do_not_lose_updates(file_repo):
    """K overlapping increments from V end exactly at V+K (always within [V+1, V+K])."""
    k = 50
    results = await asyncio.gather(*(file_repo.increment() for _ in range(k)))
    final = await file_repo.get()
    assert 5 + 1 <= final <= 5 + k
    assert final == 5 + k
    assert sorted(results) == list(range(6, 5 + k + 1))


# ─── Availability check ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_check_available_does_not_create_missing_file(tmp_path):
    path = tmp_path / "db.txt"
    repo = FileCounterRepository(path)
    await repo.check_available()
    assert not path.exists()


@pytest.mark.asyncio
async def test_check_available_accepts_missing_nested_directory(tmp_path):
    path = tmp_path / "a" / "b" / "db.txt"
    await FileCounterRepository(path).check_available()
    assert not (tmp_path / "a").exists()


@pytest.mark.asyncio
async def test_check_available_reports_malformed_content(counter_file, file_repo):
    counter_file.write_text("lots")
    with pytest.raises(MalformedStoredValue):
        await file_repo.check_available()
    assert counter_file.read_text() == "lots"


@pytest.mark.asyncio
async def test_check_available_reports_blocked_location(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(StorageUnavailable):
        await FileCounterRepository(blocker / "db.txt").check_available()
