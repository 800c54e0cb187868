"""Pytest configuration and shared fixtures."""

import pytest

from app.adapters.persistence.file_counter import FileCounterRepository
from tests.fakes import FakeCounterRepo


@pytest.fixture
def counter_file(tmp_path):
    path = tmp_path / "db.txt"
    path.write_text("5")
    return path


@pytest.fixture
def file_repo(counter_file):
    return FileCounterRepository(counter_file)


@pytest.fixture
def fake_counter():
    return FakeCounterRepo(value=5)
