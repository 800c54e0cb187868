"""Flat-file counter adapter — implements CounterRepository.

The file holds nothing but the decimal value and is replaced in full on
every write.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from app.application.ports.counter_repo import CounterRepository
from app.domain.errors import StorageUnavailable
from app.domain.value_objects.like_count import parse_like_count, render_like_count

logger = logging.getLogger(__name__)


class FileCounterRepository(CounterRepository):
    """Counter stored as a decimal string in a single file.

    All read-modify-write cycles go through one asyncio.Lock, so the HTTP
    routes and the live channel cannot lose each other's increments as long
    as they share this instance. File access runs in a worker thread.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self) -> int:
        async with self._lock:
            return await asyncio.to_thread(self._read_or_init)

    async def increment(self) -> int:
        async with self._lock:
            current = await asyncio.to_thread(self._read_or_init)
            new_value = current + 1
            await asyncio.to_thread(self._write, new_value)
        logger.debug("Counter incremented to %d (%s)", new_value, self._path)
        return new_value

    async def set(self, value: int) -> int:
        async with self._lock:
            await asyncio.to_thread(self._write, value)
        return value

    async def check_available(self) -> None:
        await asyncio.to_thread(self._check)

    # ─── Blocking helpers (run in a worker thread) ──────────────────

    def _read_or_init(self) -> int:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Counter file %s not found, initialising to 0", self._path)
            self._write(0)
            return 0
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailable(f"Cannot read counter file {self._path}: {e}") from e
        return parse_like_count(raw)

    def _check(self) -> None:
        if self._path.exists():
            try:
                raw = self._path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise StorageUnavailable(f"Cannot read counter file {self._path}: {e}") from e
            parse_like_count(raw)
            return
        # Missing file: the nearest existing ancestor must be a writable directory
        parent = self._path.parent
        while not parent.exists():
            parent = parent.parent
        if not parent.is_dir() or not os.access(parent, os.W_OK | os.X_OK):
            raise StorageUnavailable(f"Cannot create counter file {self._path}")

    def _write(self, value: int) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(render_like_count(value), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageUnavailable(f"Cannot write counter file {self._path}: {e}") from e
