"""Shared JSON file access for the file-backed repositories.

A read-modify-write done under ``locked()`` is serialized against every
other writer of the same file, in this process or any other: threads
queue on a per-path lock, processes on a ``.lock`` file next to the data.
Writes go to a uniquely named temporary file that is then renamed over
the original, so readers never see a half-written file.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from invledger.domain.exceptions import RepositoryError

LOCK_TIMEOUT_SECONDS = 30

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = _locks[path] = threading.RLock()
        return lock


class JsonFile:

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT_SECONDS) -> None:
        self._file_path = Path(file_path).resolve()
        self._thread_lock = _lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path.with_name(self._file_path.name + ".lock")),
            timeout=lock_timeout,
        )
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the file exclusively; re-entrant within one thread."""
        with self._thread_lock:
            try:
                self._file_lock.acquire()
            except Timeout as exc:
                raise RepositoryError(f"Timed out waiting for lock on {self._file_path}", exc) from exc
            try:
                yield
            finally:
                self._file_lock.release()

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Could not read {self._file_path}", exc) from exc
        if not isinstance(records, list):
            raise RepositoryError(f"Expected a JSON list in {self._file_path}")
        return records

    def persist(self, records: list[dict]) -> None:
        with self.locked():
            self._write_atomically(json.dumps(records, indent=2) + "\n")

    @staticmethod
    def next_id(records: list[dict]) -> str:
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    # --- File helpers ---------------------------------------------------------

    def _write_atomically(self, text: str) -> None:
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=self._file_path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise RepositoryError(f"Could not write {self._file_path}", exc) from exc

    def _ensure_file(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryError(f"Could not create {self._file_path.parent}", exc) from exc
        with self.locked():
            if not self._file_path.exists():
                self._write_atomically("[]")
