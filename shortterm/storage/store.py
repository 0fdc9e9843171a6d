from __future__ import annotations

"""JSON history log of recall runs.

The log is a single UTF-8 JSON array of run records, oldest first:

[
  {"date": "...", "avg_duration": 3.2, "total_score": 120,
   "results": [{"score": 7, "duration": 2.9, "count": 7}, ...]},
  ...
]

Notes:
- The whole file is read once at start and rewritten in full on save.
- Rewrites go through a temp file and ``os.replace`` so a shorter history
  never leaves stale bytes behind.
- Content that does not parse is copied aside before being treated as an
  empty history.
"""

import json
import os
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from ..app.explain import trace as xtrace
from ..results.schema import DatabaseRecord

FILE_MODE = 0o600

_RECORDS = TypeAdapter(List[DatabaseRecord])


def expand_path(path: str | os.PathLike[str]) -> Path:
    return Path(path).expanduser()


class ResultStore:
    """Owns the history log for one run: load it, then append once."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = expand_path(path)
        self._records: List[DatabaseRecord] = []
        self._loaded = False

    @property
    def records(self) -> List[DatabaseRecord]:
        return list(self._records)

    def load(self) -> List[DatabaseRecord]:
        """Open (creating if needed) and read the full log.

        OSError is not caught: an unreadable log aborts the run before any
        trial is shown.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        with os.fdopen(fd, "rb") as f:
            raw = f.read()
        self._records = self._parse(raw)
        self._loaded = True
        xtrace("history_loaded", {"path": str(self.path), "runs": len(self._records)})
        return self.records

    def read(self) -> List[DatabaseRecord]:
        """Read the log for reporting, without creating or backing up anything.

        A missing log reads as an empty history. The loaded history is not
        marked for appending; ``append`` still goes through ``load``.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raw = b""
        self._records = self._parse(raw, keep_backup=False)
        return self.records

    def _parse(self, raw: bytes, *, keep_backup: bool = True) -> List[DatabaseRecord]:
        if not raw.strip():
            return []
        try:
            data = json.loads(raw.decode("utf-8"))
            return _RECORDS.validate_python(data)
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            if not keep_backup:
                print(
                    f"WARNING: Results database '{self.path}' is unreadable ({exc.__class__.__name__}); "
                    "showing no history.",
                    file=sys.stderr,
                )
                return []
            backup = self._backup(raw)
            print(
                f"WARNING: Results database '{self.path}' is unreadable ({exc.__class__.__name__}); "
                f"starting a new history. Old content kept in '{backup}'.",
                file=sys.stderr,
            )
            return []

    def _backup(self, raw: bytes) -> Path:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        backup = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        backup.write_bytes(raw)
        os.chmod(backup, FILE_MODE)
        return backup

    def append(self, record: DatabaseRecord) -> List[DatabaseRecord]:
        """Append a run to the loaded history and rewrite the whole log."""
        if not self._loaded:
            self.load()
        records = self._records + [record]
        payload = json.dumps([r.model_dump() for r in records], separators=(",", ":"))
        self._write(payload)
        self._records = records
        xtrace("run_saved", {"path": str(self.path), "runs": len(records)})
        return self.records

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
