"""Run logs for Robocopy Toolkit.

Every robocopy invocation produces a :class:`RunRecord`.  ``CSVRunLogger``
writes each record immediately, while ``JSONRunLogger`` stores records in
a list and writes them to disk when flushed.
"""

from __future__ import annotations

import csv
import json
import subprocess
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import List, Optional


@dataclass
class RunRecord:
    run_id: str
    job: str
    started_at: float
    duration_ms: int
    command: str
    exit_code: Optional[int]
    description: str
    error_msg: str = ''


def format_command(argv: List[str]) -> str:
    """Quote an argument vector the way the Windows shell expects."""
    return subprocess.list2cmdline(argv)


FIELDNAMES = [f.name for f in fields(RunRecord)]


class CSVRunLogger:
    def __init__(self, path: Path):
        self.path = path
        self.file = path.open('w', newline='', encoding='utf-8')
        self.writer = csv.DictWriter(self.file, fieldnames=FIELDNAMES)
        self.writer.writeheader()

    def log_record(self, record: RunRecord) -> None:
        row = asdict(record)
        if row['exit_code'] is None:
            row['exit_code'] = ''
        self.writer.writerow(row)
        self.file.flush()

    def close(self) -> None:
        self.file.close()


class JSONRunLogger:
    def __init__(self, path: Path):
        self.path = path
        self.records: List[dict] = []

    def log_record(self, record: RunRecord) -> None:
        self.records.append(asdict(record))

    def flush(self) -> None:
        with self.path.open('w', encoding='utf-8') as f:
            json.dump(self.records, f, indent=2)

    def close(self) -> None:
        self.flush()
