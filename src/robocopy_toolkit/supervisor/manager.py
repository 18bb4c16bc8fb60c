"""Job supervisor for Robocopy Toolkit.

Runs a batch of independent robocopy descriptors on worker threads and
collects one :class:`RunRecord` per job.  Descriptors share no state, so
each one is handed to exactly one thread.
"""

from __future__ import annotations

import threading
import time
import uuid
from typing import Callable, List, Optional, Sequence

from ..errors import OptionError
from ..logging.logger import RunRecord, format_command
from ..transfer.command import Robocopy
from ..transfer.exit_codes import describe_exit_code

RecordCallback = Callable[[RunRecord], None]


def run_job(job: Robocopy, name: str, check: bool = False, run_id: Optional[str] = None) -> RunRecord:
    """Run a single job and describe the outcome.

    A missing executable or rejected options are recorded on the returned
    record instead of being raised, so one bad job does not stop a batch.
    """
    started_at = time.time()
    start = time.monotonic()
    exit_code: Optional[int] = None
    error_msg = ''
    try:
        exit_code = job.run(check=check)
        description = describe_exit_code(exit_code)
    except (OSError, OptionError) as exc:
        description = 'Not run'
        error_msg = str(exc)
    return RunRecord(
        run_id=run_id or uuid.uuid4().hex,
        job=name,
        started_at=started_at,
        duration_ms=int((time.monotonic() - start) * 1000),
        command=format_command(job.command()),
        exit_code=exit_code,
        description=description,
        error_msg=error_msg,
    )


class JobSupervisor:
    """Run robocopy jobs with at most ``max_workers`` running at once."""

    def __init__(self, max_workers: int = 1, check: bool = False, on_record: Optional[RecordCallback] = None):
        if max_workers < 1:
            raise ValueError(f'max_workers must be at least 1, got {max_workers}')
        self.max_workers = max_workers
        self.check = check
        self.on_record = on_record
        self.run_id = uuid.uuid4().hex
        self._lock = threading.Lock()

    def run_jobs(self, jobs: Sequence[Robocopy], names: Optional[Sequence[str]] = None) -> List[RunRecord]:
        """Run ``jobs`` and return their records in job order.

        Every job is attempted.  If a job or the ``on_record`` callback raises,
        the remaining jobs still run and the first such exception is raised
        once all workers have finished.
        """
        if names is None:
            names = [f'job-{i}' for i in range(1, len(jobs) + 1)]
        records: List[Optional[RunRecord]] = [None] * len(jobs)
        pending = iter(range(len(jobs)))
        errors: List[BaseException] = []

        def worker() -> None:
            while True:
                with self._lock:
                    index = next(pending, None)
                if index is None:
                    return
                try:
                    record = run_job(jobs[index], names[index], check=self.check, run_id=self.run_id)
                    with self._lock:
                        records[index] = record
                        if self.on_record is not None:
                            self.on_record(record)
                except Exception as exc:
                    with self._lock:
                        errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(min(self.max_workers, len(jobs)))]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        if errors:
            raise errors[0]
        return [record for record in records if record is not None]
