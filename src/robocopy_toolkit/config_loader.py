"""Configuration loading for Robocopy Toolkit.

Jobs are declared in YAML.  Each job names a source, a destination, an
optional file pattern and any of the six option groups as plain
mappings::

    executable: robocopy
    workers: 2
    jobs:
      - name: documents
        source: C:\\Users\\me\\Documents
        destination: D:\\Backup\\Documents
        copy: {empty_subdirectories: true, copy: DAT, threads: 8}
        file_selection: {exclude_files: ['*.tmp', '*.bak']}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from .transfer.command import DEFAULT_EXECUTABLE, Robocopy
from .transfer.options import (
    CopyOptions,
    FileSelectionOptions,
    JobOptions,
    LoggingOptions,
    RetryOptions,
    ThrottlingOptions,
    from_mapping,
)

# Config section name -> (option group, descriptor setter).
OPTION_SECTIONS = {
    'copy': (CopyOptions, 'set_copy_options'),
    'throttling': (ThrottlingOptions, 'set_throttling_options'),
    'file_selection': (FileSelectionOptions, 'set_file_selection_options'),
    'retry': (RetryOptions, 'set_retry_options'),
    'logging': (LoggingOptions, 'set_logging_options'),
    'job': (JobOptions, 'set_job_options'),
}

_JOB_KEYS = {'name', 'source', 'destination', 'pattern', *OPTION_SECTIONS}


def load_config(path: Path) -> Dict[str, Any]:
    """Read a YAML configuration file.  An empty file yields an empty config."""
    with path.open('r', encoding='utf-8') as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f'{path}: top level must be a mapping')
    if data.get('jobs') is None:
        data['jobs'] = []
    if not isinstance(data['jobs'], list):
        raise ValueError(f'{path}: jobs must be a list')
    return data


def _job_name(spec: Mapping[str, Any], position: int) -> str:
    return spec.get('name', f'job-{position}')


def build_job(spec: Mapping[str, Any], executable: str = DEFAULT_EXECUTABLE, position: int = 1) -> Robocopy:
    """Turn one job mapping into a :class:`Robocopy` descriptor.

    ``position`` is the 1-based index of the job, used to name unnamed jobs.
    """
    if not isinstance(spec, Mapping):
        raise ValueError(f'Job {position}: expected a mapping, got {spec!r}')
    name = _job_name(spec, position)
    unknown = set(spec) - _JOB_KEYS
    if unknown:
        raise ValueError(f'Job {name!r}: unknown keys {sorted(unknown)}')
    for key in ('source', 'destination'):
        if key not in spec:
            raise KeyError(f'Job {name!r}: missing {key!r}')
    job = Robocopy(spec['source'], spec['destination'], spec.get('pattern', '*.*'), executable=executable)
    for section, (group_cls, setter) in OPTION_SECTIONS.items():
        data = spec.get(section)
        if data is None:
            continue
        try:
            group = from_mapping(group_cls, data)
        except ValueError as exc:
            raise ValueError(f'Job {name!r}: {exc}') from exc
        getattr(job, setter)(group)
    return job


def build_jobs(cfg: Mapping[str, Any]) -> List[Robocopy]:
    executable = cfg.get('executable', DEFAULT_EXECUTABLE)
    return [build_job(spec, executable, i) for i, spec in enumerate(cfg.get('jobs', []), start=1)]


def job_names(cfg: Mapping[str, Any]) -> List[str]:
    return [_job_name(spec, i) for i, spec in enumerate(cfg.get('jobs', []), start=1)]
