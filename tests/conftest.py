from __future__ import annotations

import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

CONFIG_YAML = r"""
executable: robocopy
workers: 2
jobs:
  - name: documents
    source: 'C:\Users\me\Documents'
    destination: 'D:\Backup\Documents'
    copy:
      empty_subdirectories: true
      copy: DAT
      threads: 4
    file_selection:
      exclude_files: ['*.tmp', '*.bak']
  - name: photos
    source: 'C:\Users\me\Pictures'
    destination: '\\nas\photos'
    pattern: '*.jpg'
    throttling:
      io_rate: 10m
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / 'config.yml'
    path.write_text(CONFIG_YAML, encoding='utf-8')
    return path


@pytest.fixture
def fake_robocopy(monkeypatch):
    """Replace ``subprocess.run`` with a recorder returning exit codes by source."""
    calls = []
    codes = {}

    def fake_run(argv, **kwargs):
        calls.append(argv)
        return SimpleNamespace(returncode=codes.get(argv[1], 1))

    monkeypatch.setattr(subprocess, 'run', fake_run)
    return SimpleNamespace(calls=calls, codes=codes)
