"""Exceptions raised by Robocopy Toolkit."""

from __future__ import annotations


class OptionError(ValueError):
    """An option value or combination that robocopy would reject."""


class RobocopyNotFoundError(FileNotFoundError):
    """The robocopy executable could not be located on ``PATH``."""

    def __init__(self, executable: str):
        super().__init__(f'Executable not found: {executable}')
        self.executable = executable
