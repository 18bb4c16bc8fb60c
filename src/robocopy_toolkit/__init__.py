"""Robocopy Toolkit.

Typed option groups for the Windows ``robocopy`` command, a command
descriptor that renders them into an argument vector, and helpers to run
configured copy jobs.
"""

from .errors import OptionError, RobocopyNotFoundError
from .transfer.command import Robocopy
from .transfer.exit_codes import ExitCode, describe_exit_code

__version__ = '0.1.0'

__all__ = [
    'ExitCode',
    'OptionError',
    'Robocopy',
    'RobocopyNotFoundError',
    'describe_exit_code',
]
