from .command import Robocopy
from .exit_codes import ExitCode, describe_exit_code, is_failure
from .options import (
    CopyOptions,
    FileSelectionOptions,
    JobOptions,
    LoggingOptions,
    RetryOptions,
    ThrottlingOptions,
    from_mapping,
    option_args,
)
from .validation import validate_options

__all__ = [
    'CopyOptions',
    'ExitCode',
    'FileSelectionOptions',
    'JobOptions',
    'LoggingOptions',
    'RetryOptions',
    'Robocopy',
    'ThrottlingOptions',
    'describe_exit_code',
    'from_mapping',
    'is_failure',
    'option_args',
    'validate_options',
]
