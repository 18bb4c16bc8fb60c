"""Robocopy exit codes.

Robocopy reports a small bitmask-like status rather than a plain
success/failure flag.  Codes below 8 mean the run completed; 8 and above
mean at least one copy failed.  Code 4 is not documented and has no
member.
"""

from __future__ import annotations

import enum

UNKNOWN_EXIT_CODE = 'Unknown exit code'


class ExitCode(enum.IntEnum):
    ALREADY_EXIST = 0
    ALL_FILES_COPIED = 1
    ADDITIONAL_FILES_ON_DEST = 2
    SOME_FILES_COPIED = 3
    SOME_FILES_MISMATCHED = 5
    ADDITIONAL_AND_MISMATCHED_FILES = 6
    FILES_COPIED_MISMATCHED_AND_ADDITIONAL = 7
    SEVERAL_FILES_DIDNT_COPY = 8

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self]


DESCRIPTIONS = {
    ExitCode.ALREADY_EXIST: (
        'No files were copied. No failure was encountered. No files were mismatched. '
        'The files already exist in the destination directory; therefore, the copy '
        'operation was skipped.'
    ),
    ExitCode.ALL_FILES_COPIED: 'All files were copied successfully.',
    ExitCode.ADDITIONAL_FILES_ON_DEST: (
        "There are some additional files in the destination directory that aren't "
        'present in the source directory. No files were copied.'
    ),
    ExitCode.SOME_FILES_COPIED: (
        'Some files were copied. Additional files were present. No failure was encountered.'
    ),
    ExitCode.SOME_FILES_MISMATCHED: (
        'Some files were copied. Some files were mismatched. No failure was encountered.'
    ),
    ExitCode.ADDITIONAL_AND_MISMATCHED_FILES: (
        'Additional files and mismatched files exist. No files were copied and no '
        'failures were encountered meaning that the files already exist in the '
        'destination directory.'
    ),
    ExitCode.FILES_COPIED_MISMATCHED_AND_ADDITIONAL: (
        'Files were copied, a file mismatch was present, and additional files were present.'
    ),
    ExitCode.SEVERAL_FILES_DIDNT_COPY: "Several files didn't copy.",
}


def describe_exit_code(code: int) -> str:
    """Return the documented meaning of ``code``, or a generic message."""
    try:
        return ExitCode(code).description
    except ValueError:
        return UNKNOWN_EXIT_CODE


def is_failure(code: int) -> bool:
    return code >= ExitCode.SEVERAL_FILES_DIDNT_COPY or code < 0
