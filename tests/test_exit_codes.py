from __future__ import annotations

import pytest

from robocopy_toolkit.transfer.exit_codes import ExitCode, describe_exit_code, is_failure


@pytest.mark.parametrize('code, text', [
    (0, 'No files were copied. No failure was encountered. No files were mismatched. '
        'The files already exist in the destination directory; therefore, the copy operation was skipped.'),
    (1, 'All files were copied successfully.'),
    (2, "There are some additional files in the destination directory that aren't present "
        'in the source directory. No files were copied.'),
    (3, 'Some files were copied. Additional files were present. No failure was encountered.'),
    (5, 'Some files were copied. Some files were mismatched. No failure was encountered.'),
    (6, 'Additional files and mismatched files exist. No files were copied and no failures were '
        'encountered meaning that the files already exist in the destination directory.'),
    (7, 'Files were copied, a file mismatch was present, and additional files were present.'),
    (8, "Several files didn't copy."),
])
def test_known_codes(code: int, text: str) -> None:
    assert describe_exit_code(code) == text
    assert ExitCode(code).description == text


@pytest.mark.parametrize('code', [4, 9, 16, -1, 255])
def test_unknown_codes(code: int) -> None:
    assert describe_exit_code(code) == 'Unknown exit code'


def test_code_four_is_unused() -> None:
    assert 4 not in {int(code) for code in ExitCode}
    assert len(ExitCode) == 8


def test_failure_split() -> None:
    assert not any(is_failure(code) for code in range(8))
    assert is_failure(8)
    assert is_failure(16)
    assert is_failure(-1)
