"""Robocopy command descriptor.

A :class:`Robocopy` holds the source, destination and file pattern of one
invocation plus any attached option groups.  It renders them into an
argument vector and runs the executable once, keeping the exit code.
"""

from __future__ import annotations

import io
import locale
import subprocess
from typing import IO, List, Optional, Union

from ..errors import RobocopyNotFoundError
from .exit_codes import ExitCode, describe_exit_code
from .options import (
    CopyOptions,
    FileSelectionOptions,
    JobOptions,
    LoggingOptions,
    RetryOptions,
    ThrottlingOptions,
    option_args,
)
from .validation import validate_options

DEFAULT_EXECUTABLE = 'robocopy'

Stream = Optional[Union[IO, int]]


def _has_fileno(stream: Stream) -> bool:
    """``True`` if ``stream`` can be handed to the child process directly."""
    if stream is None or isinstance(stream, int):
        return True
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


def _write_output(data: bytes, writer: IO) -> None:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        writer.write(data)
    else:
        writer.write(data.decode(locale.getpreferredencoding(False), errors='replace'))


class Robocopy:
    """One robocopy invocation.

    Args:
        source: Source directory.
        destination: Destination directory.
        pattern: File name pattern; robocopy itself defaults to ``*.*``.
        executable: Name or path of the robocopy binary, resolved on ``PATH``.
    """

    def __init__(self, source: str, destination: str, pattern: str = '*.*', executable: str = DEFAULT_EXECUTABLE):
        self.source = str(source)
        self.destination = str(destination)
        self.pattern = pattern
        self.executable = executable
        self.copy_options: Optional[CopyOptions] = None
        self.throttling_options: Optional[ThrottlingOptions] = None
        self.file_selection_options: Optional[FileSelectionOptions] = None
        self.retry_options: Optional[RetryOptions] = None
        self.logging_options: Optional[LoggingOptions] = None
        self.job_options: Optional[JobOptions] = None
        self.returncode: Optional[int] = None

    def set_copy_options(self, opts: Optional[CopyOptions]) -> None:
        self.copy_options = opts

    def set_throttling_options(self, opts: Optional[ThrottlingOptions]) -> None:
        self.throttling_options = opts

    def set_file_selection_options(self, opts: Optional[FileSelectionOptions]) -> None:
        self.file_selection_options = opts

    def set_retry_options(self, opts: Optional[RetryOptions]) -> None:
        self.retry_options = opts

    def set_logging_options(self, opts: Optional[LoggingOptions]) -> None:
        self.logging_options = opts

    def set_job_options(self, opts: Optional[JobOptions]) -> None:
        self.job_options = opts

    def option_groups(self) -> list:
        """Attached option groups in emission order."""
        groups = [
            self.copy_options,
            self.throttling_options,
            self.file_selection_options,
            self.retry_options,
            self.logging_options,
            self.job_options,
        ]
        return [group for group in groups if group is not None]

    def args(self) -> List[str]:
        """Render the argument vector, without the executable name."""
        args = [self.source, self.destination, self.pattern]
        for group in self.option_groups():
            args.extend(option_args(group))
        return args

    def command(self) -> List[str]:
        return [self.executable, *self.args()]

    def run(self, stdin: Stream = None, stdout: Stream = None, stderr: Stream = None, check: bool = False) -> int:
        """Run robocopy to completion and record its exit code.

        Unset streams are bound to the null device.  Streams backed by a
        file descriptor are handed to the child as-is.  Any other reader is
        read fully and fed to the child, and any other writer receives the
        captured output once the child exits.  With ``check`` the attached
        options are validated before anything is spawned.

        Returns:
            The process exit code.

        Raises:
            RobocopyNotFoundError: If the executable cannot be found.
            OptionError: If ``check`` is set and validation fails.
        """
        if check:
            validate_options(self)
        devnull = subprocess.DEVNULL
        kwargs = {}
        if _has_fileno(stdin):
            kwargs['stdin'] = devnull if stdin is None else stdin
        else:
            data = stdin.read()
            if isinstance(data, str):
                data = data.encode(locale.getpreferredencoding(False))
            kwargs['input'] = data
        pipe_stdout = not _has_fileno(stdout)
        pipe_stderr = not _has_fileno(stderr)
        kwargs['stdout'] = subprocess.PIPE if pipe_stdout else (devnull if stdout is None else stdout)
        kwargs['stderr'] = subprocess.PIPE if pipe_stderr else (devnull if stderr is None else stderr)
        try:
            result = subprocess.run(self.command(), **kwargs)
        except FileNotFoundError as exc:
            raise RobocopyNotFoundError(self.executable) from exc
        if pipe_stdout and result.stdout:
            _write_output(result.stdout, stdout)
        if pipe_stderr and result.stderr:
            _write_output(result.stderr, stderr)
        self.returncode = result.returncode
        return result.returncode

    @property
    def exit_code(self) -> Optional[Union[ExitCode, int]]:
        """The last exit code, as an :class:`ExitCode` when it is a known one."""
        if self.returncode is None:
            return None
        try:
            return ExitCode(self.returncode)
        except ValueError:
            return self.returncode

    @property
    def exit_description(self) -> Optional[str]:
        if self.returncode is None:
            return None
        return describe_exit_code(self.returncode)

    def __repr__(self) -> str:
        return f'Robocopy({self.source!r}, {self.destination!r}, {self.pattern!r})'
