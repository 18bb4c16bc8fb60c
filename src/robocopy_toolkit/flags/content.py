"""File and directory property flags for ``/copy`` and ``/dcopy``."""

from __future__ import annotations

import enum

from .bits import parse_letters, render_letters


class CopyFlags(enum.IntFlag):
    """File properties copied by ``/copy``.  Robocopy's default is ``DAT``."""

    DATA = 1 << 0
    ATTRIBUTES = 1 << 1
    TIMESTAMPS = 1 << 2
    SKIP_ALT_STREAMS = 1 << 3
    ACL = 1 << 4
    OWNER = 1 << 5
    AUDITING = 1 << 6
    DEFAULT = DATA | ATTRIBUTES | TIMESTAMPS

    def __str__(self) -> str:
        return render_letters(self, COPY_LETTERS)

    @classmethod
    def parse(cls, text: str) -> 'CopyFlags':
        return parse_letters(cls, text, COPY_LETTERS)


class DirCopyFlags(enum.IntFlag):
    """Directory properties copied by ``/dcopy``.  Robocopy's default is ``DA``."""

    DATA = 1 << 0
    ATTRIBUTES = 1 << 1
    TIMESTAMPS = 1 << 2
    EXTENDED_ATTRIBUTES = 1 << 3
    SKIP_ALT_STREAMS = 1 << 4
    DEFAULT = DATA | ATTRIBUTES

    def __str__(self) -> str:
        return render_letters(self, DIR_COPY_LETTERS)

    @classmethod
    def parse(cls, text: str) -> 'DirCopyFlags':
        return parse_letters(cls, text, DIR_COPY_LETTERS)


COPY_LETTERS = (
    (CopyFlags.DATA, 'D'),
    (CopyFlags.ATTRIBUTES, 'A'),
    (CopyFlags.TIMESTAMPS, 'T'),
    (CopyFlags.SKIP_ALT_STREAMS, 'X'),
    (CopyFlags.ACL, 'S'),
    (CopyFlags.OWNER, 'O'),
    (CopyFlags.AUDITING, 'U'),
)

DIR_COPY_LETTERS = (
    (DirCopyFlags.DATA, 'D'),
    (DirCopyFlags.ATTRIBUTES, 'A'),
    (DirCopyFlags.TIMESTAMPS, 'T'),
    (DirCopyFlags.EXTENDED_ATTRIBUTES, 'E'),
    (DirCopyFlags.SKIP_ALT_STREAMS, 'X'),
)
