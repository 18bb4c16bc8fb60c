"""File attribute flags used by ``/a+``, ``/a-``, ``/ia`` and ``/xa``."""

from __future__ import annotations

import enum

from .bits import parse_letters, render_letters


class AttributeFlags(enum.IntFlag):
    READ_ONLY = 1 << 0
    ARCHIVE = 1 << 1
    SYSTEM = 1 << 2
    HIDDEN = 1 << 3
    COMPRESSED = 1 << 4
    NOT_CONTENT_INDEXED = 1 << 5
    ENCRYPTED = 1 << 6
    TEMPORARY = 1 << 7
    # Offline is not accepted by /a+.
    OFFLINE = 1 << 8

    def __str__(self) -> str:
        return render_letters(self, ATTRIBUTE_LETTERS)

    @classmethod
    def parse(cls, text: str) -> 'AttributeFlags':
        return parse_letters(cls, text, ATTRIBUTE_LETTERS)


ATTRIBUTE_LETTERS = (
    (AttributeFlags.READ_ONLY, 'R'),
    (AttributeFlags.ARCHIVE, 'A'),
    (AttributeFlags.SYSTEM, 'S'),
    (AttributeFlags.HIDDEN, 'H'),
    (AttributeFlags.COMPRESSED, 'C'),
    (AttributeFlags.NOT_CONTENT_INDEXED, 'N'),
    (AttributeFlags.ENCRYPTED, 'E'),
    (AttributeFlags.TEMPORARY, 'T'),
    (AttributeFlags.OFFLINE, 'O'),
)
