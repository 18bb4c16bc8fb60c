"""Bit-flag helpers shared by the flag groups.

Flag groups are ``enum.IntFlag`` types.  Integers are immutable, so the
mutating helpers return the updated value instead of changing it in place.
"""

from __future__ import annotations

import enum
from typing import Iterable, Tuple, Type, TypeVar

F = TypeVar('F', bound=enum.IntFlag)

LetterTable = Iterable[Tuple[enum.IntFlag, str]]


def has(flags: F, mask: F) -> bool:
    """Return ``True`` if any bit of ``mask`` is set in ``flags``."""
    return (flags & mask) != 0


def set_flag(flags: F, mask: F) -> F:
    return flags | mask


def clear_flag(flags: F, mask: F) -> F:
    return flags & ~mask


def toggle_flag(flags: F, mask: F) -> F:
    return flags ^ mask


def render_letters(flags: enum.IntFlag, table: LetterTable) -> str:
    """Concatenate the letter of every member of ``table`` set in ``flags``.

    Letters are emitted in table order, never in bit order.
    """
    return ''.join(letter for member, letter in table if has(flags, member))


def parse_letters(cls: Type[F], text: str, table: LetterTable) -> F:
    """Build a ``cls`` value from a string of letters such as ``'DAT'``.

    Letters are case-insensitive and may repeat.

    Raises:
        ValueError: If ``text`` contains a letter unknown to ``table``.
    """
    lookup = {letter: member for member, letter in table}
    value = cls(0)
    for char in text.upper():
        if char not in lookup:
            raise ValueError(f'Unknown {cls.__name__} letter: {char!r}')
        value = set_flag(value, lookup[char])
    return value
