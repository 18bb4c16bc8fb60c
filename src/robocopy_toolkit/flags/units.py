"""Sizes with an optional k/m/g suffix, as accepted by ``/iorate`` and friends."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional


class SizeUnit(enum.IntEnum):
    """A single unit of size.  Combinations of units are not valid."""

    KILOBYTES = 1
    MEGABYTES = 2
    GIGABYTES = 4

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def from_suffix(cls, suffix: str) -> 'SizeUnit':
        for unit, letter in _SUFFIXES.items():
            if letter == suffix.lower():
                return unit
        raise ValueError(f'Unknown size suffix: {suffix!r}')


_SUFFIXES = {
    SizeUnit.KILOBYTES: 'k',
    SizeUnit.MEGABYTES: 'm',
    SizeUnit.GIGABYTES: 'g',
}

_SIZE_RE = re.compile(r'^\s*(\d+)\s*([kmgKMG]?)\s*$')


@dataclass(frozen=True)
class SizedQuantity:
    """A magnitude with an optional unit.  No unit means plain bytes."""

    magnitude: int = 0
    unit: Optional[SizeUnit] = None

    def is_unset(self) -> bool:
        return self.magnitude == 0 and self.unit is None

    def __str__(self) -> str:
        suffix = self.unit.suffix if self.unit is not None else ''
        return f'{self.magnitude}{suffix}'

    @classmethod
    def parse(cls, text: str) -> 'SizedQuantity':
        """Parse ``'512'``, ``'64k'``, ``'10M'`` and the like."""
        match = _SIZE_RE.match(text)
        if not match:
            raise ValueError(f'Invalid size: {text!r}')
        magnitude, suffix = match.groups()
        unit = SizeUnit.from_suffix(suffix) if suffix else None
        return cls(int(magnitude), unit)
