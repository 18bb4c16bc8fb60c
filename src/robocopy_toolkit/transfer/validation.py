"""Opt-in checks for option values robocopy is known to reject.

Rendering never validates; these checks run only when asked for, e.g.
through ``Robocopy.run(check=True)``.
"""

from __future__ import annotations

import re
from dataclasses import fields
from typing import TYPE_CHECKING, Any, List

from ..errors import OptionError
from ..flags.attributes import AttributeFlags
from ..flags.bits import has
from ..flags.units import SizedQuantity
from .options import CopyOptions

if TYPE_CHECKING:
    from .command import Robocopy

MIN_THREADS = 1
MAX_THREADS = 128

_RUN_HOURS_RE = re.compile(r'^([01]\d|2[0-3])[0-5]\d-([01]\d|2[0-3])[0-5]\d$')


def _negative_counts(group: Any) -> List[str]:
    problems = []
    for f in fields(group):
        value = getattr(group, f.name)
        if isinstance(value, SizedQuantity):
            value = value.magnitude
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            problems.append(f"{f.metadata['switch']} must not be negative (got {value})")
    return problems


def _copy_problems(opts: CopyOptions) -> List[str]:
    problems = []
    if opts.threads and not MIN_THREADS <= opts.threads <= MAX_THREADS:
        problems.append(f'/mt must be between {MIN_THREADS} and {MAX_THREADS} (got {opts.threads})')
    if opts.threads and opts.inter_packet_gap:
        problems.append('/mt cannot be combined with /ipg')
    if opts.threads and opts.efs_raw:
        problems.append('/mt cannot be combined with /efsraw')
    if opts.run_hours and not _RUN_HOURS_RE.match(opts.run_hours):
        problems.append(f'/rh expects hhmm-hhmm (got {opts.run_hours!r})')
    if has(opts.add_attributes, AttributeFlags.OFFLINE):
        problems.append('/a+ does not accept the O (offline) attribute')
    return problems


def validate_options(command: 'Robocopy') -> None:
    """Raise :class:`OptionError` listing every problem found in ``command``."""
    problems: List[str] = []
    for group in command.option_groups():
        problems.extend(_negative_counts(group))
    if command.copy_options is not None:
        problems.extend(_copy_problems(command.copy_options))
    if problems:
        raise OptionError('; '.join(problems))
