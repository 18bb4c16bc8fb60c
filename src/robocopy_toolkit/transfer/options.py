"""Option groups for the robocopy command line.

Each group is a dataclass whose fields map one-to-one onto robocopy
switches.  Field order is emission order.  A field contributes nothing
while it holds its default value, so an empty group renders no arguments.

The switch of every field lives in the field metadata and is rendered by
:func:`option_args`:

* ``bool`` renders ``/switch``
* ``int``, ``str``, flag groups and sizes render ``/switch:value``
* lists render ``/switch`` followed by one token per item
"""

from __future__ import annotations

import enum
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, List, Mapping, Type, TypeVar

from ..flags.attributes import AttributeFlags
from ..flags.content import CopyFlags, DirCopyFlags
from ..flags.units import SizedQuantity

G = TypeVar('G')


def switch(name: str, default: Any = False) -> Any:
    """Declare a dataclass field bound to the robocopy switch ``name``."""
    if isinstance(default, list):
        return field(default_factory=list, metadata={'switch': name})
    return field(default=default, metadata={'switch': name})


@dataclass
class CopyOptions:
    subdirectories: bool = switch('/s')
    empty_subdirectories: bool = switch('/e')
    levels: int = switch('/lev', 0)
    restartable: bool = switch('/z')
    backup: bool = switch('/b')
    restartable_backup: bool = switch('/zb')
    unbuffered: bool = switch('/j')
    efs_raw: bool = switch('/efsraw')
    copy: CopyFlags = switch('/copy', CopyFlags(0))
    dir_copy: DirCopyFlags = switch('/dcopy', DirCopyFlags(0))
    security: bool = switch('/sec')
    copy_all: bool = switch('/copyall')
    no_copy: bool = switch('/nocopy')
    fix_security: bool = switch('/secfix')
    fix_times: bool = switch('/timfix')
    purge: bool = switch('/purge')
    mirror: bool = switch('/mir')
    move_files: bool = switch('/mov')
    move: bool = switch('/move')
    add_attributes: AttributeFlags = switch('/a+', AttributeFlags(0))
    remove_attributes: AttributeFlags = switch('/a-', AttributeFlags(0))
    create: bool = switch('/create')
    fat: bool = switch('/fat')
    no_long_paths: bool = switch('/256')
    monitor_changes: int = switch('/mon', 0)
    monitor_minutes: int = switch('/mot', 0)
    run_hours: str = switch('/rh', '')
    per_file_run_hours: bool = switch('/pf')
    inter_packet_gap: int = switch('/ipg', 0)
    copy_junctions: bool = switch('/sj')
    copy_symlinks: bool = switch('/sl')
    threads: int = switch('/mt', 0)
    no_dir_copy: bool = switch('/nodcopy')
    no_offload: bool = switch('/nooffload')
    compress: bool = switch('/compress')
    sparse: bool = switch('/sparse')


@dataclass
class ThrottlingOptions:
    """I/O throttling.  Robocopy never throttles below 524288 bytes."""

    io_max_size: SizedQuantity = switch('/iomaxsize', SizedQuantity())
    io_rate: SizedQuantity = switch('/iorate', SizedQuantity())
    threshold: SizedQuantity = switch('/threshold', SizedQuantity())


@dataclass
class FileSelectionOptions:
    archive_only: bool = switch('/a')
    archive_reset: bool = switch('/m')
    include_attributes: AttributeFlags = switch('/ia', AttributeFlags(0))
    exclude_attributes: AttributeFlags = switch('/xa', AttributeFlags(0))
    exclude_files: List[str] = switch('/xf', [])
    exclude_dirs: List[str] = switch('/xd', [])
    exclude_changed: bool = switch('/xc')
    exclude_newer: bool = switch('/xn')
    exclude_older: bool = switch('/xo')
    exclude_extra: bool = switch('/xx')
    exclude_lonely: bool = switch('/xl')
    include_modified: bool = switch('/im')
    include_same: bool = switch('/is')
    include_tweaked: bool = switch('/it')
    max_size: int = switch('/max', 0)
    min_size: int = switch('/min', 0)
    max_age: int = switch('/maxage', 0)
    min_age: int = switch('/minage', 0)
    max_last_access: int = switch('/maxlad', 0)
    min_last_access: int = switch('/minlad', 0)
    exclude_junctions: bool = switch('/xj')
    fat_file_times: bool = switch('/fft')
    compensate_dst: bool = switch('/dst')
    exclude_dir_junctions: bool = switch('/xjd')
    exclude_file_junctions: bool = switch('/xjf')


@dataclass
class RetryOptions:
    retries: int = switch('/r', 0)
    wait: int = switch('/w', 0)
    save_to_registry: bool = switch('/reg')
    wait_for_share_names: bool = switch('/tbd')
    low_free_space: bool = switch('/lfsm')
    low_free_space_floor: SizedQuantity = switch('/lfsm', SizedQuantity())


@dataclass
class LoggingOptions:
    list_only: bool = switch('/l')
    report_extra: bool = switch('/x')
    verbose: bool = switch('/v')
    timestamps: bool = switch('/ts')
    full_paths: bool = switch('/fp')
    bytes: bool = switch('/bytes')
    no_sizes: bool = switch('/ns')
    no_classes: bool = switch('/nc')
    no_file_list: bool = switch('/nfl')
    no_dir_list: bool = switch('/ndl')
    no_progress: bool = switch('/np')
    eta: bool = switch('/eta')
    log: str = switch('/log', '')
    log_append: str = switch('/log+', '')
    unicode_log: str = switch('/unilog', '')
    unicode_log_append: str = switch('/unilog+', '')
    tee: bool = switch('/tee')
    no_job_header: bool = switch('/njh')
    no_job_summary: bool = switch('/njs')
    unicode: bool = switch('/unicode')


@dataclass
class JobOptions:
    """Job file handling.  ``/save`` goes last so every other switch is saved."""

    job: str = switch('/job', '')
    quit: bool = switch('/quit')
    no_source_dir: bool = switch('/nosd')
    no_dest_dir: bool = switch('/nodd')
    include_files: bool = switch('/if')
    save: str = switch('/save', '')


def _render(name: str, value: Any) -> List[str]:
    # IntFlag and bool are both int subclasses; test them first.
    if isinstance(value, enum.IntFlag):
        return [f'{name}:{str(value)}'] if value else []
    if isinstance(value, bool):
        return [name] if value else []
    if isinstance(value, int):
        return [f'{name}:{value}'] if value != 0 else []
    if isinstance(value, SizedQuantity):
        return [] if value.is_unset() else [f'{name}:{value}']
    if isinstance(value, str):
        return [f'{name}:{value}'] if value else []
    if isinstance(value, (list, tuple)):
        return [name, *[str(item) for item in value]] if value else []
    raise TypeError(f'Cannot render {type(value).__name__} for {name}')


def option_args(group: Any) -> List[str]:
    """Render an option group into robocopy argument tokens."""
    args: List[str] = []
    for f in fields(group):
        args.extend(_render(f.metadata['switch'], getattr(group, f.name)))
    return args


def _field_default(f: Any) -> Any:
    if f.default is not MISSING:
        return f.default
    return f.default_factory()


def _coerce(name: str, default: Any, value: Any) -> Any:
    if isinstance(default, enum.IntFlag):
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError(f'Option {name!r} expects flag letters, got {value!r}')
        kind = type(default)
        return kind.parse(value) if isinstance(value, str) else kind(value)
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f'Option {name!r} expects true or false, got {value!r}')
        return value
    if isinstance(default, int):
        if isinstance(value, bool):
            raise ValueError(f'Option {name!r} expects a number, got {value!r}')
        return int(value)
    if isinstance(default, SizedQuantity):
        return SizedQuantity.parse(str(value))
    if isinstance(default, list):
        return [value] if isinstance(value, str) else [str(item) for item in value]
    if not isinstance(value, (str, int, float)):
        raise ValueError(f'Option {name!r} expects text, got {value!r}')
    return str(value)


def from_mapping(cls: Type[G], data: Mapping[str, Any]) -> G:
    """Build an option group from plain data, e.g. a YAML mapping.

    Flag groups accept letter strings (``'DAT'``) and sizes accept strings
    such as ``'10m'``.  A key with no value (``log:`` in YAML) keeps the
    field default.

    Raises:
        ValueError: For unknown keys or values of the wrong shape.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f'{cls.__name__} expects a mapping of options, got {data!r}')
    known = {f.name: f for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        if key not in known:
            raise ValueError(f'Unknown {cls.__name__} option: {key!r}')
        if value is None:
            continue
        try:
            kwargs[key] = _coerce(key, _field_default(known[key]), value)
        except TypeError as exc:
            raise ValueError(f'Option {key!r} has an invalid value {value!r}') from exc
    return cls(**kwargs)
