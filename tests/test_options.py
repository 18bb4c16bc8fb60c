from __future__ import annotations

from dataclasses import fields

import pytest

from robocopy_toolkit.flags import AttributeFlags, CopyFlags, DirCopyFlags, SizedQuantity, SizeUnit
from robocopy_toolkit.transfer.options import (
    CopyOptions,
    FileSelectionOptions,
    JobOptions,
    LoggingOptions,
    RetryOptions,
    ThrottlingOptions,
    from_mapping,
    option_args,
)

GROUPS = [CopyOptions, ThrottlingOptions, FileSelectionOptions, RetryOptions, LoggingOptions, JobOptions]


def _non_default(value):
    if isinstance(value, bool):
        return True
    if isinstance(value, AttributeFlags):
        return AttributeFlags.HIDDEN
    if isinstance(value, CopyFlags):
        return CopyFlags.DEFAULT
    if isinstance(value, DirCopyFlags):
        return DirCopyFlags.DEFAULT
    if isinstance(value, int):
        return 7
    if isinstance(value, SizedQuantity):
        return SizedQuantity(2, SizeUnit.MEGABYTES)
    if isinstance(value, str):
        return 'value'
    if isinstance(value, list):
        return ['a', 'b']
    raise AssertionError(type(value))


@pytest.mark.parametrize('group_cls', GROUPS)
def test_default_group_renders_nothing(group_cls) -> None:
    assert option_args(group_cls()) == []


@pytest.mark.parametrize('group_cls', GROUPS)
def test_single_field_renders_only_its_switch(group_cls) -> None:
    for f in fields(group_cls):
        group = group_cls(**{f.name: _non_default(getattr(group_cls(), f.name))})
        args = option_args(group)
        switch = f.metadata['switch']
        assert args, f.name
        if args[0] == switch and len(args) > 1:
            assert args == [switch, 'a', 'b']
        else:
            assert len(args) == 1
            assert args[0] == switch or args[0].startswith(switch + ':')


def test_copy_options_values() -> None:
    opts = CopyOptions(
        levels=2,
        copy=CopyFlags.DATA | CopyFlags.OWNER,
        dir_copy=DirCopyFlags.DEFAULT,
        add_attributes=AttributeFlags.READ_ONLY | AttributeFlags.ARCHIVE,
        remove_attributes=AttributeFlags.OFFLINE,
        run_hours='2200-0600',
        no_long_paths=True,
        threads=16,
    )
    assert option_args(opts) == [
        '/lev:2', '/copy:DO', '/dcopy:DA', '/a+:RA', '/a-:O', '/256', '/rh:2200-0600', '/mt:16',
    ]


def test_throttling_sizes() -> None:
    opts = ThrottlingOptions(
        io_max_size=SizedQuantity(1, SizeUnit.MEGABYTES),
        io_rate=SizedQuantity(),
        threshold=SizedQuantity(524288),
    )
    assert option_args(opts) == ['/iomaxsize:1m', '/threshold:524288']


def test_zero_sized_quantity_is_never_emitted() -> None:
    assert option_args(ThrottlingOptions(SizedQuantity(), SizedQuantity(), SizedQuantity())) == []
    assert option_args(RetryOptions(low_free_space_floor=SizedQuantity(0, None))) == []


def test_retry_low_free_space() -> None:
    opts = RetryOptions(retries=3, wait=10, low_free_space=True, low_free_space_floor=SizedQuantity(500, SizeUnit.MEGABYTES))
    assert option_args(opts) == ['/r:3', '/w:10', '/lfsm', '/lfsm:500m']


def test_exclusion_lists_keep_order() -> None:
    opts = FileSelectionOptions(
        include_attributes=AttributeFlags.ARCHIVE,
        exclude_files=['*.tmp', '*.bak', 'thumbs.db'],
        exclude_dirs=['.git', 'node_modules'],
        max_size=1000,
    )
    assert option_args(opts) == [
        '/ia:A', '/xf', '*.tmp', '*.bak', 'thumbs.db', '/xd', '.git', 'node_modules', '/max:1000',
    ]


def test_logging_paths() -> None:
    opts = LoggingOptions(log='C:\\logs\\run.log', unicode_log_append='C:\\logs\\u.log', tee=True)
    assert option_args(opts) == ['/log:C:\\logs\\run.log', '/unilog+:C:\\logs\\u.log', '/tee']


def test_job_options_save_last() -> None:
    opts = JobOptions(save='nightly', job='base', quit=True, include_files=True)
    assert option_args(opts) == ['/job:base', '/quit', '/if', '/save:nightly']


def test_from_mapping_coerces_values() -> None:
    opts = from_mapping(CopyOptions, {'copy': 'DATSOU', 'add_attributes': 'RH', 'threads': '8', 'mirror': True})
    assert opts.copy == CopyFlags.DATA | CopyFlags.ATTRIBUTES | CopyFlags.TIMESTAMPS | CopyFlags.ACL | CopyFlags.OWNER | CopyFlags.AUDITING
    assert opts.add_attributes == AttributeFlags.READ_ONLY | AttributeFlags.HIDDEN
    assert opts.threads == 8
    assert opts.mirror is True

    throttle = from_mapping(ThrottlingOptions, {'io_rate': '10m', 'threshold': 4096})
    assert throttle.io_rate == SizedQuantity(10, SizeUnit.MEGABYTES)
    assert throttle.threshold == SizedQuantity(4096)

    selection = from_mapping(FileSelectionOptions, {'exclude_files': '*.tmp'})
    assert selection.exclude_files == ['*.tmp']


def test_from_mapping_rejects_bad_input() -> None:
    with pytest.raises(ValueError, match='Unknown CopyOptions option'):
        from_mapping(CopyOptions, {'turbo': True})
    with pytest.raises(ValueError):
        from_mapping(CopyOptions, {'mirror': 'yes'})
    with pytest.raises(ValueError):
        from_mapping(CopyOptions, {'copy': 'DQ'})


def test_from_mapping_empty_values_keep_defaults() -> None:
    logging = from_mapping(LoggingOptions, {'log': None, 'verbose': None})
    assert logging == LoggingOptions()
    assert option_args(logging) == []

    job = from_mapping(JobOptions, {'job': None, 'save': None, 'quit': True})
    assert option_args(job) == ['/quit']

    copy = from_mapping(CopyOptions, {'threads': None, 'copy': None, 'add_attributes': None})
    assert option_args(copy) == []

    selection = from_mapping(FileSelectionOptions, {'exclude_files': None})
    assert selection.exclude_files == []


def test_from_mapping_requires_a_mapping() -> None:
    with pytest.raises(ValueError, match='expects a mapping'):
        from_mapping(CopyOptions, True)
    with pytest.raises(ValueError, match='expects a mapping'):
        from_mapping(FileSelectionOptions, ['*.tmp'])


def test_from_mapping_wrong_types_are_value_errors() -> None:
    with pytest.raises(ValueError, match="'copy'"):
        from_mapping(CopyOptions, {'copy': ['D', 'A']})
    with pytest.raises(ValueError, match="'exclude_dirs'"):
        from_mapping(FileSelectionOptions, {'exclude_dirs': 5})
    with pytest.raises(ValueError, match="'log'"):
        from_mapping(LoggingOptions, {'log': {'path': 'x'}})


def test_from_mapping_rejects_booleans_for_numbers_and_flags() -> None:
    with pytest.raises(ValueError, match="'threads' expects a number"):
        from_mapping(CopyOptions, {'threads': True})
    with pytest.raises(ValueError, match="'copy' expects flag letters"):
        from_mapping(CopyOptions, {'copy': True})
