"""Command-line interface for Robocopy Toolkit.

Jobs come from a YAML configuration file.  ``args`` shows the command
line robocopy would receive, ``run`` executes the jobs and ``exit-codes``
explains robocopy's exit statuses.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import click
import yaml
from rich.console import Console
from rich.table import Table

from ..config_loader import build_jobs, job_names, load_config
from ..logging.logger import CSVRunLogger, JSONRunLogger, RunRecord, format_command
from ..supervisor.manager import JobSupervisor
from ..transfer.exit_codes import DESCRIPTIONS, is_failure


console = Console()

CONFIG_OPTION = click.option(
    '--config', 'config_path', type=click.Path(exists=True), default='config/config.yml', help='Path to configuration file.'
)


def _load_jobs(config_path: str, selected: tuple):
    try:
        cfg = load_config(Path(config_path))
        jobs = build_jobs(cfg)
    except (KeyError, ValueError, yaml.YAMLError) as exc:
        raise click.ClickException(str(exc)) from exc
    names = job_names(cfg)
    if selected:
        missing = set(selected) - set(names)
        if missing:
            raise click.ClickException(f'Unknown job(s): {", ".join(sorted(missing))}')
        pairs = [(n, j) for n, j in zip(names, jobs) if n in selected]
        names = [n for n, _ in pairs]
        jobs = [j for _, j in pairs]
    return cfg, names, jobs


@click.group()
def cli() -> None:
    """Robocopy Toolkit CLI."""
    pass


@cli.command()
@CONFIG_OPTION
@click.argument('names', nargs=-1)
def args(config_path: str, names: tuple) -> None:
    """Print the robocopy command line of each configured job."""
    _, job_labels, jobs = _load_jobs(config_path, names)
    for name, job in zip(job_labels, jobs):
        console.print(f'[bold]{name}[/bold]')
        click.echo(format_command(job.command()))


@cli.command()
@CONFIG_OPTION
@click.argument('names', nargs=-1)
@click.option('--workers', type=click.IntRange(min=1), default=None, help='Jobs to run at once (default from config, else 1).')
@click.option('--check/--no-check', default=False, help='Validate options before running.')
@click.option('--csv-log', type=click.Path(dir_okay=False), default=None, help='Write a CSV run log.')
@click.option('--json-log', type=click.Path(dir_okay=False), default=None, help='Write a JSON run log.')
def run(config_path: str, names: tuple, workers: Optional[int], check: bool, csv_log: Optional[str], json_log: Optional[str]) -> None:
    """Run configured jobs and report their exit codes."""
    cfg, job_labels, jobs = _load_jobs(config_path, names)
    csv_logger = CSVRunLogger(Path(csv_log)) if csv_log else None
    json_logger = JSONRunLogger(Path(json_log)) if json_log else None

    def on_record(record: RunRecord) -> None:
        if csv_logger is not None:
            csv_logger.log_record(record)
        if json_logger is not None:
            json_logger.log_record(record)

    supervisor = JobSupervisor(max_workers=workers or cfg.get('workers', 1), check=check, on_record=on_record)
    try:
        records = supervisor.run_jobs(jobs, job_labels)
    except OSError as exc:
        raise click.ClickException(f'Could not write run log: {exc}') from exc
    finally:
        if csv_logger is not None:
            csv_logger.close()
        if json_logger is not None:
            json_logger.close()

    console.print(_records_table(records))
    if any(r.exit_code is None or is_failure(r.exit_code) for r in records):
        sys.exit(1)


def _records_table(records: List[RunRecord]) -> Table:
    table = Table(title='Robocopy runs')
    table.add_column('Job')
    table.add_column('Exit', justify='right')
    table.add_column('Duration (ms)', justify='right')
    table.add_column('Result')
    for r in records:
        exit_text = '' if r.exit_code is None else str(r.exit_code)
        result = r.error_msg or r.description
        style = 'red' if r.exit_code is None or is_failure(r.exit_code) else None
        table.add_row(r.job, exit_text, str(r.duration_ms), result, style=style)
    return table


@cli.command('exit-codes')
def exit_codes() -> None:
    """Print robocopy's exit codes and their meaning."""
    table = Table(title='Robocopy exit codes')
    table.add_column('Code', justify='right')
    table.add_column('Name', no_wrap=True)
    table.add_column('Meaning')
    for code, text in DESCRIPTIONS.items():
        table.add_row(str(int(code)), code.name, text)
    console.print(table)


@cli.command()
@CONFIG_OPTION
def show_config(config_path: str) -> None:
    """Print the current configuration."""
    cfg = load_config(Path(config_path))
    console.print_json(json.dumps(cfg, indent=2))


if __name__ == '__main__':  # pragma: no cover
    cli()
