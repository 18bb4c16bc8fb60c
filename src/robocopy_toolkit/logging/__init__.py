from .logger import CSVRunLogger, JSONRunLogger, RunRecord, format_command

__all__ = ['CSVRunLogger', 'JSONRunLogger', 'RunRecord', 'format_command']
