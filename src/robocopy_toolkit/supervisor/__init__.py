from .manager import JobSupervisor, run_job

__all__ = ['JobSupervisor', 'run_job']
