"""
Scheduler module
Recurring goal evaluation jobs
"""
from .service import EvaluationScheduler, build_evaluation_trigger
from . import jobs

__all__ = ['EvaluationScheduler', 'build_evaluation_trigger', 'jobs']
