"""
Goals module - Goal lifecycle and completion rule
"""
from . import evaluator
from . import locks
from . import service

from .evaluator import met_goal, evaluate_goal
from .locks import GoalLocks
from .service import GoalService

__all__ = [
    # Modules
    'evaluator',
    'locks',
    'service',

    'met_goal',
    'evaluate_goal',
    'GoalLocks',
    'GoalService'
]
