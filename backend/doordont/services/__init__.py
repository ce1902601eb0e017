"""
Business logic services
"""
from . import goals
from . import users
from . import storage
from . import scheduler
from . import notifications
from . import external

__all__ = [
    'goals',
    'users',
    'storage',
    'scheduler',
    'notifications',
    'external'
]
