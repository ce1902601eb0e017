"""
Notifications module
Message formatting and delivery for failed goals
"""
from .service import (
    NotificationService,
    format_goal_failure
)

__all__ = [
    'NotificationService',
    'format_goal_failure'
]
