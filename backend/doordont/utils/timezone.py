"""
Timezone Utilities - Centralized timezone handling
"""
from typing import Optional
import pytz

from doordont.core.config import settings


def get_scheduler_tz(name: Optional[str] = None):
    """
    Get the timezone evaluation schedules are expressed in

    Args:
        name: Optional IANA zone name, defaults to SCHEDULER_TIMEZONE

    Returns:
        pytz timezone
    """
    return pytz.timezone(name or settings.SCHEDULER_TIMEZONE)
