"""
Notifications Service - Message formatting and delivery
Centralizes the failure message template and sending logic
"""
import logging
from typing import Callable, Optional

from doordont.core.constants import GOAL_UPDATE_EMAIL_SUBJECT
from doordont.models.goal import GoalEvaluation

logger = logging.getLogger(__name__)

SendCallback = Callable[[str, str, str], bool]


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

def format_goal_failure(evaluation: GoalEvaluation) -> str:
    """
    Format the message sent when a goal was not met

    Args:
        evaluation: The failed goal evaluation

    Returns:
        Formatted failure message
    """
    if evaluation.initiate:
        return (
            f'You promised to "{evaluation.description}" at least {evaluation.frequency} times, '
            f'but you only did it {evaluation.counter} times!'
        )
    return (
        f'You promised to "{evaluation.description}" less than {evaluation.frequency} times, '
        f'but you did it {evaluation.counter} times!'
    )


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

class NotificationService:
    """
    Best-effort delivery of goal notifications

    Failures are logged and reported as False; nothing is retried and no
    exception escapes to the caller.
    """

    def __init__(self, send_callback: Optional[SendCallback] = None):
        """
        Initialize notification service

        Args:
            send_callback: Transport with signature callback(target, subject, body) -> bool
        """
        self.send_callback = send_callback

    def send(self, target: str, subject: str, body: str) -> bool:
        """
        Send a message to a target

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.warning("No send callback configured - notification not sent")
            logger.info(f"Would have sent to {target}: {body}")
            return False

        try:
            result = self.send_callback(target, subject, body)
            if result:
                logger.info(f"Notification sent to {target}")
            else:
                logger.warning(f"Notification to {target} was not delivered")
            return bool(result)
        except Exception as e:
            logger.error(f"Failed to send notification to {target}: {e}")
            return False

    def send_goal_failure(self, target: str, evaluation: GoalEvaluation) -> bool:
        """Send the failure message for an evaluation"""
        message = format_goal_failure(evaluation)
        return self.send(target, GOAL_UPDATE_EMAIL_SUBJECT, message)
