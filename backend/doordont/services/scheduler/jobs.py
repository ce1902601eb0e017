"""
Scheduler Job Definitions
The per-goal evaluation fired on the weekly cadence
"""
import logging
from typing import Callable, Optional

from doordont.core.exceptions import GoalNotFoundError, StorageError
from doordont.models.goal import GoalEvaluation
from doordont.services.goals.evaluator import evaluate_goal
from doordont.services.goals.locks import GoalLocks
from doordont.services.notifications.service import NotificationService
from doordont.services.storage.base import GoalStore

logger = logging.getLogger(__name__)


def evaluate_goal_job(
    goal_id: int,
    target: str,
    store: GoalStore,
    notifications: NotificationService,
    locks: GoalLocks,
    reset_counter: bool = False,
    on_missing: Optional[Callable[[int], object]] = None
) -> Optional[GoalEvaluation]:
    """
    Evaluate one goal and notify its owner if it was failed

    The read (and optional reset) happens under the goal lock so user
    increments cannot interleave with it. Delivery happens after the lock
    is released.

    Args:
        goal_id: Goal to evaluate
        target: Notification address of the goal owner
        store: Goal store
        notifications: Notification service used for failures
        locks: Per-goal lock registry shared with user-driven mutations
        reset_counter: Read and zero the counter in one store operation
        on_missing: Called with goal_id when the goal no longer exists

    Returns:
        The evaluation, or None if this fire was aborted
    """
    try:
        with locks.hold(goal_id):
            if reset_counter:
                goal = store.take_counter(goal_id)
            else:
                goal = store.get_goal(goal_id)
            evaluation = evaluate_goal(goal)
    except GoalNotFoundError:
        logger.warning(f"[SCHEDULER] Goal {goal_id} no longer exists, cancelling its evaluation")
        if on_missing is not None:
            on_missing(goal_id)
        return None
    except StorageError as e:
        logger.error(f"[SCHEDULER] Skipping evaluation of goal {goal_id}: {e}")
        return None

    if evaluation.met_goal:
        logger.info(f"[SCHEDULER] Goal {goal_id} met ({evaluation.counter}/{evaluation.frequency})")
        return evaluation

    logger.info(f"[SCHEDULER] Goal {goal_id} failed ({evaluation.counter}/{evaluation.frequency}), notifying {target}")
    if not notifications.send_goal_failure(target, evaluation):
        logger.warning(f"[SCHEDULER] Failure notification for goal {goal_id} was not delivered")

    return evaluation
