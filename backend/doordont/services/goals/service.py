"""
Goals Service - Business logic for goal management
Handles creating, reading, counting, resetting and deleting goals
"""
from typing import Dict, Any, List
import logging

from doordont.core.exceptions import InvalidGoalDataError, SchedulerError
from doordont.models.goal import Goal, GoalCreateRequest, GoalEvaluation
from doordont.services.scheduler.service import EvaluationScheduler
from doordont.services.storage.base import GoalStore
from .evaluator import evaluate_goal
from .locks import GoalLocks

logger = logging.getLogger(__name__)


class GoalService:
    """
    Goal CRUD plus the counter lifecycle

    Counter mutations hold the goal's lock, the same lock the scheduled
    evaluation takes, so increments and resets are serialized per goal.
    """

    def __init__(self, store: GoalStore, scheduler: EvaluationScheduler, locks: GoalLocks):
        self.store = store
        self.scheduler = scheduler
        self.locks = locks

    def create_goal(self, request: GoalCreateRequest) -> Dict[str, Any]:
        """
        Create a goal with counter 0 and schedule its evaluation

        Args:
            request: Validated goal creation request

        Returns:
            Dict with status, message, and created goal data

        Raises:
            InvalidGoalDataError: If frequency is not positive
            UserNotFoundError: If the owner does not exist
            StorageError: If the store fails
            SchedulerError: If the evaluation job cannot be registered (the goal is removed again)
        """
        if request.frequency <= 0:
            raise InvalidGoalDataError(f"Frequency must be positive, got {request.frequency}")

        goal_id = self.store.insert_goal(
            description=request.description,
            punishment=request.punishment,
            initiate=request.initiate,
            frequency=request.frequency,
            username=request.username
        )
        try:
            self.scheduler.schedule_goal(goal_id, request.username)
        except SchedulerError:
            # A goal without an evaluation job is never checked, so it is not kept
            logger.error(f"Rolling back goal {goal_id}: its evaluation could not be scheduled")
            self.store.delete_goal(goal_id)
            raise
        goal = self.store.get_goal(goal_id)

        logger.info(f"Created goal {goal_id} for {request.username}")
        return {
            "status": "success",
            "message": f"Goal '{request.description}' created",
            "data": goal.model_dump(mode="json")
        }

    def get_goal(self, goal_id: int) -> Goal:
        return self.store.get_goal(goal_id)

    def list_goals(self, username: str) -> List[Goal]:
        """Get all goals owned by a user"""
        return self.store.list_goals_for_user(username)

    def increment_counter(self, goal_id: int) -> Dict[str, Any]:
        """
        Record one occurrence of a goal's activity

        Raises:
            GoalNotFoundError: If the goal does not exist
            StorageError: If the store fails
        """
        with self.locks.hold(goal_id):
            counter = self.store.increment_counter(goal_id)

        return {
            "status": "success",
            "message": f"Goal {goal_id} counter incremented",
            "data": {"id": goal_id, "counter": counter}
        }

    def reset_counter(self, goal_id: int) -> Dict[str, Any]:
        """
        Set a goal's counter back to 0

        Raises:
            GoalNotFoundError: If the goal does not exist
            StorageError: If the store fails
        """
        with self.locks.hold(goal_id):
            self.store.reset_counter(goal_id)

        return {
            "status": "success",
            "message": f"Goal {goal_id} counter reset",
            "data": {"id": goal_id, "counter": 0}
        }

    def evaluate(self, goal_id: int) -> GoalEvaluation:
        """Current verdict for a goal, without notifying or resetting"""
        with self.locks.hold(goal_id):
            goal = self.store.get_goal(goal_id)
        return evaluate_goal(goal)

    def delete_goal(self, goal_id: int) -> Dict[str, Any]:
        """
        Delete a goal and cancel its evaluation job

        Raises:
            GoalNotFoundError: If the goal does not exist
            StorageError: If the store fails
        """
        with self.locks.hold(goal_id):
            self.store.delete_goal(goal_id)
        self.scheduler.cancel_goal(goal_id)

        logger.info(f"Deleted goal {goal_id}")
        return {
            "status": "success",
            "message": f"Goal {goal_id} deleted",
            "data": {"id": goal_id}
        }
