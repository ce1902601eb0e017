"""
In-memory Goal Store - used for local development and tests
"""
import threading
from itertools import count
from typing import Dict, List

from doordont.core.exceptions import (
    GoalNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError
)
from doordont.models.goal import Goal, Punishment
from doordont.models.user import User
from .base import GoalStore


class InMemoryGoalStore(GoalStore):
    """
    Thread-safe dictionary backed store

    Every read returns a copy so callers never mutate stored records.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._goals: Dict[int, Goal] = {}
        self._users: Dict[int, User] = {}
        self._goal_ids = count(1)
        self._user_ids = count(1)

    def _require_goal(self, goal_id: int) -> Goal:
        goal = self._goals.get(goal_id)
        if goal is None:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return goal

    def _require_user(self, username: str) -> User:
        for user in self._users.values():
            if user.username == username:
                return user
        raise UserNotFoundError(f"User '{username}' not found")

    # Goals

    def get_goal(self, goal_id: int) -> Goal:
        with self._lock:
            return self._require_goal(goal_id).model_copy()

    def insert_goal(self, description: str, punishment: Punishment, initiate: bool,
                    frequency: int, username: str) -> int:
        with self._lock:
            owner = self._require_user(username)
            goal_id = next(self._goal_ids)
            self._goals[goal_id] = Goal(
                id=goal_id,
                description=description,
                punishment=punishment,
                initiate=initiate,
                frequency=frequency,
                counter=0,
                user_id=owner.id
            )
            return goal_id

    def increment_counter(self, goal_id: int) -> int:
        with self._lock:
            goal = self._require_goal(goal_id)
            goal.counter += 1
            return goal.counter

    def reset_counter(self, goal_id: int) -> None:
        with self._lock:
            self._require_goal(goal_id).counter = 0

    def take_counter(self, goal_id: int) -> Goal:
        with self._lock:
            goal = self._require_goal(goal_id)
            previous = goal.model_copy()
            goal.counter = 0
            return previous

    def delete_goal(self, goal_id: int) -> None:
        with self._lock:
            self._require_goal(goal_id)
            del self._goals[goal_id]

    def list_goals_for_user(self, username: str) -> List[Goal]:
        with self._lock:
            owner = self._require_user(username)
            return [g.model_copy() for g in self._goals.values() if g.user_id == owner.id]

    def list_all_goals(self) -> List[Goal]:
        with self._lock:
            return [g.model_copy() for g in self._goals.values()]

    # Users

    def insert_user(self, username: str, password_hash: str, salt: str) -> int:
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise UserAlreadyExistsError(f"Username '{username}' is already taken")
            user_id = next(self._user_ids)
            self._users[user_id] = User(id=user_id, username=username,
                                        password=password_hash, salt=salt)
            return user_id

    def get_user(self, username: str) -> User:
        with self._lock:
            return self._require_user(username).model_copy()

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(f"User {user_id} not found")
            return user.model_copy()

    def set_twitter_handle(self, username: str, twitter: str) -> None:
        with self._lock:
            self._require_user(username).twitter = twitter
