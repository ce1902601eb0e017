"""
Goal Store interface
Every backend raises GoalNotFoundError / UserNotFoundError for missing rows,
UserAlreadyExistsError for duplicate usernames and StorageError for anything else.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from doordont.models.goal import Goal, Punishment
from doordont.models.user import User


class GoalStore(ABC):
    """Persistence for goals and their owners"""

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    @abstractmethod
    def get_goal(self, goal_id: int) -> Goal:
        ...

    @abstractmethod
    def insert_goal(self, description: str, punishment: Punishment, initiate: bool,
                    frequency: int, username: str) -> int:
        """Insert a goal for the given owner with counter 0, returning its ID"""
        ...

    @abstractmethod
    def increment_counter(self, goal_id: int) -> int:
        """Atomically add one to the goal counter, returning the new value"""
        ...

    @abstractmethod
    def reset_counter(self, goal_id: int) -> None:
        ...

    @abstractmethod
    def take_counter(self, goal_id: int) -> Goal:
        """Atomically reset the goal counter to 0, returning the goal as it was before"""
        ...

    @abstractmethod
    def delete_goal(self, goal_id: int) -> None:
        ...

    @abstractmethod
    def list_goals_for_user(self, username: str) -> List[Goal]:
        ...

    @abstractmethod
    def list_all_goals(self) -> List[Goal]:
        ...

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @abstractmethod
    def insert_user(self, username: str, password_hash: str, salt: str) -> int:
        ...

    @abstractmethod
    def get_user(self, username: str) -> User:
        ...

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> User:
        ...

    @abstractmethod
    def set_twitter_handle(self, username: str, twitter: str) -> None:
        ...

    def get_twitter_handle(self, username: str) -> Optional[str]:
        return self.get_user(username).twitter
