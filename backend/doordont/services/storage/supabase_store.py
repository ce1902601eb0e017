"""
Supabase Goal Store - Centralized database access layer
All Supabase queries for goals and users
"""
from typing import List, Dict, Any
import logging

from doordont.core.exceptions import (
    GoalNotFoundError,
    StorageError,
    UserAlreadyExistsError,
    UserNotFoundError
)
from doordont.models.goal import Goal, Punishment
from doordont.models.user import User
from .base import GoalStore

logger = logging.getLogger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseGoalStore(GoalStore):
    """
    Goal Store backed by the Supabase `goals` and `users` tables

    Counter increments go through the `increment_goal_counter` database
    function (see schema.sql) so concurrent increments never lose updates.
    """

    def __init__(self, client):
        self.client = client

    # ========================================================================
    # GOALS TABLE
    # ========================================================================

    def get_goal(self, goal_id: int) -> Goal:
        """
        Get a single goal by ID

        Args:
            goal_id: The goal ID

        Returns:
            Goal record

        Raises:
            GoalNotFoundError: If no goal has this ID
            StorageError: If query fails
        """
        try:
            result = self.client.table("goals").select("*").eq("id", goal_id).execute()
        except Exception as e:
            logger.error(f"Database error fetching goal {goal_id}: {e}")
            raise StorageError(f"Failed to fetch goal: {e}")

        if not result.data:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return Goal(**result.data[0])

    def insert_goal(self, description: str, punishment: Punishment, initiate: bool,
                    frequency: int, username: str) -> int:
        """
        Insert a goal owned by `username` with its counter at 0

        Returns:
            The new goal ID

        Raises:
            UserNotFoundError: If the owner does not exist
            StorageError: If insert fails
        """
        owner = self.get_user(username)
        try:
            result = self.client.table("goals").insert({
                "description": description,
                "punishment": Punishment(punishment).value,
                "initiate": initiate,
                "frequency": frequency,
                "counter": 0,
                "user_id": owner.id
            }).execute()
        except Exception as e:
            logger.error(f"Database error creating goal: {e}")
            raise StorageError(f"Failed to create goal: {e}")

        if not result.data:
            raise StorageError("Goal insert returned no rows")
        return result.data[0]["id"]

    def increment_counter(self, goal_id: int) -> int:
        """
        Add one to a goal counter using the atomic database function

        Returns:
            The new counter value

        Raises:
            GoalNotFoundError: If no goal has this ID
            StorageError: If the update fails
        """
        try:
            result = self.client.rpc("increment_goal_counter", {"goal_id": goal_id}).execute()
        except Exception as e:
            logger.error(f"Database error incrementing goal {goal_id}: {e}")
            raise StorageError(f"Failed to increment goal counter: {e}")

        if result.data is None:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return result.data

    def reset_counter(self, goal_id: int) -> None:
        """
        Set a goal counter back to 0

        Raises:
            GoalNotFoundError: If no goal has this ID
            StorageError: If the update fails
        """
        self._update_goal(goal_id, {"counter": 0})

    def take_counter(self, goal_id: int) -> Goal:
        """
        Reset a goal counter to 0 in one statement, using the `take_goal_counter`
        database function so increments from other workers cannot slip in between

        Returns:
            The goal as it was before the reset

        Raises:
            GoalNotFoundError: If no goal has this ID
            StorageError: If the update fails
        """
        try:
            result = self.client.rpc("take_goal_counter", {"goal_id": goal_id}).execute()
        except Exception as e:
            logger.error(f"Database error resetting goal {goal_id}: {e}")
            raise StorageError(f"Failed to reset goal counter: {e}")

        if not result.data:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return Goal(**result.data[0])

    def delete_goal(self, goal_id: int) -> None:
        """
        Delete a goal

        Raises:
            GoalNotFoundError: If no goal has this ID
            StorageError: If delete fails
        """
        try:
            result = self.client.table("goals").delete().eq("id", goal_id).execute()
        except Exception as e:
            logger.error(f"Database error deleting goal {goal_id}: {e}")
            raise StorageError(f"Failed to delete goal: {e}")

        if not result.data:
            raise GoalNotFoundError(f"Goal {goal_id} not found")

    def list_goals_for_user(self, username: str) -> List[Goal]:
        """
        Get every goal owned by a user

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If query fails
        """
        owner = self.get_user(username)
        try:
            result = self.client.table("goals").select("*").eq("user_id", owner.id).order("id").execute()
        except Exception as e:
            logger.error(f"Database error fetching goals for {username}: {e}")
            raise StorageError(f"Failed to fetch goals: {e}")
        return [Goal(**row) for row in result.data]

    def list_all_goals(self) -> List[Goal]:
        """
        Get all goals from the database

        Raises:
            StorageError: If query fails
        """
        try:
            result = self.client.table("goals").select("*").order("id").execute()
        except Exception as e:
            logger.error(f"Database error fetching goals: {e}")
            raise StorageError(f"Failed to fetch goals: {e}")
        return [Goal(**row) for row in result.data]

    def _update_goal(self, goal_id: int, update_data: Dict[str, Any]) -> None:
        try:
            result = self.client.table("goals").update(update_data).eq("id", goal_id).execute()
        except Exception as e:
            logger.error(f"Database error updating goal {goal_id}: {e}")
            raise StorageError(f"Failed to update goal: {e}")

        if not result.data:
            raise GoalNotFoundError(f"Goal {goal_id} not found")

    # ========================================================================
    # USERS TABLE
    # ========================================================================

    def insert_user(self, username: str, password_hash: str, salt: str) -> int:
        """
        Insert a user with an already-hashed password

        Returns:
            The new user ID

        Raises:
            UserAlreadyExistsError: If the username is taken
            StorageError: If insert fails
        """
        try:
            result = self.client.table("users").insert({
                "username": username,
                "password": password_hash,
                "salt": salt
            }).execute()
        except Exception as e:
            if getattr(e, "code", None) == UNIQUE_VIOLATION:
                raise UserAlreadyExistsError(f"Username '{username}' is already taken")
            logger.error(f"Database error creating user: {e}")
            raise StorageError(f"Failed to create user: {e}")

        if not result.data:
            raise StorageError("User insert returned no rows")
        return result.data[0]["id"]

    def get_user(self, username: str) -> User:
        """
        Get a user by username

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If query fails
        """
        return self._fetch_user("username", username)

    def get_user_by_id(self, user_id: int) -> User:
        """
        Get a user by ID

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If query fails
        """
        return self._fetch_user("id", user_id)

    def set_twitter_handle(self, username: str, twitter: str) -> None:
        """
        Assign a twitter handle to a user

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If the update fails
        """
        try:
            result = self.client.table("users").update({"twitter": twitter}).eq("username", username).execute()
        except Exception as e:
            logger.error(f"Database error updating twitter handle for {username}: {e}")
            raise StorageError(f"Failed to update twitter handle: {e}")

        if not result.data:
            raise UserNotFoundError(f"User '{username}' not found")

    def _fetch_user(self, column: str, value: Any) -> User:
        try:
            result = self.client.table("users").select("*").eq(column, value).execute()
        except Exception as e:
            logger.error(f"Database error fetching user {column}={value}: {e}")
            raise StorageError(f"Failed to fetch user: {e}")

        if not result.data:
            raise UserNotFoundError(f"User {value} not found")
        return User(**result.data[0])
