"""
Users Service - Account creation, authentication and twitter handles
"""
from typing import Optional
import logging

from doordont.core.exceptions import UserAlreadyExistsError, UserNotFoundError
from doordont.models.user import normalize_twitter_handle
from doordont.services.storage.base import GoalStore
from .passwords import generate_salt, hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """
    Account operations

    Sign-up and login report failures as False instead of raising, so the
    HTTP layer decides how to present them.
    """

    def __init__(self, store: GoalStore):
        self.store = store

    def create_user(self, username: str, password: str) -> bool:
        """
        Create a user with a salted password hash

        Returns:
            True if created, False if the username is taken

        Raises:
            StorageError: If the store fails
        """
        salt = generate_salt()
        try:
            self.store.insert_user(username, hash_password(password, salt), salt)
        except UserAlreadyExistsError:
            logger.info(f"Sign-up rejected, username '{username}' is taken")
            return False

        logger.info(f"Created user '{username}'")
        return True

    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair

        Returns:
            True if the user exists and the password matches

        Raises:
            StorageError: If the store fails
        """
        try:
            user = self.store.get_user(username)
        except UserNotFoundError:
            return False
        return verify_password(password, user.salt, user.password)

    def set_twitter_handle(self, username: str, twitter: str) -> None:
        """
        Store a twitter handle, without its leading '@'

        Raises:
            ValueError: If the handle is empty once stripped
            UserNotFoundError: If the user does not exist
        """
        self.store.set_twitter_handle(username, normalize_twitter_handle(twitter))

    def get_twitter_handle(self, username: str) -> Optional[str]:
        return self.store.get_twitter_handle(username)
