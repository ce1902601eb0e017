"""
Custom Exceptions - Application-specific error types
"""


class DoOrDontException(Exception):
    """Base exception for all DoOrDont errors"""
    pass


class GoalNotFoundError(DoOrDontException):
    """Raised when a goal cannot be found"""
    pass


class InvalidGoalDataError(DoOrDontException):
    """Raised when goal data validation fails"""
    pass


class UserNotFoundError(DoOrDontException):
    """Raised when a user cannot be found"""
    pass


class UserAlreadyExistsError(DoOrDontException):
    """Raised when attempting to create a user with a taken username"""
    pass


class StorageError(DoOrDontException):
    """Raised when the underlying store fails"""
    pass


class SchedulerError(DoOrDontException):
    """Raised when scheduler operations fail"""
    pass


class NotificationError(DoOrDontException):
    """Raised when a notification transport fails"""
    pass
