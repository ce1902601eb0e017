"""
Pydantic models for the application
"""
from doordont.models.goal import (
    GoalMode,
    Punishment,
    Goal,
    GoalCreateRequest,
    GoalEvaluation
)
from doordont.models.user import (
    User,
    SignUpRequest,
    LoginRequest,
    TwitterHandleRequest
)

__all__ = [
    "GoalMode",
    "Punishment",
    "Goal",
    "GoalCreateRequest",
    "GoalEvaluation",
    "User",
    "SignUpRequest",
    "LoginRequest",
    "TwitterHandleRequest"
]
