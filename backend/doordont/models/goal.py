"""
Pydantic models for goals
"""
from enum import Enum
from pydantic import BaseModel, Field


class GoalMode(str, Enum):
    """Whether the user wants to start or quit an activity"""
    START = "start"
    QUIT = "quit"

    @classmethod
    def from_initiate(cls, initiate: bool) -> "GoalMode":
        return cls.START if initiate else cls.QUIT


class Punishment(str, Enum):
    """Consequence delivery channel for a failed goal"""
    EMAIL = "email"
    TWEET = "tweet"


class Goal(BaseModel):
    """A persisted goal record"""
    id: int = Field(..., description="Goal ID")
    description: str = Field(..., description="What the user promised to do (or stop doing)")
    punishment: Punishment = Field(..., description="Delivery channel used when the goal is failed")
    initiate: bool = Field(..., description="True to start an activity, False to quit it")
    frequency: int = Field(..., gt=0, description="Target count per evaluation period")
    counter: int = Field(default=0, ge=0, description="Occurrences since the last reset")
    user_id: int = Field(..., description="Owner user ID")

    @property
    def mode(self) -> GoalMode:
        return GoalMode.from_initiate(self.initiate)


class GoalCreateRequest(BaseModel):
    """Request model for creating a goal"""
    description: str = Field(..., min_length=1, max_length=255, description="Goal description")
    punishment: Punishment = Field(..., description="'email' or 'tweet'")
    initiate: bool = Field(..., description="True to start an activity, False to quit it")
    frequency: int = Field(..., gt=0, description="Times per week")
    username: str = Field(..., min_length=1, description="Owner username")


class GoalEvaluation(BaseModel):
    """Outcome of checking a goal against its weekly target"""
    goal_id: int
    description: str
    initiate: bool
    frequency: int
    counter: int
    met_goal: bool

    @property
    def mode(self) -> GoalMode:
        return GoalMode.from_initiate(self.initiate)
