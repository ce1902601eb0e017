"""
Goal Routes - Endpoints for goal management
"""
from fastapi import APIRouter, Depends, HTTPException, status

from doordont.core.dependencies import get_goal_service
from doordont.core.exceptions import (
    GoalNotFoundError,
    InvalidGoalDataError,
    SchedulerError,
    StorageError,
    UserNotFoundError
)
from doordont.models.goal import GoalCreateRequest
from doordont.services.goals.service import GoalService

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_goal(request: GoalCreateRequest, service: GoalService = Depends(get_goal_service)):
    """Create a goal and schedule its weekly evaluation"""
    try:
        return service.create_goal(request)
    except InvalidGoalDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (StorageError, SchedulerError) as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("")
def list_goals(username: str, service: GoalService = Depends(get_goal_service)):
    """List a user's goals"""
    try:
        return [goal.model_dump(mode="json") for goal in service.list_goals(username)]
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{goal_id}")
def get_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    try:
        return service.get_goal(goal_id).model_dump(mode="json")
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{goal_id}/evaluation")
def evaluate_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    """Current verdict for a goal (no notification is sent)"""
    try:
        return service.evaluate(goal_id).model_dump(mode="json")
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{goal_id}/increment")
def increment_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    """Record one occurrence of the goal's activity"""
    try:
        return service.increment_counter(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{goal_id}/reset")
def reset_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    try:
        return service.reset_counter(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{goal_id}")
def delete_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    """Delete a goal and stop evaluating it"""
    try:
        return service.delete_goal(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
