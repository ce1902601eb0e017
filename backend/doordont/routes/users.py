"""
User Routes - Sign-up, login and twitter handle endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status

from doordont.core.dependencies import get_user_service
from doordont.core.exceptions import StorageError, UserNotFoundError
from doordont.models.user import LoginRequest, SignUpRequest, TwitterHandleRequest
from doordont.services.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(request: SignUpRequest, service: UserService = Depends(get_user_service)):
    """Create a user account"""
    try:
        created = service.create_user(request.username, request.password)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not created:
        raise HTTPException(status_code=409, detail=f"Username '{request.username}' is already taken")
    return {"status": "success", "message": f"User '{request.username}' created"}


@router.post("/login")
def login(request: LoginRequest, service: UserService = Depends(get_user_service)):
    """Verify a username/password pair"""
    try:
        authenticated = service.authenticate(request.username, request.password)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not authenticated:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return {"authenticated": True}


@router.get("/{username}/twitter")
def get_twitter_handle(username: str, service: UserService = Depends(get_user_service)):
    try:
        return {"username": username, "twitter": service.get_twitter_handle(username)}
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{username}/twitter")
def set_twitter_handle(username: str, request: TwitterHandleRequest,
                       service: UserService = Depends(get_user_service)):
    try:
        service.set_twitter_handle(username, request.twitter)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "success", "message": f"Twitter handle set for '{username}'"}
