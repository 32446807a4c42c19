"""
Login API
"""

from typing import Optional
from fastapi import APIRouter, Body, Depends

from event_planner.core.dependencies import get_user_repository
from event_planner.repositories.user_repository import UserRepository
from event_planner.schemas.common import ERROR_RESPONSES
from event_planner.schemas.user import LoginRequest, LoginResponse


router = APIRouter(tags=["Users"], responses=ERROR_RESPONSES)


@router.post("/login", response_model=LoginResponse)
def login(
    request: Optional[LoginRequest] = Body(None),
    repo: UserRepository = Depends(get_user_repository),
):
    """Resolve the caller's identity token to a user, registering it on first login."""
    # An empty body reports the missing fields like an empty object does
    if request is None:
        request = LoginRequest()
    user = repo.login_or_register(request.firebase_uid, request.email)
    return LoginResponse.model_validate(user)
