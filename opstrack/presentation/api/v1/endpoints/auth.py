"""Credential check endpoint. No session or token is issued."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field

from opstrack.application.schemas import CamelModel, UserResponse
from opstrack.application.services import UserService
from opstrack.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


@router.post("/login", response_model=UserResponse)
async def login(
    data: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user matching the credentials, without its password hash."""
    user = await service.authenticate(data.username, data.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return UserResponse.model_validate(user)
