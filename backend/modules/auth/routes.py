"""
Auth API endpoints.

Signup and login are public; logout requires a valid bearer token.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from api.models.errors import ErrorResponse
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, LogoutResponse, SignupRequest

router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new account.

    Returns a bearer token and the new user.
    """
    result = await service.signup(request.name, request.email, request.password)
    return AuthResponse(token=result.token, user=result.user)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a bearer token.
    """
    result = await service.login(request.email, request.password)
    return AuthResponse(token=result.token, user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    Log out.

    Tokens are stateless; the client is expected to discard its token.
    """
    await service.logout(user)
    return LogoutResponse()
