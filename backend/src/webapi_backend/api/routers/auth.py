"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from webapi_backend.api.authorization import Identity
from webapi_backend.api.dependencies import get_auth_service, get_current_identity
from webapi_backend.api.models import (
    AuthTokenResponse,
    IdentityResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)
from webapi_backend.api.services import (
    AuthService,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from webapi_backend.database import IdentityDataContext, get_identity_context

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserRegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: UserRegisterRequest,
    context: IdentityDataContext = Depends(get_identity_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserRegisterResponse:
    """Register a new user and issue an access token."""

    try:
        user, token = auth_service.register_user(
            context=context,
            username=payload.username,
            password=payload.password,
            email=payload.email,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="User already exists"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserRegisterResponse(user=user_model, token=token_model)


@router.post("/login", response_model=UserLoginResponse)
def login_user(
    payload: UserLoginRequest,
    context: IdentityDataContext = Depends(get_identity_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserLoginResponse:
    """Authenticate an existing user using username and password."""

    try:
        user, token = auth_service.authenticate_user(
            context=context, username=payload.username, password=payload.password
        )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserLoginResponse(user=user_model, token=token_model)


@router.get("/me", response_model=IdentityResponse)
def read_current_identity(
    identity: Identity = Depends(get_current_identity),
) -> IdentityResponse:
    """Return the caller's identity and effective roles."""

    return IdentityResponse.model_validate(identity, from_attributes=True)
