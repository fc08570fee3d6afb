# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, SignupResponse, LoginRequest, LoginResponse
from ...application.dto.error_dto import ErrorResponse
from ...application.dto.user_dto import UserResponse
from ...application.services.credential_service import CredentialService
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.models.token import TokenClaims
from ...di.container import get_container
from .dependencies import get_token_claims


router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input data"},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def signup(request: SignupRequest) -> SignupResponse:
    """
    Register a new user

    Args:
        request: Signup request

    Returns:
        SignupResponse with a message and the created user
    """
    container = get_container()
    credential_service = container.get(CredentialService)

    result = await credential_service.signup(request.name, request.email, request.password)
    return SignupResponse(
        message=result.message,
        user=UserResponse.from_principal(result.user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input data"},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest) -> LoginResponse:
    """
    Authenticate user and get access token

    Args:
        request: Login request

    Returns:
        LoginResponse with access token and user information
    """
    container = get_container()
    credential_service = container.get(CredentialService)

    result = await credential_service.login(request.email, request.password)
    return LoginResponse(
        access_token=result.access_token,
        user=UserResponse.from_principal(result.user),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(claims: TokenClaims = Depends(get_token_claims)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        claims: Verified token claims (from dependency)

    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(claims)
