"""
API v1 routes.

Defines REST endpoints for the user registration API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_register_user_use_case, get_repository
from src.api.models import ErrorResponse, RegisterUserRequest, UserResponse
from src.domain.exceptions import RegistrationError
from src.domain.ports import RegistrationInput, UserRepository
from src.domain.registration import RegisterUserUseCase

router = APIRouter(tags=["v1"])


def _to_http_error(error: RegistrationError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid data or user already exists"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Register a new user",
    description="Create a user account from name, last name, email and a confirmed password.",
)
def register_user(
    request_data: RegisterUserRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> UserResponse:
    """
    Register a new user.

    - **name**, **lastName**: required, non-empty
    - **email**: well-formed and not yet registered
    - **password**, **passwordConfirmation**: required and equal

    Returns the created user without the password.
    """
    try:
        account = use_case.execute(
            RegistrationInput.from_mapping(request_data.model_dump(by_alias=True))
        )
    except RegistrationError as e:
        raise _to_http_error(e) from None
    return UserResponse.from_account(account)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Get a registered user",
)
def get_user(
    user_id: str,
    repository: UserRepository = Depends(get_repository),
) -> UserResponse:
    """Fetch a registered user by id."""
    try:
        account = repository.find_by_id(user_id)
    except RegistrationError as e:
        raise _to_http_error(e) from None
    return UserResponse.from_account(account)
