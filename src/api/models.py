"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names follow the camelCase wire format via aliases.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.ports import Account


class RegisterUserRequest(BaseModel):
    """
    Request model for user registration.

    All fields are optional here: missing or empty values are rejected by
    the registration use case with a 400, not by request parsing.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    password: str | None = Field(default=None, repr=False)
    password_confirmation: str | None = Field(
        default=None, alias="passwordConfirmation", repr=False
    )


class UserResponse(BaseModel):
    """Response model for a registered user. Never includes the password."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    last_name: str = Field(alias="lastName")
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "UserResponse":
        return cls(
            id=account.id,
            name=account.name,
            last_name=account.last_name,
            email=account.email,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
