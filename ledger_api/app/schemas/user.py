"""
Pydantic models for user data.

``UserCreate`` and ``UserLogin`` describe the registration and login
payloads; ``UserRead`` is what the API returns about a user and never
contains the password hash.  ``UserRecord`` is the full row as kept by
``UserStore``.
"""

from pydantic import AliasChoices, BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for registering a user.

    ``password_confirmation`` may also be sent as ``confirm``.  Whether it
    matches ``password`` is checked by the request validator so that the
    mismatch can be reported even when other fields are invalid.
    """

    name: str = Field(..., min_length=1, examples=["Ana"])
    email: EmailStr = Field(..., examples=["ana@example.com"])
    password: str = Field(..., min_length=3, examples=["abcd"])
    password_confirmation: str = Field(
        ...,
        validation_alias=AliasChoices("password_confirmation", "confirm"),
        examples=["abcd"],
    )


class UserLogin(BaseModel):
    """Schema for logging in."""

    email: EmailStr = Field(..., examples=["ana@example.com"])
    password: str = Field(..., min_length=3, examples=["abcd"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str

    model_config = {
        "from_attributes": True,
    }


class UserRecord(UserRead):
    password_hash: str

    def public(self) -> UserRead:
        return UserRead(id=self.id, name=self.name, email=self.email)


class LoginResponse(BaseModel):
    token: str
    name: str
