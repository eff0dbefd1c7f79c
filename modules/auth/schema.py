from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AuthenticatedUser(BaseModel):
    """Identity recovered from a verified bearer token."""
    model_config = ConfigDict(frozen=True)

    id: int


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Aigerim"])
    email: EmailStr = Field(..., examples=["aigerim@example.com"])
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class TokenOut(BaseModel):
    """Login/registration response in the shape the mobile client stores."""
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: int = Field(..., alias="userId")
    name: str
