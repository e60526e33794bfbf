from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    """Admin login request schema."""

    username: str = Field(..., max_length=50)
    password: str = Field(..., max_length=255)

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v):
        if v is None or not str(v).strip():
            raise ValueError("Username is required")
        return str(v).strip()

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v):
        if v is None or not str(v):
            raise ValueError("Password is required")
        return v


class LoginResponse(BaseModel):
    """Login response schema."""

    token: str
    token_type: str = "bearer"
    expires_in: int
