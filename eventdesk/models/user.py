from pydantic import ConfigDict
from sqlmodel import SQLModel


class User(SQLModel):
    """Учетная запись для входа. В базе не хранится."""
    model_config = ConfigDict(frozen=True)

    user_id: int
    username: str
    password: str


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str


class TokenResponse(SQLModel):
    jwt_token: str


class TokenData(SQLModel):
    sub: str
    username: str
    iat: int
    exp: int
