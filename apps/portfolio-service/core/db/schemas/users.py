import uuid
from pydantic import BaseModel, Field

from .base import CamelModel, UtcDateTime


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)


class User(CamelModel):
    id: uuid.UUID
    username: str
    is_admin: bool
    created_at: UtcDateTime


class LoginResponse(CamelModel):
    message: str
    user: User
    token: str
