import datetime as dt
from typing import Literal, Optional
import uuid

from pydantic import Field

from app.schemas.base import CamelModel

AdminRole = Literal["admin", "super_admin"]


class AdminRead(CamelModel):
    id: uuid.UUID
    email: str
    name: str
    role: AdminRole


class AdminProfile(AdminRead):
    is_active: bool
    created_at: Optional[dt.datetime] = None


class AuthResponse(CamelModel):
    message: str
    token: str
    admin: AdminRead


class LoginResponse(AuthResponse):
    # Standard OAuth2 token response fields
    access_token: str = Field(..., alias="access_token")
    token_type: str = Field("bearer", alias="token_type")


class ProfileResponse(CamelModel):
    admin: AdminProfile
