"""
Pydantic schemas for login and the authenticated identity.
"""
from pydantic import BaseModel, ConfigDict

from models.user import UserRole
from .base import CamelModel
from .user import UserResponse


class LoginRequest(BaseModel):
     """Request body for POST /api/auth/login."""
     username: str
     password: str

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "username": "manager1",
                    "password": "s3cret-pass",
               }
          }
     )


class LoginResponse(CamelModel):
     """Token plus the public user record."""
     token: str
     user: UserResponse


class CurrentUser(BaseModel):
     """Identity decoded from a bearer token and attached to request.state.user."""
     id: int
     username: str
     role: UserRole
