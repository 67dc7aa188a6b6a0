"""
Pydantic schemas for user creation and the public user record.
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, ConfigDict, StrictInt

from models.user import UserRole
from .base import CamelModel


class UserCreateBase(CamelModel):
     name: str = Field(..., min_length=1, max_length=255, description="Display name")
     username: str = Field(..., min_length=1, max_length=150, description="Unique login name")
     password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")


class AdminCreate(UserCreateBase):
     """Request body for POST /api/admins/create (super admin only)."""
     role: Literal["building_admin"] = "building_admin"

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Building Manager",
                    "username": "manager1",
                    "password": "s3cret-pass",
                    "role": "building_admin",
               }
          }
     )


class ResidentCreate(UserCreateBase):
     """Request body for POST /api/residents/create (building admin only)."""
     role: Literal["resident"] = "resident"
     unit_id: StrictInt = Field(..., gt=0, description="Unit the resident lives in")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Sara Ahmadi",
                    "username": "unit101",
                    "password": "s3cret-pass",
                    "role": "resident",
                    "unitId": 1,
               }
          }
     )


class UserResponse(CamelModel):
     """Public user record. The password hash is never part of it."""
     id: int
     name: str
     username: str
     role: UserRole
     unit_id: Optional[int] = None
     created_at: Optional[datetime] = None
