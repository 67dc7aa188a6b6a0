"""
Pydantic schemas for Unit API request/response validation.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, ConfigDict, StrictInt, model_validator

from models.unit import UnitStatus
from .base import CamelModel


class UnitCreate(CamelModel):
     """Schema for creating a unit."""
     unit_number: str = Field(..., min_length=1, max_length=50)
     floor: StrictInt
     status: UnitStatus = Field(default=UnitStatus.ACTIVE)
     resident_id: Optional[StrictInt] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unitNumber": "101",
                    "floor": 1,
                    "status": "active",
               }
          }
     )


class UnitUpdate(CamelModel):
     """Schema for a partial unit update. Only the keys sent are applied."""
     unit_number: Optional[str] = Field(None, min_length=1, max_length=50)
     floor: Optional[StrictInt] = None
     status: Optional[UnitStatus] = None
     resident_id: Optional[StrictInt] = None

     @model_validator(mode="after")
     def _required_columns_not_null(self):
          for name in ("unit_number", "floor", "status"):
               if name in self.model_fields_set and getattr(self, name) is None:
                    raise ValueError(f"{name} cannot be null")
          return self


class UnitResponse(CamelModel):
     id: int
     unit_number: str
     floor: int
     status: UnitStatus
     resident_id: Optional[int] = None
     created_at: Optional[datetime] = None


class UnitBalanceResponse(CamelModel):
     """Outstanding dues for a unit. total_debt is the sum of pending amounts."""
     unit_id: int
     total_debt: int
     pending_count: int
     paid_amount: int
     paid_count: int
