# models/unit.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, enum_values


class UnitStatus(str, enum.Enum):
     """Occupancy status of a unit."""
     ACTIVE = "active"
     INACTIVE = "inactive"


class Unit(Base):
     """
     Unit model - a billable space within the managed building.

     Created and partially updated by a building admin; never deleted.
     """
     __tablename__ = "units"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_number = Column(String(50), nullable=False)
     floor = Column(Integer, nullable=False)
     status = Column(
          Enum(UnitStatus, name="unit_status", create_constraint=True, values_callable=enum_values),
          default=UnitStatus.ACTIVE,
          nullable=False,
     )
     resident_id = Column(Integer, nullable=True)  # users.id of the linked resident, if any
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     payments = relationship("Payment", back_populates="unit")
     messages = relationship("Message", back_populates="unit")

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status.value}')>"
