# models/user.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, enum_values


class UserRole(str, enum.Enum):
     """The closed set of roles. There are no dynamic role definitions."""
     SUPER_ADMIN = "super_admin"
     BUILDING_ADMIN = "building_admin"
     RESIDENT = "resident"


class User(Base):
     """
     User model - central authentication table.

     Users are created by an administrator (never self-registered) and are
     never deleted. Residents carry a unit_id; admins do not.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     username = Column(String(150), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # salted scrypt record, never plaintext
     role = Column(
          Enum(UserRole, name="user_role", create_constraint=True, values_callable=enum_values),
          nullable=False,
     )
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=True, index=True)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     unit = relationship("Unit", foreign_keys=[unit_id])

     def __repr__(self):
          return f"<User(id={self.id}, username='{self.username}', role='{self.role.value}')>"
