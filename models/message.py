# models/message.py
import enum

from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, enum_values


class SenderType(str, enum.Enum):
     """Which side of the unit conversation wrote the message."""
     ADMIN = "admin"
     RESIDENT = "resident"


class Message(Base):
     """
     Message model - one chat line in a unit's conversation with the building admin.
     Messages are append-only.
     """
     __tablename__ = "messages"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)
     sender_type = Column(
          Enum(SenderType, name="sender_type", create_constraint=True, values_callable=enum_values),
          nullable=False,
     )
     message = Column(Text, nullable=False)
     is_read = Column(Boolean, default=False, nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     unit = relationship("Unit", back_populates="messages")

     def __repr__(self):
          return f"<Message(id={self.id}, unit_id={self.unit_id}, sender_type='{self.sender_type.value}')>"
