"""
Pydantic schemas for unit chat messages.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, ConfigDict, StrictInt

from models.message import SenderType
from .base import CamelModel


class MessageCreate(CamelModel):
     """
     Request body for POST /api/chats/{unitId}/messages.

     unitId in the body is optional; the path parameter is authoritative.
     senderType defaults to the caller's side of the conversation.
     """
     unit_id: Optional[StrictInt] = None
     sender_type: Optional[SenderType] = None
     message: str = Field(..., min_length=1)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unitId": 5,
                    "message": "hello",
                    "senderType": "resident",
               }
          }
     )


class MessageResponse(CamelModel):
     id: int
     unit_id: int
     sender_type: SenderType
     message: str
     is_read: bool = False
     created_at: Optional[datetime] = None
