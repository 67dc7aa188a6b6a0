# routers/chats.py
"""
Unit chat routes.

Each unit has one conversation between its resident and the building
management. Residents may only read and write their own unit's conversation;
admin roles may access any unit.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from models import Message, SenderType, Unit, UserRole
from schemas.auth import CurrentUser
from schemas.message import MessageCreate, MessageResponse
from services.user_service import UserService
from utils.auth import verify_token

router = APIRouter(prefix="/api/chats", tags=["chats"])


def _ensure_unit_access(db: Session, current_user: CurrentUser, unit_id: int) -> None:
     if current_user.role != UserRole.RESIDENT:
          return
     if UserService.resident_unit_id(db, current_user) != unit_id:
          raise HTTPException(
               status_code=status.HTTP_403_FORBIDDEN,
               detail="You do not have permission to access this conversation",
          )


def _sender_type_for(current_user: CurrentUser) -> SenderType:
     if current_user.role == UserRole.RESIDENT:
          return SenderType.RESIDENT
     return SenderType.ADMIN


@router.get("/{unit_id}/messages", response_model=List[MessageResponse], summary="List unit messages")
def list_messages(
     unit_id: int,
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     _ensure_unit_access(db, current_user, unit_id)
     return (
          db.query(Message)
          .filter(Message.unit_id == unit_id)
          .order_by(Message.created_at, Message.id)
          .all()
     )


@router.post(
     "/{unit_id}/messages",
     response_model=MessageResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Send a message",
)
def send_message(
     unit_id: int,
     body: MessageCreate,
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     if body.unit_id is not None and body.unit_id != unit_id:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Invalid input",
          )
     _ensure_unit_access(db, current_user, unit_id)

     sender_type = _sender_type_for(current_user)
     if body.sender_type is not None and body.sender_type != sender_type:
          raise HTTPException(
               status_code=status.HTTP_403_FORBIDDEN,
               detail=f"Cannot send messages as {body.sender_type.value}",
          )

     unit = db.query(Unit).filter(Unit.id == unit_id).first()
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Unit with ID {unit_id} not found",
          )

     message = Message(unit_id=unit_id, sender_type=sender_type, message=body.message)
     db.add(message)
     db.commit()
     db.refresh(message)
     return message
