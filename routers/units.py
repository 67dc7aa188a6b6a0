# routers/units.py
"""
Unit API routes.

Building admins create and partially update units. Any authenticated user
may list units; residents only see the unit they are bound to.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from models import Unit, UserRole
from schemas.auth import CurrentUser
from schemas.unit import UnitCreate, UnitUpdate, UnitResponse, UnitBalanceResponse
from services.payment_service import PaymentService
from services.user_service import UserService
from utils.auth import require_roles, verify_token

router = APIRouter(prefix="/api/units", tags=["units"])


def _get_unit_or_404(db: Session, unit_id: int) -> Unit:
     unit = db.query(Unit).filter(Unit.id == unit_id).first()
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Unit with ID {unit_id} not found",
          )
     return unit


@router.get("", response_model=List[UnitResponse], summary="List units")
def list_units(
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     query = db.query(Unit)
     if current_user.role == UserRole.RESIDENT:
          query = query.filter(Unit.id == UserService.resident_unit_id(db, current_user))
     return query.order_by(Unit.id).all()


@router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a unit",
     dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))],
)
def create_unit(body: UnitCreate, db: Session = Depends(get_session)):
     unit = Unit(**body.model_dump())
     db.add(unit)
     db.commit()
     db.refresh(unit)
     return unit


@router.patch(
     "/{unit_id}",
     response_model=UnitResponse,
     summary="Partially update a unit",
     dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))],
)
def update_unit(unit_id: int, body: UnitUpdate, db: Session = Depends(get_session)):
     unit = _get_unit_or_404(db, unit_id)

     for field, value in body.model_dump(exclude_unset=True).items():
          setattr(unit, field, value)

     db.commit()
     db.refresh(unit)
     return unit


@router.get("/{unit_id}/balance", response_model=UnitBalanceResponse, summary="Total debt of a unit")
def get_unit_balance(
     unit_id: int,
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     if current_user.role == UserRole.RESIDENT and UserService.resident_unit_id(db, current_user) != unit_id:
          raise HTTPException(
               status_code=status.HTTP_403_FORBIDDEN,
               detail="You do not have permission to view this unit",
          )
     _get_unit_or_404(db, unit_id)
     return PaymentService.calculate_unit_balance(db, unit_id)
