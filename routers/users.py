# routers/users.py
"""
Account creation routes.

- Super admin creates building admins.
- Building admin creates residents bound to a unit.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from models import Unit, UserRole
from schemas.user import AdminCreate, ResidentCreate, UserResponse
from services.user_service import UserService, DuplicateUsernameError
from utils.auth import require_roles

router = APIRouter(prefix="/api", tags=["users"])


def _conflict(exc: DuplicateUsernameError) -> HTTPException:
     return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.post(
     "/admins/create",
     response_model=UserResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a building admin",
     dependencies=[Depends(require_roles(UserRole.SUPER_ADMIN))],
)
def create_admin(body: AdminCreate, db: Session = Depends(get_session)):
     try:
          user = UserService.create_user(
               db,
               name=body.name,
               username=body.username,
               password=body.password,
               role=UserRole.BUILDING_ADMIN,
          )
     except DuplicateUsernameError as exc:
          raise _conflict(exc)
     return user


@router.post(
     "/residents/create",
     response_model=UserResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a resident",
     dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))],
)
def create_resident(body: ResidentCreate, db: Session = Depends(get_session)):
     unit = db.query(Unit).filter(Unit.id == body.unit_id).first()
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Unit with ID {body.unit_id} not found",
          )

     try:
          user = UserService.create_user(
               db,
               name=body.name,
               username=body.username,
               password=body.password,
               role=UserRole.RESIDENT,
               unit_id=body.unit_id,
          )
     except DuplicateUsernameError as exc:
          raise _conflict(exc)
     return user
