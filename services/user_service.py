# services/user_service.py
"""
User Service - credential store operations.

Users are only ever created by an administrator action (or the startup
bootstrap for the first super admin). There is no delete path.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import User, UserRole
from schemas.auth import CurrentUser
from utils.security import dummy_verify_password, hash_password, verify_password

logger = logging.getLogger(__name__)


class DuplicateUsernameError(Exception):
     """Raised when the unique constraint on users.username rejects an insert."""


class UserService:
     """Service class for user-related business logic."""

     @staticmethod
     def get_by_username(db: Session, username: str) -> Optional[User]:
          return db.query(User).filter(User.username == username).first()

     @staticmethod
     def get_by_id(db: Session, user_id: int) -> Optional[User]:
          return db.query(User).filter(User.id == user_id).first()

     @staticmethod
     def create_user(
          db: Session,
          name: str,
          username: str,
          password: str,
          role: UserRole,
          unit_id: Optional[int] = None
     ) -> User:
          """
          Hash the password and insert a user row.

          Uniqueness of username is enforced by the store, not by a prior
          lookup, so concurrent creations of the same name cannot both win.

          Raises:
               DuplicateUsernameError: If the username is already taken
          """
          user = User(
               name=name,
               username=username,
               password=hash_password(password),
               role=role,
               unit_id=unit_id,
          )
          db.add(user)
          try:
               db.flush()
          except IntegrityError as exc:
               db.rollback()
               raise DuplicateUsernameError(f"Username '{username}' already exists") from exc
          db.refresh(user)
          logger.info("Created %s user %s (id=%s)", role.value, username, user.id)
          return user

     @staticmethod
     def authenticate(db: Session, username: str, password: str) -> Optional[User]:
          """Return the user when the password matches, otherwise None."""
          user = UserService.get_by_username(db, username)
          if user is None:
               dummy_verify_password()
               return None
          if not verify_password(password, user.password):
               return None
          return user

     @staticmethod
     def resident_unit_id(db: Session, current_user: CurrentUser) -> Optional[int]:
          """Unit a resident is bound to; None for admin roles."""
          if current_user.role != UserRole.RESIDENT:
               return None
          user = UserService.get_by_id(db, current_user.id)
          return user.unit_id if user else None

     @staticmethod
     def ensure_super_admin(db: Session, username: str, password: str, name: str = "Super Admin") -> bool:
          """
          Create the bootstrap super admin if no user has that username yet.

          Returns:
               True if a user was created, False if it already existed
          """
          if UserService.get_by_username(db, username) is not None:
               logger.info("Super admin %s already exists", username)
               return False
          UserService.create_user(
               db,
               name=name,
               username=username,
               password=password,
               role=UserRole.SUPER_ADMIN,
          )
          return True
