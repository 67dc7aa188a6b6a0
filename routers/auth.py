# routers/auth.py
"""
Authentication routes.

POST /api/auth/login: exchange username/password for a bearer token.
GET  /api/auth/me: the current user, read from the store, so a client can
     re-establish its session after a reload.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from schemas.auth import CurrentUser, LoginRequest, LoginResponse
from schemas.user import UserResponse
from services.user_service import UserService
from utils.auth import verify_token
from utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Log in")
def login(body: LoginRequest, db: Session = Depends(get_session)):
     user = UserService.authenticate(db, body.username, body.password)
     if user is None:
          logger.info("Failed login for username %r", body.username)
          raise HTTPException(
               status_code=status.HTTP_401_UNAUTHORIZED,
               detail="Invalid username or password",
          )

     token = create_access_token(user)
     return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse, summary="Current user")
def me(
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     user = UserService.get_by_id(db, current_user.id)
     if user is None:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="User not found",
          )
     return user
