# utils/auth.py
"""
Access control dependencies.

verify_token authenticates the request; require_roles(...) builds a
dependency that depends on verify_token, so authentication always runs
before the role check on every gated route.

Usage:
     @router.post("", dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))])
     def create_unit(...): ...

     @router.get("")
     def list_units(current_user: CurrentUser = Depends(verify_token)): ...
"""
import logging
from typing import Callable

from fastapi import Depends, Request

from models.user import UserRole
from schemas.auth import CurrentUser
from utils.errors import AuthenticationError, AuthorizationError, InvalidTokenError
from utils.security import decode_access_token

logger = logging.getLogger(__name__)


def verify_token(request: Request) -> CurrentUser:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise AuthenticationError()
     token = auth.split(" ", 1)[1].strip()
     if not token:
          raise AuthenticationError()
     try:
          current_user = decode_access_token(token)
     except InvalidTokenError:
          logger.info("Rejected invalid token on %s %s", request.method, request.url.path)
          raise AuthorizationError()
     request.state.user = current_user
     return current_user


def require_roles(*roles: UserRole) -> Callable[..., CurrentUser]:
     """Build a dependency that rejects identities whose role is not in roles."""
     allowed = frozenset(roles)

     def role_checker(current_user: CurrentUser = Depends(verify_token)) -> CurrentUser:
          if current_user.role not in allowed:
               logger.info(
                    "User %s with role %s denied; requires one of %s",
                    current_user.id,
                    current_user.role.value,
                    sorted(role.value for role in allowed),
               )
               raise AuthorizationError()
          return current_user

     return role_checker
