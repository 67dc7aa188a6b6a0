# utils/security.py
"""
Password hashing and bearer token handling.

Passwords are derived with scrypt through passlib. The stored record carries
its own salt and cost parameters ($scrypt$ln=..,r=..,p=..$salt$checksum).

Tokens are HS256 JWTs signed with JWT_SECRET. There is no fallback secret:
importing this module without JWT_SECRET set aborts startup.
"""
import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from dotenv import load_dotenv
from jose import JWTError, jwt
from passlib.context import CryptContext

from models.user import UserRole
from schemas.auth import CurrentUser
from utils.errors import InvalidTokenError, PasswordHashDecodeError

load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET")
if not SECRET_KEY:
     raise RuntimeError("JWT_SECRET is not set; refusing to start without a token signing key")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "24"))

# scrypt: ln=14 keeps N*r*128 (16 MiB) under hashlib's default maxmem
pwd_context = CryptContext(
     schemes=["scrypt"],
     scrypt__default_rounds=int(os.getenv("SCRYPT_ROUNDS", "14")),
)


def hash_password(password: str) -> str:
     """Return a freshly salted scrypt record for the plaintext."""
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     """
     Check a plaintext password against a stored record.

     The digest comparison is constant time (passlib's consteq).

     Raises:
          PasswordHashDecodeError: If the stored record is not a valid scrypt record.
     """
     try:
          return pwd_context.verify(password, hashed)
     except ValueError as exc:
          raise PasswordHashDecodeError(f"Malformed password record: {exc}") from exc


def dummy_verify_password() -> None:
     """Spend one scrypt verification so an unknown username costs as much as a wrong password."""
     pwd_context.dummy_verify()


def create_access_token(user, expires_delta: Optional[timedelta] = None) -> str:
     """
     Issue a signed token for a user row (or anything with id/username/role).

     The token embeds id, username and role and expires after
     ACCESS_TOKEN_EXPIRE_HOURS unless expires_delta is given.
     """
     now = datetime.now(timezone.utc)
     if expires_delta is None:
          expires_delta = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)
     role = user.role.value if isinstance(user.role, UserRole) else str(user.role)
     claims = {
          "id": user.id,
          "username": user.username,
          "role": role,
          "iat": now,
          "exp": now + expires_delta,
          "jti": uuid.uuid4().hex,
     }
     return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> CurrentUser:
     """
     Verify signature and expiry and return the embedded identity.

     Raises:
          InvalidTokenError: For any failure. Expired and tampered tokens are
               not distinguished.
     """
     try:
          payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
          return CurrentUser(
               id=payload["id"],
               username=payload["username"],
               role=payload["role"],
          )
     except (JWTError, KeyError, ValueError) as exc:
          raise InvalidTokenError("Token verification failed") from exc
