# utils/errors.py
"""
Exception types shared by the auth layer and the routers.

AuthenticationError and AuthorizationError are rendered by main.py as bare
401 / 403 responses with no body.
"""


class AuthenticationError(Exception):
     """No bearer credential was presented."""


class AuthorizationError(Exception):
     """The credential is invalid, expired, or its role is not allowed."""


class InvalidTokenError(Exception):
     """Token signature, expiry or claims failed verification."""


class PasswordHashDecodeError(ValueError):
     """A stored password record could not be parsed."""
