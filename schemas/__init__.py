from .auth import LoginRequest, LoginResponse, CurrentUser
from .user import AdminCreate, ResidentCreate, UserResponse
from .unit import UnitCreate, UnitUpdate, UnitResponse, UnitBalanceResponse
from .payment import (
     PaymentCreate,
     PaymentResponse,
     LedgerEntryResponse,
     PaymentTransitionResponse,
     PaymentHistoryResponse,
)
from .message import MessageCreate, MessageResponse

__all__ = [
     "LoginRequest",
     "LoginResponse",
     "CurrentUser",
     "AdminCreate",
     "ResidentCreate",
     "UserResponse",
     "UnitCreate",
     "UnitUpdate",
     "UnitResponse",
     "UnitBalanceResponse",
     "PaymentCreate",
     "PaymentResponse",
     "LedgerEntryResponse",
     "PaymentTransitionResponse",
     "PaymentHistoryResponse",
     "MessageCreate",
     "MessageResponse",
]
