from .base import Base
from .user import User, UserRole
from .unit import Unit, UnitStatus
from .payment import Payment, PaymentStatus
from .message import Message, SenderType
from .payment_ledger import PaymentLedger

__all__ = [
     "Base",
     "User",
     "UserRole",
     "Unit",
     "UnitStatus",
     "Payment",
     "PaymentStatus",
     "Message",
     "SenderType",
     "PaymentLedger",
]
