from .user_service import UserService, DuplicateUsernameError
from .payment_service import PaymentService, PaymentAlreadyPaidError
from .ledger_service import (
     compute_transaction_hash,
     get_previous_hash,
     append_ledger_entry,
     verify_ledger_entry,
     verify_full_chain,
     GENESIS_HASH,
)

__all__ = [
     "UserService",
     "DuplicateUsernameError",
     "PaymentService",
     "PaymentAlreadyPaidError",
     "compute_transaction_hash",
     "get_previous_hash",
     "append_ledger_entry",
     "verify_ledger_entry",
     "verify_full_chain",
     "GENESIS_HASH",
]
