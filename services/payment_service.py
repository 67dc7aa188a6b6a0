# services/payment_service.py
"""
Payment Service - business rules for payments kept out of the API layer.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Payment, PaymentLedger
from models.payment import PaymentStatus
from services.ledger_service import append_ledger_entry

logger = logging.getLogger(__name__)


class PaymentAlreadyPaidError(Exception):
     """Raised when a PAID payment is asked to transition again."""


class PaymentService:
     """Service class for payment-related business logic."""

     @staticmethod
     def mark_payment_paid(db: Session, payment: Payment, actor_id: int) -> PaymentLedger:
          """
          Move a payment from PENDING to PAID and append the audit record.

          The status change is a conditional UPDATE that only matches a
          PENDING row, and the ledger holds at most one row per payment.

          Args:
               db: SQLAlchemy database session
               payment: Payment to transition
               actor_id: ID of the building admin performing the change

          Returns:
               The new PaymentLedger entry (flushed, not committed)

          Raises:
               PaymentAlreadyPaidError: If the payment is already PAID
          """
          claimed = (
               db.query(Payment)
               .filter(Payment.id == payment.id, Payment.status == PaymentStatus.PENDING)
               .update({Payment.status: PaymentStatus.PAID}, synchronize_session=False)
          )
          if not claimed:
               raise PaymentAlreadyPaidError(f"Payment {payment.id} is already paid")
          db.refresh(payment)

          try:
               entry = append_ledger_entry(
                    db,
                    payment=payment,
                    actor_id=actor_id,
                    from_status=PaymentStatus.PENDING.value,
                    to_status=PaymentStatus.PAID.value,
               )
          except IntegrityError as exc:
               db.rollback()
               raise PaymentAlreadyPaidError(f"Payment {payment.id} is already paid") from exc
          logger.info("Payment %s marked paid by user %s", payment.id, actor_id)
          return entry

     @staticmethod
     def calculate_unit_balance(db: Session, unit_id: int) -> dict:
          """
          Calculate the total debt of a unit.

          Args:
               db: SQLAlchemy database session
               unit_id: ID of the unit

          Returns:
               Dictionary with balance information; total_debt is the sum of
               all pending amounts for the unit.
          """
          payments = db.query(Payment).filter(Payment.unit_id == unit_id).all()

          pending = [p for p in payments if p.status == PaymentStatus.PENDING]
          paid = [p for p in payments if p.status == PaymentStatus.PAID]

          return {
               "unit_id": unit_id,
               "total_debt": sum(p.amount for p in pending),
               "pending_count": len(pending),
               "paid_amount": sum(p.amount for p in paid),
               "paid_count": len(paid),
          }
