# models/payment.py
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, enum_values


class PaymentStatus(str, enum.Enum):
     """Enumeration for payment status."""
     PENDING = "pending"
     PAID = "paid"


class Payment(Base):
     """
     Payment model - a billing record tied to a unit.

     Amount, period and description are immutable after creation. The only
     lifecycle change is PENDING -> PAID, which always goes through
     services.payment_service.mark_payment_paid so that a ledger entry is
     appended for it.
     """
     __tablename__ = "payments"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)

     # Billing details
     amount = Column(Integer, nullable=False)  # whole currency units
     period = Column(String(50), nullable=False)  # free-form label, e.g. "1402-01"
     status = Column(
          Enum(PaymentStatus, name="payment_status", create_constraint=True, values_callable=enum_values),
          default=PaymentStatus.PENDING,
          nullable=False,
          index=True,
     )
     description = Column(Text, nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     unit = relationship("Unit", back_populates="payments")
     ledger_entries = relationship(
          "PaymentLedger",
          back_populates="payment",
          order_by="PaymentLedger.id",
     )

     def __repr__(self):
          return f"<Payment(id={self.id}, unit_id={self.unit_id}, amount={self.amount}, status='{self.status.value}')>"
