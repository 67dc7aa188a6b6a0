# models/payment_ledger.py
"""
PaymentLedger model - append-only audit trail of payment status transitions.

Each record stores a SHA-256 hash of
(payment_id + unit_id + amount + actor_id + timestamp) and a reference to the
previous record's hash, forming a chain. Records are never updated or deleted.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class PaymentLedger(Base):
     """
     Immutable ledger entry. Created once, when a payment is marked PAID.
     Chain is formed via previous_hash -> previous record's transaction_hash.
     """
     __tablename__ = "payment_ledger"

     id = Column(Integer, primary_key=True, autoincrement=True)
     payment_id = Column(
          Integer,
          ForeignKey("payments.id", ondelete="RESTRICT"),
          nullable=False,
          unique=True,  # one PENDING -> PAID transition per payment
          index=True,
     )
     actor_id = Column(Integer, ForeignKey("users.id"), nullable=False)
     from_status = Column(String(20), nullable=False)
     to_status = Column(String(20), nullable=False)
     transaction_hash = Column(String(64), nullable=False, unique=True, index=True)  # SHA-256 hex length
     previous_hash = Column(String(64), nullable=False, index=True)  # "0" for genesis
     timestamp = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     payment = relationship("Payment", back_populates="ledger_entries")

     def __repr__(self):
          return f"<PaymentLedger(id={self.id}, payment_id={self.payment_id}, hash={self.transaction_hash[:16]}...)>"
