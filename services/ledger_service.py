# services/ledger_service.py
"""
Payment Ledger Service - append-only audit trail for payment transitions.

When a payment changes status (PENDING -> PAID):
1. Compute SHA-256 hash from payment_id + unit_id + amount + actor_id + timestamp
2. Store record with reference to previous record's hash (chain)
3. Ledger records are append-only; no update/delete

Verification: recompute hash and compare with stored hash; optionally verify chain.
"""
import hashlib
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session
from sqlalchemy import desc

from models import PaymentLedger, Payment


# Genesis block: no previous record
GENESIS_HASH = "0"


def _normalize_timestamp(ts: datetime) -> str:
     """Normalize timestamp to ISO format for deterministic hashing."""
     return ts.replace(microsecond=0).isoformat()


def _utcnow() -> datetime:
     # Naive UTC, second precision, so the value survives a round-trip through DATETIME columns
     return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


def compute_transaction_hash(
     payment_id: int,
     unit_id: int,
     amount: int,
     actor_id: int,
     timestamp: datetime
) -> str:
     """
     Compute SHA-256 hash for a ledger record.

     Input string: payment_id|unit_id|amount|actor_id|timestamp (canonical format).
     Returns 64-char hex string.
     """
     payload = "|".join([
          str(payment_id),
          str(unit_id),
          str(int(amount)),
          str(actor_id),
          _normalize_timestamp(timestamp)
     ])
     return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def get_previous_hash(db: Session) -> str:
     """Get the transaction_hash of the most recent ledger entry, or GENESIS_HASH if empty."""
     last = db.query(PaymentLedger).order_by(desc(PaymentLedger.id)).limit(1).first()
     if last is None:
          return GENESIS_HASH
     return last.transaction_hash


def append_ledger_entry(
     db: Session,
     payment: Payment,
     actor_id: int,
     from_status: str,
     to_status: str,
     timestamp: Optional[datetime] = None
) -> PaymentLedger:
     """
     Append an immutable transition record to the ledger.

     - Computes transaction_hash from the payment, the acting user and the timestamp
     - Sets previous_hash to the last record's transaction_hash (or "0")
     - Does NOT update or delete existing records
     """
     if timestamp is None:
          timestamp = _utcnow()

     transaction_hash = compute_transaction_hash(
          payment.id, payment.unit_id, payment.amount, actor_id, timestamp
     )
     previous_hash = get_previous_hash(db)

     entry = PaymentLedger(
          payment_id=payment.id,
          actor_id=actor_id,
          from_status=from_status,
          to_status=to_status,
          transaction_hash=transaction_hash,
          previous_hash=previous_hash,
          timestamp=timestamp
     )
     db.add(entry)
     db.flush()
     return entry


def _recompute(db: Session, entry: PaymentLedger) -> Optional[str]:
     payment = db.query(Payment).filter(Payment.id == entry.payment_id).first()
     if payment is None:
          return None
     return compute_transaction_hash(
          entry.payment_id,
          payment.unit_id,
          payment.amount,
          entry.actor_id,
          entry.timestamp
     )


def verify_ledger_entry(db: Session, ledger_id: int) -> Tuple[bool, str]:
     """
     Verify a ledger entry by recomputing the hash and comparing.

     Returns:
          (success: bool, message: str)
          - (True, "Verification passed") if hash matches
          - (False, reason) if hash mismatch, missing record, or chain broken
     """
     entry = db.query(PaymentLedger).filter(PaymentLedger.id == ledger_id).first()
     if entry is None:
          return False, "Ledger entry not found"

     computed = _recompute(db, entry)
     if computed is None:
          return False, "Payment not found"
     if computed != entry.transaction_hash:
          return False, f"Hash mismatch: stored={entry.transaction_hash[:16]}..., computed={computed[:16]}..."

     if entry.previous_hash != GENESIS_HASH:
          prev_entry = (
               db.query(PaymentLedger)
               .filter(PaymentLedger.id < entry.id)
               .order_by(desc(PaymentLedger.id))
               .limit(1)
               .first()
          )
          if prev_entry is None:
               return False, "Previous chain link not found"
          if prev_entry.transaction_hash != entry.previous_hash:
               return False, "Chain broken: previous_hash does not match previous record"

     return True, "Verification passed"


def verify_full_chain(db: Session) -> Tuple[bool, str, int]:
     """
     Verify the entire ledger chain from first to last entry.

     Returns:
          (all_valid: bool, message: str, entries_checked: int)
     """
     entries = db.query(PaymentLedger).order_by(PaymentLedger.id).all()
     if not entries:
          return True, "Chain is empty (no entries)", 0

     prev_hash = GENESIS_HASH
     checked = 0

     for entry in entries:
          if entry.previous_hash != prev_hash:
               return False, f"Chain broken at id={entry.id}: previous_hash mismatch", checked
          computed = _recompute(db, entry)
          if computed is None:
               return False, f"Payment not found for ledger id={entry.id}", checked
          if computed != entry.transaction_hash:
               return False, f"Hash mismatch at ledger id={entry.id}", checked
          prev_hash = entry.transaction_hash
          checked += 1

     return True, "Full chain verification passed", checked
