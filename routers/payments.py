# routers/payments.py
"""
Payment API routes.

Payments are created PENDING (or PAID) by a building admin. Amount, period and
description never change afterwards; the only lifecycle change is the explicit
POST /api/payments/{id}/pay transition, which appends a hash-chained ledger
record for audit.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from models import Payment, PaymentLedger, Unit, UserRole
from schemas.auth import CurrentUser
from schemas.payment import (
     PaymentCreate,
     PaymentResponse,
     PaymentTransitionResponse,
     PaymentHistoryResponse,
     LedgerEntryResponse,
)
from services.payment_service import PaymentService, PaymentAlreadyPaidError
from services.user_service import UserService
from utils.auth import require_roles, verify_token

router = APIRouter(prefix="/api/payments", tags=["payments"])


def _get_payment_or_404(db: Session, payment_id: int) -> Payment:
     payment = db.query(Payment).filter(Payment.id == payment_id).first()
     if not payment:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Payment with ID {payment_id} not found",
          )
     return payment


@router.get("", response_model=List[PaymentResponse], summary="List payments")
def list_payments(
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(verify_token),
):
     """
     List payments.

     **Role-based access:**
     - **Resident**: only payments of their own unit.
     - **Admins**: all payments.
     """
     query = db.query(Payment)
     if current_user.role == UserRole.RESIDENT:
          query = query.filter(Payment.unit_id == UserService.resident_unit_id(db, current_user))
     return query.order_by(Payment.id).all()


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a payment",
     dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))],
)
def create_payment(body: PaymentCreate, db: Session = Depends(get_session)):
     unit = db.query(Unit).filter(Unit.id == body.unit_id).first()
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Unit with ID {body.unit_id} not found",
          )

     payment = Payment(**body.model_dump())
     db.add(payment)
     db.commit()
     db.refresh(payment)
     return payment


@router.post(
     "/{payment_id}/pay",
     response_model=PaymentTransitionResponse,
     summary="Mark a payment as paid",
)
def pay_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     current_user: CurrentUser = Depends(require_roles(UserRole.BUILDING_ADMIN)),
):
     """
     Transition a payment from PENDING to PAID.

     1. Validates the payment exists.
     2. Rejects payments that are already PAID (409).
     3. Marks the payment PAID and appends an immutable ledger record.
     """
     payment = _get_payment_or_404(db, payment_id)

     try:
          entry = PaymentService.mark_payment_paid(db, payment, actor_id=current_user.id)
     except PaymentAlreadyPaidError as exc:
          raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

     db.commit()
     db.refresh(payment)

     return PaymentTransitionResponse(
          payment=PaymentResponse.model_validate(payment),
          ledger_entry=LedgerEntryResponse.model_validate(entry),
     )


@router.get(
     "/{payment_id}/history",
     response_model=PaymentHistoryResponse,
     summary="Audit trail of a payment",
     dependencies=[Depends(require_roles(UserRole.BUILDING_ADMIN))],
)
def payment_history(payment_id: int, db: Session = Depends(get_session)):
     _get_payment_or_404(db, payment_id)
     entries = (
          db.query(PaymentLedger)
          .filter(PaymentLedger.payment_id == payment_id)
          .order_by(PaymentLedger.id)
          .all()
     )
     return PaymentHistoryResponse(
          payment_id=payment_id,
          entries=[LedgerEntryResponse.model_validate(e) for e in entries],
     )
