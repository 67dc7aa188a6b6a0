"""
Pydantic schemas for the payments API and its audit ledger.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, ConfigDict, StrictInt

from models.payment import PaymentStatus
from .base import CamelModel


class PaymentCreate(CamelModel):
     """Request body for POST /api/payments."""
     unit_id: StrictInt = Field(..., gt=0, description="Unit being billed")
     amount: StrictInt = Field(..., gt=0, description="Amount in whole currency units")
     period: str = Field(..., min_length=1, max_length=50, description="Billing period label, e.g. 1402-01")
     status: PaymentStatus = Field(default=PaymentStatus.PENDING, description="Initial status")
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unitId": 1,
                    "amount": 500000,
                    "period": "1402-01",
                    "status": "pending",
                    "description": "Monthly charge",
               }
          }
     )


class PaymentResponse(CamelModel):
     id: int
     unit_id: int
     amount: int
     period: str
     status: PaymentStatus
     description: Optional[str] = None
     created_at: Optional[datetime] = None


class LedgerEntryResponse(CamelModel):
     """One immutable status-transition record."""
     id: int
     payment_id: int
     actor_id: int
     from_status: str
     to_status: str
     transaction_hash: str = Field(..., description="Ledger hash for client verification")
     previous_hash: str
     timestamp: datetime


class PaymentTransitionResponse(CamelModel):
     """Response for POST /api/payments/{id}/pay."""
     payment: PaymentResponse
     ledger_entry: LedgerEntryResponse


class PaymentHistoryResponse(CamelModel):
     payment_id: int
     entries: List[LedgerEntryResponse]
