"""
Pydantic schemas for the /transactions endpoints.

These define the HTTP API contract, not the scheduler's internal record:
- TransactionCreate: what the client sends to enqueue a transaction
- TransactionResponse: a transaction plus its live priority score

FastAPI validates incoming data against these automatically.
If someone sends fee=-1, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import TransactionType
from scheduler.base import Transaction


class TransactionCreate(BaseModel):
    """Request body for POST /transactions/."""

    account_id: int
    target_id: int = Field(default=0, description="Destination account (transfers only)")
    amount: float = Field(default=0.0, allow_inf_nan=False, examples=[250.0])
    type: TransactionType = TransactionType.DEPOSIT
    fee: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Higher fee = higher priority")
    arrival_time: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Unix epoch seconds; defaults to the time of submission",
    )
    complexity: int = Field(default=0, ge=0, description="Lower = simpler = higher priority")
    account_tier: int = Field(default=0, ge=0, le=5, description="Higher tier = VIP")

    def to_transaction(self, now: float) -> Transaction:
        return Transaction(
            account_id=self.account_id,
            target_id=self.target_id,
            amount=self.amount,
            type=self.type,
            fee=self.fee,
            arrival_time=self.arrival_time if self.arrival_time is not None else now,
            complexity=self.complexity,
            account_tier=self.account_tier,
        )


class TransactionResponse(BaseModel):
    """A transaction as returned by the API, with its score at response time."""

    account_id: int
    target_id: int
    amount: float
    type: TransactionType
    fee: float
    arrival_time: float
    complexity: int
    account_tier: int
    priority: float

    @classmethod
    def from_transaction(cls, txn: Transaction, priority: float) -> "TransactionResponse":
        return cls(
            account_id=txn.account_id,
            target_id=txn.target_id,
            amount=txn.amount,
            type=txn.type,
            fee=txn.fee,
            arrival_time=txn.arrival_time,
            complexity=txn.complexity,
            account_tier=txn.account_tier,
            priority=priority,
        )
