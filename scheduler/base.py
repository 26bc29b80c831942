"""
The Transaction record — the unit of work the scheduler ranks.

A Transaction is frozen: once it's created, none of its fields change.
Its *priority* still changes over time, because the wait-time factor is
computed from arrival_time against the current clock every time it's asked
for (see scheduler/priority.py). Nothing about the score is cached here.

Four of the eight fields drive the ranking:
- fee           → higher fee, higher priority
- arrival_time  → older transactions age upward
- complexity    → simpler transactions score higher (1 / (complexity + 1))
- account_tier  → VIP tiers score higher

The rest (account_id, target_id, amount, type) are carried along for the
caller and the reports; the scheduler never looks at them.
"""

import math
from dataclasses import dataclass

from models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    account_id: int
    target_id: int               # destination account, transfers only
    amount: float
    type: TransactionType
    fee: float                   # >= 0
    arrival_time: float          # Unix epoch seconds
    complexity: int              # >= 0
    account_tier: int            # 0-5 in practice

    def __post_init__(self):
        if not math.isfinite(self.fee) or self.fee < 0:
            raise ValueError(f"fee must be a finite number >= 0, got {self.fee}")
        if not math.isfinite(self.arrival_time):
            raise ValueError(f"arrival_time must be finite, got {self.arrival_time}")
        if not math.isfinite(self.amount):
            raise ValueError(f"amount must be finite, got {self.amount}")
        if self.complexity < 0:
            raise ValueError(f"complexity must be >= 0, got {self.complexity}")
