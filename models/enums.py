"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("deposit", not "TransactionType.DEPOSIT")
- They work as FastAPI query parameters and request fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class TransactionType(str, enum.Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    TRANSFER = "transfer"    # target_id is only meaningful for this one


class WeightingStrategy(str, enum.Enum):
    UNIFORM = "uniform"                # equal 0.25 on every factor
    BALANCED = "balanced"              # fee > wait > complexity > tier
    FEE_FIRST = "fee_first"            # revenue only
    OLDEST_FIRST = "oldest_first"      # wait time only (pure aging, FIFO-like)
    SIMPLEST_FIRST = "simplest_first"  # cheapest work first
    TIER_FIRST = "tier_first"          # VIP accounts first
