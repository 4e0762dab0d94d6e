"""Domain models for mp_settlement — results of balance-mutating operations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PaymentReceipt:
    job_id: int
    client_id: int
    contractor_id: int
    amount: int                  # cents
    client_balance_after: int    # cents
    contractor_balance_after: int
    paid_at: datetime


@dataclass(frozen=True)
class DepositReceipt:
    profile_id: int
    amount: int                  # cents
    balance_after: int           # cents
    unpaid_total: int            # cents, outstanding at deposit time
