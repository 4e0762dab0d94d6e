"""SettlementRepository — the only code that writes profile balances or job payment state.

Locking protocol for a settlement (all inside the caller's transaction):
  1. job row             SELECT ... FOR UPDATE OF j
  2. profile rows        SELECT ... ORDER BY id FOR UPDATE  (ascending id, no deadlock cycles)
  3. guarded mutations   UPDATE ... WHERE <guard> RETURNING

A guarded UPDATE returning 0 rows means the guard was violated.

Transaction ownership: the CALLER (SettlementService) commits or rolls back.
"""

from collections.abc import Collection
from datetime import datetime

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.errors import InsufficientBalanceError
from src.mp_contract.domain.models import JobWithContract
from src.mp_contract.infrastructure.persistence import (
    JOB_WITH_CONTRACT_SELECT,
    row_to_job_with_contract,
)

# ---------------------------------------------------------------------------
# SQL: locks
# ---------------------------------------------------------------------------

_LOCK_JOB_WITH_CONTRACT_SQL = text(JOB_WITH_CONTRACT_SELECT + "    FOR UPDATE OF j\n")

_LOCK_PROFILES_SQL = text("""
    SELECT id, balance
    FROM profiles
    WHERE id IN :profile_ids
    ORDER BY id
    FOR UPDATE
""").bindparams(bindparam("profile_ids", expanding=True))

# ---------------------------------------------------------------------------
# SQL: mutations
# ---------------------------------------------------------------------------

_DEBIT_SQL = text("""
    UPDATE profiles
    SET balance = balance - :amount,
        updated_at = NOW()
    WHERE id = :profile_id AND balance >= :amount
    RETURNING balance
""")

_CREDIT_SQL = text("""
    UPDATE profiles
    SET balance = balance + :amount,
        updated_at = NOW()
    WHERE id = :profile_id
    RETURNING balance
""")

_MARK_JOB_PAID_SQL = text("""
    UPDATE jobs
    SET paid = TRUE,
        payment_date = :paid_at,
        updated_at = NOW()
    WHERE id = :job_id AND paid = FALSE
    RETURNING id
""")


class SettlementRepository:
    """Concrete repository — row locks plus guarded single-statement updates."""

    async def lock_job_with_contract(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None:
        result = await db.execute(_LOCK_JOB_WITH_CONTRACT_SQL, {"job_id": job_id})
        row = result.fetchone()
        return row_to_job_with_contract(row) if row else None

    async def lock_profile_balances(
        self, db: AsyncSession, profile_ids: Collection[int]
    ) -> dict[int, int]:
        """Lock profile rows in ascending id order; returns {id: balance} for rows that exist."""
        ids = sorted(set(profile_ids))
        if not ids:
            return {}
        result = await db.execute(_LOCK_PROFILES_SQL, {"profile_ids": ids})
        return {row.id: row.balance for row in result.fetchall()}

    async def debit(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int:
        result = await db.execute(_DEBIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        if row is None:
            raise InsufficientBalanceError()
        return row.balance

    async def credit(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None:
        """Returns the new balance, or None when the profile row does not exist."""
        result = await db.execute(_CREDIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        return row.balance if row else None

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> bool:
        result = await db.execute(_MARK_JOB_PAID_SQL, {"job_id": job_id, "paid_at": paid_at})
        return result.fetchone() is not None
