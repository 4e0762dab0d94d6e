"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from collections.abc import Collection
from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_contract.domain.models import JobWithContract


class SettlementRepositoryProtocol(Protocol):
    async def lock_job_with_contract(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None: ...

    async def lock_profile_balances(
        self, db: AsyncSession, profile_ids: Collection[int]
    ) -> dict[int, int]: ...

    async def debit(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int: ...

    async def credit(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None: ...

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> bool: ...
