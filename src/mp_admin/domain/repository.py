"""Repository Protocol — dependency inversion for testability."""

from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_admin.domain.models import ClientPayment, ContractorPayment


class PaymentStatsRepositoryProtocol(Protocol):
    async def payments_by_contractor(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ContractorPayment]: ...

    async def payments_by_client(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ClientPayment]: ...
