"""PaymentStatsRepository — grouped sums over paid jobs.

Both queries share one window filter: paid = TRUE AND start < created_at < end
(exclusive on both ends). Built with SQLAlchemy Core expressions over the ORM
tables so the two groupings differ only in the grouping column and ordering.
"""

from datetime import datetime

from sqlalchemy import ColumnElement, Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_admin.domain.models import ClientPayment, ContractorPayment
from src.mp_contract.infrastructure.db_models import ContractORM, JobORM

_TOTAL_PAID = func.sum(JobORM.price).label("total_paid")


def _paid_in_window(start: datetime, end: datetime) -> ColumnElement[bool]:
    return and_(
        JobORM.paid.is_(True),
        JobORM.created_at > start,
        JobORM.created_at < end,
    )


def _grouped_by(column: ColumnElement[int], start: datetime, end: datetime) -> Select:
    return (
        select(column.label("party_id"), _TOTAL_PAID)
        .select_from(ContractORM)
        .join(JobORM, JobORM.contract_id == ContractORM.id)
        .where(_paid_in_window(start, end), column.is_not(None))
        .group_by(column)
    )


class PaymentStatsRepository:
    """Concrete repository — read-only aggregate queries."""

    async def payments_by_contractor(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ContractorPayment]:
        stmt = _grouped_by(ContractORM.contractor_id, start, end).order_by(
            ContractORM.contractor_id
        )
        result = await db.execute(stmt)
        return [
            ContractorPayment(contractor_id=row.party_id, total_paid=int(row.total_paid))
            for row in result.fetchall()
        ]

    async def payments_by_client(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ClientPayment]:
        stmt = _grouped_by(ContractORM.client_id, start, end).order_by(
            _TOTAL_PAID.desc(), ContractORM.client_id
        )
        result = await db.execute(stmt)
        return [
            ClientPayment(client_id=row.party_id, total_paid=int(row.total_paid))
            for row in result.fetchall()
        ]
