"""PaymentStatsService — administrative payment rankings.

Runs against the whole ledger, independent of the caller's profile scope.
Profile enrichment (professions, client names) resolves ids with batched IN
queries: ids are chunked by LOOKUP_BATCH_SIZE and at most LOOKUP_CONCURRENCY
batches run at once, each on its own session (an AsyncSession does not allow
concurrent statements).
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from contextlib import AbstractAsyncContextManager
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.mp_admin.domain.models import BestClient, ClientPayment, ContractorPayment
from src.mp_admin.domain.repository import PaymentStatsRepositoryProtocol
from src.mp_admin.infrastructure.persistence import PaymentStatsRepository
from src.mp_common.concurrency import chunked, map_limit
from src.mp_common.database import async_session_factory
from src.mp_common.errors import InvalidParamError, MissingReferenceError, NoPaymentsInRangeError
from src.mp_profile.domain.models import Profile
from src.mp_profile.domain.repository import ProfileRepositoryProtocol
from src.mp_profile.infrastructure.persistence import ProfileRepository

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class PaymentStatsService:
    def __init__(
        self,
        repo: PaymentStatsRepositoryProtocol | None = None,
        profiles: ProfileRepositoryProtocol | None = None,
        session_factory: SessionFactory | None = None,
        batch_size: int | None = None,
        concurrency: int | None = None,
    ) -> None:
        self._repo: PaymentStatsRepositoryProtocol = repo or PaymentStatsRepository()
        self._profiles: ProfileRepositoryProtocol = profiles or ProfileRepository()
        self._session_factory: SessionFactory = session_factory or async_session_factory
        self._batch_size = batch_size or settings.LOOKUP_BATCH_SIZE
        self._concurrency = concurrency or settings.LOOKUP_CONCURRENCY

    # ------------------------------------------------------------------
    # Contractors / professions
    # ------------------------------------------------------------------

    async def group_payments_by_contractor(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ContractorPayment]:
        return await self._repo.payments_by_contractor(db, start, end)

    async def group_payments_by_profession(
        self, payments: Sequence[ContractorPayment] | None
    ) -> dict[str, int]:
        """Re-sum contractor totals by profession.

        Raises MissingReferenceError if a contractor id has no profile row.
        """
        if not payments:
            return {}

        profiles = await self._lookup_profiles(p.contractor_id for p in payments)
        totals: dict[str, int] = {}
        for payment in payments:
            profile = profiles.get(payment.contractor_id)
            if profile is None:
                raise MissingReferenceError("contractor profile", payment.contractor_id)
            totals[profile.profession] = totals.get(profile.profession, 0) + payment.total_paid
        return totals

    async def best_profession(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> str:
        """Highest-earning profession in the window; ties go to the alphabetically first name."""
        payments = await self.group_payments_by_contractor(db, start, end)
        if not payments:
            raise NoPaymentsInRangeError()

        totals = await self.group_payments_by_profession(payments)
        profession, _ = min(totals.items(), key=lambda item: (-item[1], item[0]))
        return profession

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    async def group_payments_by_client(
        self, db: AsyncSession, start: datetime, end: datetime
    ) -> list[ClientPayment]:
        """Client totals, highest first (ties by client id)."""
        return await self._repo.payments_by_client(db, start, end)

    async def best_clients(
        self, db: AsyncSession, start: datetime, end: datetime, limit: int | None = None
    ) -> list[BestClient]:
        if limit is None:
            limit = settings.BEST_CLIENTS_DEFAULT_LIMIT
        if limit < 1:
            raise InvalidParamError("Limit should be a positive integer")

        payments = await self.group_payments_by_client(db, start, end)
        if not payments:
            raise NoPaymentsInRangeError()

        # Already sorted by total desc; only the kept rows need a name.
        top = payments[:limit]
        profiles = await self._lookup_profiles(p.client_id for p in top)
        result: list[BestClient] = []
        for payment in top:
            profile = profiles.get(payment.client_id)
            if profile is None:
                raise MissingReferenceError("client profile", payment.client_id)
            result.append(
                BestClient(
                    client_id=payment.client_id,
                    total_paid=payment.total_paid,
                    full_name=profile.full_name,
                )
            )
        return result

    # ------------------------------------------------------------------
    # Batched profile lookup
    # ------------------------------------------------------------------

    async def _lookup_profiles(self, profile_ids: Iterable[int]) -> dict[int, Profile]:
        unique_ids = list(dict.fromkeys(profile_ids))
        batches = chunked(unique_ids, self._batch_size)
        logger.debug(
            "resolving %d profiles in %d batches (concurrency=%d)",
            len(unique_ids),
            len(batches),
            self._concurrency,
        )

        async def _fetch(batch: list[int]) -> dict[int, Profile]:
            async with self._session_factory() as session:
                return await self._profiles.get_profiles_by_ids(session, batch)

        merged: dict[int, Profile] = {}
        for found in await map_limit(batches, self._concurrency, _fetch):
            merged.update(found)
        return merged
