"""ContractQueryService — read-only lookups scoped to a caller profile.

A profile is scoped to contracts through its role column (``client_id`` for
clients, ``contractor_id`` for contractors), derived from ProfileType.
Absent rows come back as None/[]; only ownership violations raise.
"""

from collections.abc import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.enums import ACTIVE_STATUSES, NON_TERMINATED_STATUSES
from src.mp_common.errors import ContractNotFoundError, NotContractPartyError
from src.mp_contract.domain.models import Contract, Job, JobWithContract
from src.mp_contract.domain.repository import ContractRepositoryProtocol
from src.mp_contract.infrastructure.persistence import ContractRepository
from src.mp_profile.domain.models import Profile


class ContractQueryService:
    def __init__(self, repo: ContractRepositoryProtocol | None = None) -> None:
        self._repo: ContractRepositoryProtocol = repo or ContractRepository()

    async def active_contracts_for_profile(
        self, db: AsyncSession, profile: Profile
    ) -> list[Contract]:
        return await self._repo.list_contracts_for_party(
            db, profile.id, profile.contract_role, ACTIVE_STATUSES
        )

    async def non_terminated_contracts_for_profile(
        self, db: AsyncSession, profile: Profile
    ) -> list[Contract]:
        return await self._repo.list_contracts_for_party(
            db, profile.id, profile.contract_role, NON_TERMINATED_STATUSES
        )

    async def unpaid_jobs_for_contracts(
        self, db: AsyncSession, contract_ids: Collection[int]
    ) -> list[Job]:
        if not contract_ids:
            return []
        return await self._repo.list_unpaid_jobs(db, contract_ids)

    async def unpaid_jobs_for_profile(
        self, db: AsyncSession, profile: Profile
    ) -> list[Job]:
        """Unpaid jobs across the profile's active contracts."""
        contracts = await self.active_contracts_for_profile(db, profile)
        return await self.unpaid_jobs_for_contracts(db, {c.id for c in contracts})

    async def job_with_contract(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None:
        return await self._repo.get_job_with_contract(db, job_id)

    async def contract_for_profile(
        self, db: AsyncSession, profile: Profile, contract_id: int
    ) -> Contract:
        contract = await self._repo.get_contract_by_id(db, contract_id)
        if contract is None:
            raise ContractNotFoundError()
        if not contract.belongs_to(profile):
            raise NotContractPartyError()
        return contract
