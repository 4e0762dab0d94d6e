"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from collections.abc import Collection
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.enums import ContractRole, ContractStatus
from src.mp_contract.domain.models import Contract, Job, JobWithContract


class ContractRepositoryProtocol(Protocol):
    async def get_contract_by_id(
        self, db: AsyncSession, contract_id: int
    ) -> Contract | None: ...

    async def list_contracts_for_party(
        self,
        db: AsyncSession,
        profile_id: int,
        role: ContractRole,
        statuses: Collection[ContractStatus],
    ) -> list[Contract]: ...

    async def list_unpaid_jobs(
        self, db: AsyncSession, contract_ids: Collection[int]
    ) -> list[Job]: ...

    async def get_job_with_contract(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None: ...
