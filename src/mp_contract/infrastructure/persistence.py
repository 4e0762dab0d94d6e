"""ContractRepository — concrete implementation of ContractRepositoryProtocol.

All queries use raw text() SQL and are read-only. IN-lists use expanding
bind parameters so the statement text stays constant.
"""

from collections.abc import Collection

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.enums import ContractRole, ContractStatus
from src.mp_contract.domain.models import Contract, Job, JobWithContract

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_CONTRACT_COLUMNS = "id, terms, status, client_id, contractor_id, created_at, updated_at"

_GET_CONTRACT_SQL = text(f"""
    SELECT {_CONTRACT_COLUMNS}
    FROM contracts
    WHERE id = :contract_id
""")

# One statement per role: the scoping column is never interpolated from input.
_LIST_CONTRACTS_SQL = {
    role: text(f"""
        SELECT {_CONTRACT_COLUMNS}
        FROM contracts
        WHERE {role.value} = :profile_id
          AND status IN :statuses
        ORDER BY id
    """).bindparams(bindparam("statuses", expanding=True))
    for role in ContractRole
}

_LIST_UNPAID_JOBS_SQL = text("""
    SELECT id, description, price, paid, payment_date, contract_id, created_at, updated_at
    FROM jobs
    WHERE paid = FALSE
      AND contract_id IN :contract_ids
    ORDER BY id
""").bindparams(bindparam("contract_ids", expanding=True))

JOB_WITH_CONTRACT_SELECT = """
    SELECT j.id, j.description, j.price, j.paid, j.payment_date, j.contract_id,
           j.created_at, j.updated_at,
           c.id            AS c_id,
           c.terms         AS c_terms,
           c.status        AS c_status,
           c.client_id     AS c_client_id,
           c.contractor_id AS c_contractor_id,
           c.created_at    AS c_created_at,
           c.updated_at    AS c_updated_at
    FROM jobs j
    LEFT JOIN contracts c ON c.id = j.contract_id
    WHERE j.id = :job_id
"""

_GET_JOB_WITH_CONTRACT_SQL = text(JOB_WITH_CONTRACT_SELECT)

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_contract(row: object) -> Contract:
    return Contract(
        id=row.id,  # type: ignore[attr-defined]
        terms=row.terms,  # type: ignore[attr-defined]
        status=ContractStatus(row.status),  # type: ignore[attr-defined]
        client_id=row.client_id,  # type: ignore[attr-defined]
        contractor_id=row.contractor_id,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


def _row_to_job(row: object) -> Job:
    return Job(
        id=row.id,  # type: ignore[attr-defined]
        description=row.description,  # type: ignore[attr-defined]
        price=row.price,  # type: ignore[attr-defined]
        paid=row.paid,  # type: ignore[attr-defined]
        contract_id=row.contract_id,  # type: ignore[attr-defined]
        payment_date=row.payment_date,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


def row_to_job_with_contract(row: object) -> JobWithContract:
    """Map a JOB_WITH_CONTRACT_SELECT row; c_* columns are NULL when the contract is missing."""
    contract = None
    if row.c_id is not None:  # type: ignore[attr-defined]
        contract = Contract(
            id=row.c_id,  # type: ignore[attr-defined]
            terms=row.c_terms,  # type: ignore[attr-defined]
            status=ContractStatus(row.c_status),  # type: ignore[attr-defined]
            client_id=row.c_client_id,  # type: ignore[attr-defined]
            contractor_id=row.c_contractor_id,  # type: ignore[attr-defined]
            created_at=row.c_created_at,  # type: ignore[attr-defined]
            updated_at=row.c_updated_at,  # type: ignore[attr-defined]
        )
    return JobWithContract(job=_row_to_job(row), contract=contract)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class ContractRepository:
    """Concrete repository — all operations are read-only SQL queries."""

    async def get_contract_by_id(
        self, db: AsyncSession, contract_id: int
    ) -> Contract | None:
        result = await db.execute(_GET_CONTRACT_SQL, {"contract_id": contract_id})
        row = result.fetchone()
        return _row_to_contract(row) if row else None

    async def list_contracts_for_party(
        self,
        db: AsyncSession,
        profile_id: int,
        role: ContractRole,
        statuses: Collection[ContractStatus],
    ) -> list[Contract]:
        result = await db.execute(
            _LIST_CONTRACTS_SQL[role],
            {"profile_id": profile_id, "statuses": [s.value for s in statuses]},
        )
        return [_row_to_contract(row) for row in result.fetchall()]

    async def list_unpaid_jobs(
        self, db: AsyncSession, contract_ids: Collection[int]
    ) -> list[Job]:
        result = await db.execute(
            _LIST_UNPAID_JOBS_SQL, {"contract_ids": list(contract_ids)}
        )
        return [_row_to_job(row) for row in result.fetchall()]

    async def get_job_with_contract(
        self, db: AsyncSession, job_id: int
    ) -> JobWithContract | None:
        result = await db.execute(_GET_JOB_WITH_CONTRACT_SQL, {"job_id": job_id})
        row = result.fetchone()
        return row_to_job_with_contract(row) if row else None
