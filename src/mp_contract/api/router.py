"""mp_contract REST endpoints — all require a resolved caller profile.

GET /contracts/{contract_id}  — one contract, only if the caller is a party to it
GET /contracts/               — caller's non-terminated contracts
GET /jobs/unpaid              — unpaid jobs on the caller's active contracts
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.database import MAX_ROW_ID, get_db_session
from src.mp_contract.application.schemas import (
    ContractItem,
    ContractListResponse,
    JobItem,
    UnpaidJobsResponse,
)
from src.mp_contract.application.service import ContractQueryService
from src.mp_gateway.auth.dependencies import get_current_profile
from src.mp_profile.domain.models import Profile

router = APIRouter(tags=["contracts"])

_service = ContractQueryService()


@router.get("/contracts/{contract_id}")
async def get_contract(
    contract_id: Annotated[int, Path(le=MAX_ROW_ID)],
    profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> dict[str, Any]:
    contract = await _service.contract_for_profile(db, profile, contract_id)
    return ContractItem.from_domain(contract).model_dump(mode="json", by_alias=True)


@router.get("/contracts/")
async def list_contracts(
    profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> dict[str, Any]:
    contracts = await _service.non_terminated_contracts_for_profile(db, profile)
    data = ContractListResponse(contracts=[ContractItem.from_domain(c) for c in contracts])
    return data.model_dump(mode="json", by_alias=True)


@router.get("/jobs/unpaid")
async def list_unpaid_jobs(
    profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> dict[str, Any]:
    jobs = await _service.unpaid_jobs_for_profile(db, profile)
    data = UnpaidJobsResponse(unpaid_jobs=[JobItem.from_domain(j) for j in jobs])
    return data.model_dump(mode="json", by_alias=True)
