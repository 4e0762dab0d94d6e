"""mp_settlement REST endpoints — the write paths.

POST /jobs/{job_id}/pay            — client pays the contractor for one job
POST /balances/deposit/{user_id}   — client tops up their own balance
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.database import MAX_ROW_ID, get_db_session
from src.mp_common.response import MessageResponse, message_response
from src.mp_gateway.auth.dependencies import get_current_profile
from src.mp_profile.domain.models import Profile
from src.mp_settlement.application.schemas import DepositRequest
from src.mp_settlement.application.service import SettlementService

router = APIRouter(tags=["settlement"])

_service = SettlementService()


@router.post("/jobs/{job_id}/pay")
async def pay_for_job(
    job_id: Annotated[int, Path(le=MAX_ROW_ID)],
    profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessageResponse:
    await _service.pay_for_job(db, profile, job_id)
    return message_response("Payment successful")


@router.post("/balances/deposit/{user_id}")
async def deposit(
    user_id: Annotated[int, Path(le=MAX_ROW_ID)],
    body: DepositRequest,
    profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> MessageResponse:
    await _service.deposit(db, profile, user_id, body.amount_to_deposit)
    return message_response("Deposit successful")
