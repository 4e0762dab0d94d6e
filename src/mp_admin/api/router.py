"""Admin REST API — payment rankings over a time window.

GET /admin/best-profession?start=&end=          — top-earning contractor profession
GET /admin/best-clients?start=&end=&limit=      — clients who paid the most
"""
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_admin.application.schemas import (
    BestClientItem,
    BestClientsResponse,
    BestProfessionResponse,
)
from src.mp_admin.application.service import PaymentStatsService
from src.mp_common.database import get_db_session
from src.mp_gateway.auth.dependencies import get_current_profile
from src.mp_gateway.validation.params import DateWindow, date_window
from src.mp_profile.domain.models import Profile

router = APIRouter(prefix="/admin", tags=["admin"])
_service = PaymentStatsService()


@router.get("/best-profession")
async def best_profession(
    profile: Annotated[Profile, Depends(get_current_profile)],
    window: Annotated[DateWindow, Depends(date_window)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> BestProfessionResponse:
    profession = await _service.best_profession(db, window.start, window.end)
    return BestProfessionResponse(result=profession)


@router.get("/best-clients")
async def best_clients(
    profile: Annotated[Profile, Depends(get_current_profile)],
    window: Annotated[DateWindow, Depends(date_window)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    limit: int | None = Query(None, ge=1, description="Max clients returned (default 2)"),
) -> dict[str, Any]:
    clients = await _service.best_clients(db, window.start, window.end, limit)
    data = BestClientsResponse(result=[BestClientItem.from_domain(c) for c in clients])
    return data.model_dump(by_alias=True)
