"""Pydantic request schemas for mp_settlement API."""

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    amount_to_deposit: int = Field(..., gt=0, description="Amount to deposit in cents")
