"""Pydantic response schemas for mp_admin API."""

from pydantic import BaseModel, Field

from src.mp_admin.domain.models import BestClient


class BestProfessionResponse(BaseModel):
    result: str


class BestClientItem(BaseModel):
    client_id: int = Field(serialization_alias="ClientId")
    total_paid: int = Field(serialization_alias="totalPaid")
    full_name: str = Field(serialization_alias="fullName")

    @classmethod
    def from_domain(cls, client: BestClient) -> "BestClientItem":
        return cls(
            client_id=client.client_id,
            total_paid=client.total_paid,
            full_name=client.full_name,
        )


class BestClientsResponse(BaseModel):
    result: list[BestClientItem]
