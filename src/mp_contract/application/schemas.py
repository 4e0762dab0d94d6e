"""Pydantic response schemas for mp_contract API.

Field names serialize to the public JSON keys (``ClientId``, ``createdAt``...)
via serialization aliases; call ``model_dump(by_alias=True)``.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.mp_contract.domain.models import Contract, Job


class ContractItem(BaseModel):
    id: int
    terms: str
    status: str
    client_id: int | None = Field(serialization_alias="ClientId")
    contractor_id: int | None = Field(serialization_alias="ContractorId")
    created_at: datetime | None = Field(serialization_alias="createdAt")
    updated_at: datetime | None = Field(serialization_alias="updatedAt")

    @classmethod
    def from_domain(cls, contract: Contract) -> "ContractItem":
        return cls(
            id=contract.id,
            terms=contract.terms,
            status=contract.status.value,
            client_id=contract.client_id,
            contractor_id=contract.contractor_id,
            created_at=contract.created_at,
            updated_at=contract.updated_at,
        )


class JobItem(BaseModel):
    id: int
    description: str
    price: int
    paid: bool
    payment_date: datetime | None = Field(serialization_alias="paymentDate")
    contract_id: int | None = Field(serialization_alias="ContractId")
    created_at: datetime | None = Field(serialization_alias="createdAt")
    updated_at: datetime | None = Field(serialization_alias="updatedAt")

    @classmethod
    def from_domain(cls, job: Job) -> "JobItem":
        return cls(
            id=job.id,
            description=job.description,
            price=job.price,
            paid=job.paid,
            payment_date=job.payment_date,
            contract_id=job.contract_id,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class ContractListResponse(BaseModel):
    contracts: list[ContractItem]


class UnpaidJobsResponse(BaseModel):
    unpaid_jobs: list[JobItem] = Field(serialization_alias="unpaidJobs")
