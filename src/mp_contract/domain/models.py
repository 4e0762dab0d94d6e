"""Domain models for mp_contract — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.mp_common.enums import ContractRole, ContractStatus
from src.mp_profile.domain.models import Profile


@dataclass(frozen=True)
class Contract:
    id: int
    terms: str
    status: ContractStatus
    client_id: int | None
    contractor_id: int | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status is ContractStatus.IN_PROGRESS

    def party_id(self, role: ContractRole) -> int | None:
        if role is ContractRole.CLIENT:
            return self.client_id
        return self.contractor_id

    def belongs_to(self, profile: Profile) -> bool:
        """True when the profile sits on its own role's side of this contract."""
        return self.party_id(profile.contract_role) == profile.id


@dataclass(frozen=True)
class Job:
    id: int
    description: str
    price: int                       # cents
    paid: bool
    contract_id: int | None
    payment_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class JobWithContract:
    job: Job
    contract: Contract | None        # None when the job's contract row is gone
