"""Domain models for mp_profile — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.mp_common.enums import ContractRole, ProfileType


@dataclass(frozen=True)
class Profile:
    """Read-only snapshot of a profile row.

    Balances change only through the settlement repository; a Profile is
    never mutated in memory.
    """

    id: int
    first_name: str
    last_name: str
    profession: str
    balance: int             # cents
    type: ProfileType
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def contract_role(self) -> ContractRole:
        return self.type.contract_role

    @property
    def is_client(self) -> bool:
        return self.type is ProfileType.CLIENT
