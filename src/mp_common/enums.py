"""Global enums — must match DB CHECK constraints exactly.

See alembic/versions/001_create_profiles.py and 002_create_contracts.py.
"""

from enum import Enum


class ContractRole(str, Enum):
    """Side of a contract a profile sits on; value is the scoping column."""
    CLIENT = "client_id"
    CONTRACTOR = "contractor_id"


class ProfileType(str, Enum):
    CLIENT = "client"
    CONTRACTOR = "contractor"

    @property
    def contract_role(self) -> ContractRole:
        return _ROLE_BY_TYPE[self]


_ROLE_BY_TYPE = {
    ProfileType.CLIENT: ContractRole.CLIENT,
    ProfileType.CONTRACTOR: ContractRole.CONTRACTOR,
}


class ContractStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


ACTIVE_STATUSES: tuple[ContractStatus, ...] = (ContractStatus.IN_PROGRESS,)
NON_TERMINATED_STATUSES: tuple[ContractStatus, ...] = (
    ContractStatus.IN_PROGRESS,
    ContractStatus.NEW,
)
