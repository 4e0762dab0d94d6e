"""Tests for mp_common.enums."""

from src.mp_common.enums import (
    ACTIVE_STATUSES,
    NON_TERMINATED_STATUSES,
    ContractRole,
    ContractStatus,
    ProfileType,
)


class TestProfileType:
    def test_values_match_db(self) -> None:
        assert {t.value for t in ProfileType} == {"client", "contractor"}

    def test_contract_role(self) -> None:
        assert ProfileType.CLIENT.contract_role is ContractRole.CLIENT
        assert ProfileType.CONTRACTOR.contract_role is ContractRole.CONTRACTOR

    def test_role_value_is_column_name(self) -> None:
        assert ProfileType("client").contract_role.value == "client_id"
        assert ProfileType("contractor").contract_role.value == "contractor_id"


class TestContractStatus:
    def test_values_match_db(self) -> None:
        assert {s.value for s in ContractStatus} == {"new", "in_progress", "terminated"}

    def test_active_is_in_progress_only(self) -> None:
        assert ACTIVE_STATUSES == (ContractStatus.IN_PROGRESS,)

    def test_non_terminated_excludes_terminated(self) -> None:
        assert ContractStatus.TERMINATED not in NON_TERMINATED_STATUSES
        assert set(NON_TERMINATED_STATUSES) == {ContractStatus.NEW, ContractStatus.IN_PROGRESS}
