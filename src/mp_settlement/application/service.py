"""SettlementService — pay-for-job and deposit, the only balance-mutating operations.

pay_for_job checks its preconditions in a fixed order (first failure wins):
  1. payer is a client                      -> Unauthorized
  2. job exists                             -> NotFound
  3. job's contract exists                  -> NotFound
  4. payer is the contract's client         -> Unauthorized
  5. payer balance >= job price             -> BadRequest "Insufficient balance"
  6. contract is in_progress                -> BadRequest (terminated)
  7. job is unpaid                          -> BadRequest "already paid"

Checks 2-7 read rows locked FOR UPDATE in the same transaction as the
debit/credit/mark-paid writes, so two concurrent payments for one job
serialize on the job row and the second one sees paid = true.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.mp_common.cents import cents_to_display, exceeds_percent_of
from src.mp_common.datetime_utils import utc_now
from src.mp_common.errors import (
    AppError,
    ContractNotActiveError,
    DepositCapExceededError,
    InsufficientBalanceError,
    InvalidParamError,
    JobAlreadyPaidError,
    JobContractNotFoundError,
    JobNotFoundError,
    MissingReferenceError,
    NotEligibleToPayError,
    UnauthorizedError,
)
from src.mp_contract.application.service import ContractQueryService
from src.mp_profile.domain.models import Profile
from src.mp_settlement.domain.models import DepositReceipt, PaymentReceipt
from src.mp_settlement.domain.repository import SettlementRepositoryProtocol
from src.mp_settlement.infrastructure.ledger import SettlementRepository

logger = logging.getLogger(__name__)


class SettlementService:
    def __init__(
        self,
        repo: SettlementRepositoryProtocol | None = None,
        contracts: ContractQueryService | None = None,
        deposit_cap_percent: int | None = None,
    ) -> None:
        self._repo: SettlementRepositoryProtocol = repo or SettlementRepository()
        self._contracts = contracts or ContractQueryService()
        self._deposit_cap_percent = (
            settings.DEPOSIT_CAP_PERCENT if deposit_cap_percent is None else deposit_cap_percent
        )

    async def pay_for_job(
        self, db: AsyncSession, payer: Profile, job_id: int
    ) -> PaymentReceipt:
        if not payer.is_client:
            raise UnauthorizedError()
        try:
            receipt = await self._settle(db, payer, job_id)
            await db.commit()
        except AppError as exc:
            await db.rollback()
            logger.info(
                "job %d payment rejected: profile=%d %s",
                job_id,
                payer.id,
                exc.detail or exc.message,
            )
            raise
        except Exception:
            await db.rollback()
            raise
        logger.info(
            "job %d paid: %s client=%d -> contractor=%d",
            receipt.job_id,
            cents_to_display(receipt.amount),
            receipt.client_id,
            receipt.contractor_id,
        )
        return receipt

    async def _settle(
        self, db: AsyncSession, payer: Profile, job_id: int
    ) -> PaymentReceipt:
        found = await self._repo.lock_job_with_contract(db, job_id)
        if found is None:
            raise JobNotFoundError()
        job, contract = found.job, found.contract
        if contract is None:
            raise JobContractNotFoundError()
        if contract.client_id != payer.id:
            raise NotEligibleToPayError()

        party_ids = [payer.id]
        if contract.contractor_id is not None:
            party_ids.append(contract.contractor_id)
        balances = await self._repo.lock_profile_balances(db, party_ids)

        # The header-resolved Profile may be stale; decide on the locked balance.
        if balances.get(payer.id, 0) < job.price:
            raise InsufficientBalanceError()
        if not contract.is_active:
            raise ContractNotActiveError()
        if job.paid:
            raise JobAlreadyPaidError()

        client_balance = await self._repo.debit(db, payer.id, job.price)
        contractor_balance = None
        if contract.contractor_id is not None:
            contractor_balance = await self._repo.credit(db, contract.contractor_id, job.price)
        if contractor_balance is None:
            logger.error(
                "job %d: contractor profile %s missing, rolling back debit",
                job.id,
                contract.contractor_id,
            )
            raise MissingReferenceError("contractor profile", contract.contractor_id or 0)

        paid_at = utc_now()
        if not await self._repo.mark_job_paid(db, job.id, paid_at):
            raise JobAlreadyPaidError()

        return PaymentReceipt(
            job_id=job.id,
            client_id=payer.id,
            contractor_id=contract.contractor_id,
            amount=job.price,
            client_balance_after=client_balance,
            contractor_balance_after=contractor_balance,
            paid_at=paid_at,
        )

    async def deposit(
        self, db: AsyncSession, caller: Profile, target_id: int, amount: int
    ) -> DepositReceipt:
        """Credit a client's own balance, capped by their outstanding unpaid work.

        A client with no unpaid jobs on active contracts cannot deposit at all:
        any positive amount exceeds the cap of zero.
        """
        if caller.id != target_id:
            raise UnauthorizedError()
        if not caller.is_client:
            raise UnauthorizedError()
        if amount <= 0:
            raise InvalidParamError("Amount should be a positive number of cents")

        try:
            unpaid_jobs = await self._contracts.unpaid_jobs_for_profile(db, caller)
            unpaid_total = sum(job.price for job in unpaid_jobs)
            if exceeds_percent_of(amount, unpaid_total, self._deposit_cap_percent):
                logger.info(
                    "deposit rejected: profile=%d amount=%d unpaid_total=%d cap=%d%%",
                    caller.id,
                    amount,
                    unpaid_total,
                    self._deposit_cap_percent,
                )
                raise DepositCapExceededError(self._deposit_cap_percent)

            balance = await self._repo.credit(db, caller.id, amount)
            if balance is None:
                raise MissingReferenceError("profile", caller.id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info(
            "deposit: profile=%d amount=%s balance=%s",
            caller.id,
            cents_to_display(amount),
            cents_to_display(balance),
        )
        return DepositReceipt(
            profile_id=caller.id,
            amount=amount,
            balance_after=balance,
            unpaid_total=unpaid_total,
        )
