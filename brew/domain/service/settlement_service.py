"""Coffee date settlement domain service.

Money for a date moves only after host and guest have both confirmed it.
The confirmation that completes the pair settles the date: the guest's
wallet is debited by the host's rate, a ledger entry is appended and the
date is marked confirmed and paid, all in one atomic unit.

Locks are taken in a fixed order (date row, then guest user row) so a
settlement never deadlocks against a concurrent top-up, which only locks
the user row.
"""

from dataclasses import dataclass
from typing import Optional

import logfire

from brew.domain.error import (
    AlreadySettledError,
    DeprecatedOperationError,
    InsufficientFundsError,
    InvalidStateError,
    NotAuthorizedError,
)
from brew.domain.model import CoffeeDate
from brew.domain.model.common import utcnow
from brew.domain.repository import CoffeeDateRepository, TransactionManager
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    PaymentStatus,
    UserId,
    UserRole,
)

from .base import Service
from .coffee_date_service import CoffeeDateService
from .user_service import UserService
from .wallet_service import WalletService


@dataclass
class ConfirmResult:
    """Outcome of one participant confirming a date."""

    both_confirmed: bool
    payment_processed: bool
    date: CoffeeDate
    amount_charged: Optional[int] = None
    waiting_for: Optional[UserRole] = None


class SettlementService(Service):
    """Domain service for dual confirmation and payment of coffee dates."""

    def __init__(
        self,
        coffee_date_repository: CoffeeDateRepository,
        coffee_date_service: CoffeeDateService,
        user_service: UserService,
        wallet_service: WalletService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize settlement service.

        Args:
            coffee_date_repository: Coffee date repository
            coffee_date_service: Coffee date domain service
            user_service: User domain service
            wallet_service: Wallet domain service
            transaction_manager: Atomic unit-of-work boundary
        """
        self.coffee_date_repository = coffee_date_repository
        self.coffee_date_service = coffee_date_service
        self.user_service = user_service
        self.wallet_service = wallet_service
        self.transaction_manager = transaction_manager

    async def confirm(self, date_id: CoffeeDateId, user_id: UserId) -> ConfirmResult:
        """Confirm a date on behalf of one participant.

        Args:
            date_id: Coffee date ID
            user_id: Confirming user (host or guest of the date)

        Returns:
            ConfirmResult. If the other side has not confirmed yet,
            ``waiting_for`` names its role and no money moves.

        Raises:
            NotFoundError: If the date does not exist
            AlreadySettledError: If the date was already paid
            InvalidStateError: If the date is not accepted
            NotAuthorizedError: If the user is neither host nor guest
            InsufficientFundsError: If the guest cannot cover the host rate.
                The caller's flag and the guest's flag are cleared first.
        """
        with logfire.span(
            "settlement_service.confirm", date_id=str(date_id), user_id=str(user_id)
        ):
            coffee_date = await self.coffee_date_service.get_for_update(date_id)

            # A paid date is also confirmed, so this goes before the status check
            if coffee_date.is_settled:
                logfire.warn("Confirm on settled date", date_id=str(date_id))
                raise AlreadySettledError(str(date_id))
            if coffee_date.status != CoffeeDateStatus.ACCEPTED:
                raise InvalidStateError(
                    "coffee date", str(date_id), coffee_date.status.value, "confirm"
                )
            role = coffee_date.role_of(user_id)
            if role is None:
                raise NotAuthorizedError(
                    "confirm", "coffee date", str(date_id), str(user_id)
                )

            if not coffee_date.is_confirmed_by(role):
                coffee_date = await self.coffee_date_repository.save(
                    coffee_date.with_confirmation(role, True)
                )
                logfire.info(
                    "Coffee date confirmed by participant",
                    date_id=str(date_id),
                    role=role.value,
                )

            if not coffee_date.both_confirmed:
                return ConfirmResult(
                    both_confirmed=False,
                    payment_processed=False,
                    date=coffee_date,
                    waiting_for=role.counterpart,
                )

            return await self._settle(coffee_date, role)

    async def _settle(
        self, coffee_date: CoffeeDate, caller_role: UserRole
    ) -> ConfirmResult:
        guest = await self.user_service.get_for_update(coffee_date.guest_id)
        host = await self.user_service.get_by_id(coffee_date.host_id)
        rate = host.host_rate or 0

        if guest.wallet_balance < rate:
            reset = coffee_date.with_confirmation(caller_role, False).with_confirmation(
                UserRole.GUEST, False
            )
            await self.coffee_date_repository.save(reset)
            logfire.warn(
                "Settlement failed, insufficient funds",
                date_id=str(coffee_date.id),
                guest_id=str(guest.id),
                required=rate,
                available=guest.wallet_balance,
            )
            raise InsufficientFundsError(required=rate, available=guest.wallet_balance)

        async with self.transaction_manager.atomic():
            if rate > 0:
                await self.wallet_service.debit_for_date(guest, rate, coffee_date.id)
            settled = await self.coffee_date_repository.save(
                coffee_date.model_copy(
                    update={
                        "status": CoffeeDateStatus.CONFIRMED,
                        "payment_status": PaymentStatus.PAID,
                        "payment_amount": rate,
                        "updated_at": utcnow(),
                    }
                )
            )

        logfire.info(
            "Coffee date settled",
            date_id=str(coffee_date.id),
            guest_id=str(guest.id),
            host_id=str(host.id),
            amount=rate,
        )
        return ConfirmResult(
            both_confirmed=True,
            payment_processed=True,
            date=settled,
            amount_charged=rate,
        )

    async def pay_for_date(self, date_id: CoffeeDateId, user_id: UserId) -> None:
        """Explicit pay call from older clients. Never charges.

        Raises:
            DeprecatedOperationError: Always
        """
        logfire.warn(
            "Deprecated pay endpoint called", date_id=str(date_id), user_id=str(user_id)
        )
        raise DeprecatedOperationError("Paying for a date", "confirming the date")
