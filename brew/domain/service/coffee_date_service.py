"""Coffee date domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from brew.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from brew.domain.model import CoffeeDate
from brew.domain.model.common import utcnow
from brew.domain.repository import CoffeeDateRepository
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    DateDecision,
    MatchId,
    PaymentStatus,
    UserId,
    UserRole,
)

from .base import Service
from .match_service import MatchService
from .user_service import UserService


class CoffeeDateService(Service):
    """Domain service for proposing and answering coffee dates.

    Confirmation and payment live in SettlementService.
    """

    def __init__(
        self,
        coffee_date_repository: CoffeeDateRepository,
        match_service: MatchService,
        user_service: UserService,
    ) -> None:
        """Initialize coffee date service.

        Args:
            coffee_date_repository: Coffee date repository
            match_service: Match domain service
            user_service: User domain service
        """
        self.coffee_date_repository = coffee_date_repository
        self.match_service = match_service
        self.user_service = user_service

    async def propose(
        self,
        match_id: MatchId,
        proposer_id: UserId,
        scheduled_date: datetime,
        cafe_name: Optional[str] = None,
        cafe_address: Optional[str] = None,
        cafe_latitude: Optional[float] = None,
        cafe_longitude: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> CoffeeDate:
        """Propose a coffee date within a match.

        Host and guest are taken from the two users' roles now, whoever
        proposes.

        Raises:
            NotFoundError: If the match does not exist
            NotAuthorizedError: If the proposer is not one of the match's users
            InvalidStateError: If the match is blocked
            ValidationError: If the pair is not one host and one guest
        """
        with logfire.span(
            "coffee_date_service.propose",
            match_id=str(match_id),
            proposer_id=str(proposer_id),
        ):
            match = await self.match_service.get_match_for_participant(
                match_id, proposer_id, action="propose a date on"
            )
            if not match.is_active:
                raise InvalidStateError(
                    "match", str(match_id), match.status.value, "propose a date on"
                )

            first = await self.user_service.get_by_id(match.user1_id)
            second = await self.user_service.get_by_id(match.user2_id)
            roles = {first.role: first, second.role: second}
            host = roles.get(UserRole.HOST)
            guest = roles.get(UserRole.GUEST)
            if host is None or guest is None:
                logfire.warn(
                    "Date proposed on a match without host and guest",
                    match_id=str(match_id),
                )
                raise ValidationError("A coffee date needs one host and one guest")

            now = utcnow()
            coffee_date = CoffeeDate(
                id=CoffeeDateId(uuid4()),
                match_id=match_id,
                host_id=host.id,
                guest_id=guest.id,
                proposed_by=proposer_id,
                scheduled_date=scheduled_date,
                cafe_name=cafe_name,
                cafe_address=cafe_address,
                cafe_latitude=cafe_latitude,
                cafe_longitude=cafe_longitude,
                notes=notes,
                status=CoffeeDateStatus.PROPOSED,
                guest_confirmed=False,
                host_confirmed=False,
                payment_status=PaymentStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            saved = await self.coffee_date_repository.save(coffee_date)
            logfire.info(
                "Coffee date proposed",
                date_id=str(saved.id),
                host_id=str(saved.host_id),
                guest_id=str(saved.guest_id),
            )
            return saved

    async def respond(
        self, date_id: CoffeeDateId, responder_id: UserId, decision: DateDecision
    ) -> CoffeeDate:
        """Accept or decline a proposal.

        Raises:
            NotFoundError: If the date does not exist
            NotAuthorizedError: If the responder proposed it or is not a participant
            InvalidStateError: If the date is no longer proposed
        """
        with logfire.span(
            "coffee_date_service.respond",
            date_id=str(date_id),
            responder_id=str(responder_id),
            decision=decision.value,
        ):
            coffee_date = await self.get_for_update(date_id)

            if not coffee_date.is_participant(responder_id):
                raise NotAuthorizedError(
                    "respond to", "coffee date", str(date_id), str(responder_id)
                )
            if responder_id == coffee_date.proposed_by:
                logfire.warn("Proposer tried to answer own date", date_id=str(date_id))
                raise NotAuthorizedError(
                    "respond to own", "coffee date", str(date_id), str(responder_id)
                )
            if coffee_date.status != CoffeeDateStatus.PROPOSED:
                raise InvalidStateError(
                    "coffee date", str(date_id), coffee_date.status.value, "respond to"
                )

            status = (
                CoffeeDateStatus.ACCEPTED
                if decision == DateDecision.ACCEPTED
                else CoffeeDateStatus.DECLINED
            )
            updated = await self.coffee_date_repository.save(
                coffee_date.model_copy(update={"status": status, "updated_at": utcnow()})
            )
            logfire.info(
                "Coffee date answered", date_id=str(date_id), status=status.value
            )
            return updated

    async def cancel(self, date_id: CoffeeDateId, user_id: UserId) -> CoffeeDate:
        """Cancel a date that has not been settled. No money moves.

        Raises:
            NotFoundError: If the date does not exist
            NotAuthorizedError: If the user is not a participant
            InvalidStateError: If the date is past accepted
        """
        with logfire.span(
            "coffee_date_service.cancel", date_id=str(date_id), user_id=str(user_id)
        ):
            coffee_date = await self.get_for_update(date_id)

            if not coffee_date.is_participant(user_id):
                raise NotAuthorizedError(
                    "cancel", "coffee date", str(date_id), str(user_id)
                )
            if not coffee_date.status.is_cancellable:
                raise InvalidStateError(
                    "coffee date", str(date_id), coffee_date.status.value, "cancel"
                )

            updated = await self.coffee_date_repository.save(
                coffee_date.model_copy(
                    update={"status": CoffeeDateStatus.CANCELLED, "updated_at": utcnow()}
                )
            )
            logfire.info("Coffee date cancelled", date_id=str(date_id), by=str(user_id))
            return updated

    async def get_for_update(self, date_id: CoffeeDateId) -> CoffeeDate:
        """Load a date holding its row lock.

        Raises:
            NotFoundError: If the date does not exist
        """
        coffee_date = await self.coffee_date_repository.find_by_id_for_update(date_id)
        if not coffee_date:
            logfire.warn("Coffee date not found", date_id=str(date_id))
            raise NotFoundError("Coffee date", str(date_id))
        return coffee_date

    async def get_for_participant(
        self, date_id: CoffeeDateId, user_id: UserId
    ) -> CoffeeDate:
        """Get a date the user takes part in.

        Raises:
            NotFoundError: If the date does not exist
            NotAuthorizedError: If the user is not a participant
        """
        coffee_date = await self.coffee_date_repository.find_by_id(date_id)
        if not coffee_date:
            raise NotFoundError("Coffee date", str(date_id))
        if not coffee_date.is_participant(user_id):
            raise NotAuthorizedError("view", "coffee date", str(date_id), str(user_id))
        return coffee_date

    async def list_for_user(self, user_id: UserId) -> list[CoffeeDate]:
        """List dates the user hosts or attends."""
        with logfire.span("coffee_date_service.list_for_user", user_id=str(user_id)):
            return await self.coffee_date_repository.find_by_user(user_id)

    async def list_for_match(
        self, match_id: MatchId, user_id: UserId
    ) -> list[CoffeeDate]:
        """List dates proposed within a match the user takes part in."""
        await self.match_service.get_match_for_participant(match_id, user_id)
        return await self.coffee_date_repository.find_by_match(match_id)
