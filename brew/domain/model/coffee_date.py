"""Coffee date aggregate root.

A coffee date is proposed inside a match and is paid for by the guest once
both participants have confirmed it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from brew.domain.model.common import DomainModel, utcnow
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    MatchId,
    PaymentStatus,
    UserId,
    UserRole,
)


class CoffeeDate(DomainModel):
    """Coffee date aggregate root.

    Lifecycle:
    - proposed -> accepted | declined (by the participant who did not propose)
    - accepted -> confirmed + paid once host and guest have both confirmed
    - proposed | accepted -> cancelled

    host_id and guest_id are fixed at creation from the users' roles.
    """

    id: CoffeeDateId
    match_id: MatchId
    host_id: UserId
    guest_id: UserId
    proposed_by: UserId
    scheduled_date: datetime
    cafe_name: Optional[str] = Field(default=None, max_length=200)
    cafe_address: Optional[str] = Field(default=None, max_length=500)
    cafe_latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    cafe_longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    notes: Optional[str] = Field(default=None, max_length=2000)
    status: CoffeeDateStatus = CoffeeDateStatus.PROPOSED
    guest_confirmed: bool = False
    host_confirmed: bool = False
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_amount: Optional[int] = Field(default=None, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_settlement(self) -> "CoffeeDate":
        """A paid date is confirmed by both sides and carries its amount."""
        if self.host_id == self.guest_id:
            raise ValueError("Host and guest must be different users")
        if self.proposed_by not in (self.host_id, self.guest_id):
            raise ValueError("Proposer must be the host or the guest")
        if self.payment_status == PaymentStatus.PAID:
            if self.status != CoffeeDateStatus.CONFIRMED:
                raise ValueError("Paid dates must be confirmed")
            if not (self.guest_confirmed and self.host_confirmed):
                raise ValueError("Paid dates require both confirmations")
            if self.payment_amount is None:
                raise ValueError("Paid dates must record the amount charged")
        return self

    @property
    def both_confirmed(self) -> bool:
        return self.guest_confirmed and self.host_confirmed

    @property
    def is_settled(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def is_participant(self, user_id: UserId) -> bool:
        return user_id in (self.host_id, self.guest_id)

    def role_of(self, user_id: UserId) -> Optional[UserRole]:
        """Role the user plays in this date, or None for outsiders."""
        if user_id == self.host_id:
            return UserRole.HOST
        if user_id == self.guest_id:
            return UserRole.GUEST
        return None

    def is_confirmed_by(self, role: UserRole) -> bool:
        return self.host_confirmed if role == UserRole.HOST else self.guest_confirmed

    def with_confirmation(self, role: UserRole, confirmed: bool) -> "CoffeeDate":
        """Copy with the given side's confirmation flag set."""
        field = "host_confirmed" if role == UserRole.HOST else "guest_confirmed"
        return self.model_copy(update={field: confirmed, "updated_at": utcnow()})
