"""Shared coffee date response model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from brew.domain.model import CoffeeDate
from brew.domain.value import CoffeeDateStatus, PaymentStatus


class CoffeeDateItem(BaseModel):
    """Coffee date as returned to either participant."""

    date_id: str
    match_id: str
    host_id: str
    guest_id: str
    proposed_by: str
    scheduled_date: datetime
    cafe_name: Optional[str]
    cafe_address: Optional[str]
    cafe_latitude: Optional[float]
    cafe_longitude: Optional[float]
    notes: Optional[str]
    status: CoffeeDateStatus
    guest_confirmed: bool
    host_confirmed: bool
    payment_status: PaymentStatus
    payment_amount: Optional[int]  # Minor units
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, coffee_date: CoffeeDate) -> "CoffeeDateItem":
        return cls(
            date_id=str(coffee_date.id),
            match_id=str(coffee_date.match_id),
            host_id=str(coffee_date.host_id),
            guest_id=str(coffee_date.guest_id),
            proposed_by=str(coffee_date.proposed_by),
            scheduled_date=coffee_date.scheduled_date,
            cafe_name=coffee_date.cafe_name,
            cafe_address=coffee_date.cafe_address,
            cafe_latitude=coffee_date.cafe_latitude,
            cafe_longitude=coffee_date.cafe_longitude,
            notes=coffee_date.notes,
            status=coffee_date.status,
            guest_confirmed=coffee_date.guest_confirmed,
            host_confirmed=coffee_date.host_confirmed,
            payment_status=coffee_date.payment_status,
            payment_amount=coffee_date.payment_amount,
            created_at=coffee_date.created_at,
            updated_at=coffee_date.updated_at,
        )
