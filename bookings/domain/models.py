"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from bookings.domain.value_objects import Capacity, Money, TicketStatus


@dataclass(frozen=True)
class Enrollment:
    """A user's registration for the event."""

    id: int
    user_id: int
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TicketType:
    """Reference data describing a ticket category."""

    id: int
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: int
    enrollment_id: int
    ticket_type_id: int
    status: TicketStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID


@dataclass(frozen=True)
class Room:
    """Domain representation of a hotel Room."""

    id: int
    hotel_id: int
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Booking:
    """A user's reservation of one room."""

    id: int
    user_id: int
    room_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BookingView:
    """Booking as shown to its owner.

    Foreign keys and timestamps of the booking itself are left out;
    the room is embedded whole.
    """

    id: int
    room: Room
