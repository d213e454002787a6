"""Composite read models returned by join-style store queries."""

from dataclasses import dataclass

from bookings.domain import Booking, Room, Ticket, TicketType


@dataclass(frozen=True)
class TicketWithType:
    """A ticket together with its ticket type."""

    ticket: Ticket
    ticket_type: TicketType


@dataclass(frozen=True)
class BookingWithRoom:
    """A booking together with the room it reserves."""

    booking: Booking
    room: Room
