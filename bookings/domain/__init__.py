from bookings.domain.models import Booking, BookingView, Enrollment, Room, Ticket, TicketType
from bookings.domain.value_objects import Capacity, Money, TicketStatus

__all__ = [
    "Booking",
    "BookingView",
    "Enrollment",
    "Room",
    "Ticket",
    "TicketType",
    "Capacity",
    "Money",
    "TicketStatus",
]
