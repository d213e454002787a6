from bookings.stores.composites import BookingWithRoom, TicketWithType
from bookings.stores.interfaces import BookingStore

__all__ = ["BookingStore", "BookingWithRoom", "TicketWithType"]
