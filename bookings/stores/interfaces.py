"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import ContextManager

from bookings.domain import Booking, Enrollment, Room
from bookings.stores.composites import BookingWithRoom, TicketWithType


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Return a context manager delimiting one transaction."""
        ...

    @abstractmethod
    def find_booking_by_user(self, user_id: int) -> BookingWithRoom | None:
        """Return the user's booking joined with its room, or None."""
        ...

    @abstractmethod
    def find_booking_by_user_and_id(self, user_id: int, booking_id: int) -> Booking | None:
        """Return the booking only if it has this id AND belongs to this user."""
        ...

    @abstractmethod
    def create_booking(self, user_id: int, room_id: int) -> Booking:
        """Create a booking.

        Raises:
            BookingAlreadyExistsError: If the user already holds a booking.
            Other storage integrity failures propagate unchanged.
        """
        ...

    @abstractmethod
    def update_booking_room(self, booking_id: int, room_id: int) -> None:
        """Point an existing booking at another room."""
        ...

    @abstractmethod
    def find_room(self, room_id: int, *, lock: bool = False) -> Room | None:
        """Return a room by ID, or None if not found.

        With ``lock`` the row stays locked until the enclosing
        transaction ends.
        """
        ...

    @abstractmethod
    def find_enrollment_by_user(self, user_id: int) -> Enrollment | None:
        """Return the user's enrollment, or None."""
        ...

    @abstractmethod
    def find_ticket_by_enrollment(self, enrollment_id: int) -> TicketWithType | None:
        """Return the enrollment's ticket joined with its type, or None."""
        ...
