"""Booking service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

A booking moves NONE -> BOOKED on create and stays BOOKED on update,
where only its room changes. Bookings are never cancelled here.
"""

import logging

from bookings.domain import Booking, BookingView
from bookings.domain.errors import BookingNotFoundError, BookingNotOwnedError, DomainError
from bookings.services.availability import RoomAvailabilityChecker
from bookings.services.eligibility import EligibilityChecker
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for room booking operations."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store
        self._eligibility = EligibilityChecker(store)
        self._availability = RoomAvailabilityChecker(store)

    def get_booking(self, user_id: int) -> BookingView:
        """Return the user's booking with its room embedded.

        Raises:
            BookingNotFoundError: If the user has no booking.
        """
        found = self._store.find_booking_by_user(user_id)
        if found is None:
            raise BookingNotFoundError(user_id)
        return BookingView(id=found.booking.id, room=found.room)

    def create_booking(self, user_id: int, room_id: int) -> Booking:
        """Book a room for the user.

        Raises:
            NoEnrollmentError: If the user has no enrollment.
            NoTicketError: If the enrollment has no ticket.
            TicketNotEligibleError: If the ticket does not allow hotel booking.
            RoomNotFoundError: If the room does not exist.
            RoomFullError: If the room has no vacancy.
            BookingAlreadyExistsError: If the user already has a booking.
        """
        try:
            self._eligibility.check_eligibility(user_id)
            with self._store.atomic():
                self._availability.check_room_available(room_id, lock=True)
                booking = self._store.create_booking(user_id, room_id)
        except DomainError as exc:
            logger.info("Booking rejected for user %s: %s", user_id, exc.code.value)
            raise

        logger.info("User %s booked room %s (booking %s)", user_id, room_id, booking.id)
        return booking

    def update_booking(self, user_id: int, booking_id: int, room_id: int) -> None:
        """Move the user's booking to another room.

        Eligibility is established at creation and not checked again.

        Raises:
            BookingNotOwnedError: If no booking with this id belongs to the user.
            RoomNotFoundError: If the room does not exist.
            RoomFullError: If the room has no vacancy.
        """
        try:
            booking = self._store.find_booking_by_user_and_id(user_id, booking_id)
            if booking is None:
                raise BookingNotOwnedError(booking_id)
            with self._store.atomic():
                self._availability.check_room_available(room_id, lock=True)
                self._store.update_booking_room(booking.id, room_id)
        except DomainError as exc:
            logger.info(
                "Booking %s update rejected for user %s: %s",
                booking_id,
                user_id,
                exc.code.value,
            )
            raise

        logger.info("Booking %s moved from room %s to room %s", booking.id, booking.room_id, room_id)
