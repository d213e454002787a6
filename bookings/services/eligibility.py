"""Ticket eligibility rules for hotel booking."""

import logging

from bookings.domain import Ticket
from bookings.domain.errors import NoEnrollmentError, NoTicketError, TicketNotEligibleError
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class EligibilityChecker:
    """Decides whether a user holds a ticket that allows booking a room."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def check_eligibility(self, user_id: int) -> Ticket:
        """Return the user's ticket if it allows a hotel booking.

        A ticket qualifies when it is paid, not remote, and its type
        includes hotel.

        Raises:
            NoEnrollmentError: If the user has no enrollment.
            NoTicketError: If the enrollment has no ticket.
            TicketNotEligibleError: If the ticket does not qualify.
        """
        enrollment = self._store.find_enrollment_by_user(user_id)
        if enrollment is None:
            raise NoEnrollmentError(user_id)

        found = self._store.find_ticket_by_enrollment(enrollment.id)
        if found is None:
            raise NoTicketError(enrollment.id)

        ticket, ticket_type = found.ticket, found.ticket_type
        if not ticket.is_paid or ticket_type.is_remote or not ticket_type.includes_hotel:
            logger.debug(
                "Ticket %s rejected: status=%s remote=%s hotel=%s",
                ticket.id,
                ticket.status.value,
                ticket_type.is_remote,
                ticket_type.includes_hotel,
            )
            raise TicketNotEligibleError(ticket.id)

        return ticket
