"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    NO_ENROLLMENT = "NO_ENROLLMENT"
    NO_TICKET = "NO_TICKET"
    TICKET_NOT_ELIGIBLE = "TICKET_NOT_ELIGIBLE"
    ROOM_FULL = "ROOM_FULL"
    BOOKING_NOT_OWNED = "BOOKING_NOT_OWNED"
    BOOKING_ALREADY_EXISTS = "BOOKING_ALREADY_EXISTS"


class FailureKind(Enum):
    """Category of failure, mapped to a transport status by handlers."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, kind and user-safe message."""

    code: ErrorCode
    message: str
    kind: FailureKind = FailureKind.FORBIDDEN

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BookingNotFoundError(DomainError):
    """Raised when a user has no booking."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
            kind=FailureKind.NOT_FOUND,
        )
        self.user_id = user_id


class RoomNotFoundError(DomainError):
    """Raised when a room does not exist."""

    def __init__(self, room_id: int) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message="Room not found",
            kind=FailureKind.NOT_FOUND,
        )
        self.room_id = room_id


class NoEnrollmentError(DomainError):
    """Raised when the user has not enrolled."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.NO_ENROLLMENT,
            message="Enrollment not found",
        )
        self.user_id = user_id


class NoTicketError(DomainError):
    """Raised when the user's enrollment has no ticket."""

    def __init__(self, enrollment_id: int) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKET,
            message="Ticket not found",
        )
        self.enrollment_id = enrollment_id


class TicketNotEligibleError(DomainError):
    """Raised when the ticket is unpaid, remote, or has no hotel."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_ELIGIBLE,
            message="Ticket does not allow hotel booking",
        )
        self.ticket_id = ticket_id


class RoomFullError(DomainError):
    """Raised when a room has no vacancy."""

    def __init__(self, room_id: int) -> None:
        super().__init__(
            code=ErrorCode.ROOM_FULL,
            message="The room has no vacancy",
        )
        self.room_id = room_id


class BookingNotOwnedError(DomainError):
    """Raised when the booking does not exist or belongs to someone else.

    The two cases are deliberately indistinguishable to the caller.
    """

    def __init__(self, booking_id: int) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_OWNED,
            message="Booking not available to this user",
        )
        self.booking_id = booking_id


class BookingAlreadyExistsError(DomainError):
    """Raised by the store when the user already holds a booking."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_ALREADY_EXISTS,
            message="User already has a booking",
        )
        self.user_id = user_id
