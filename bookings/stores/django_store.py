"""Django ORM implementation of the BookingStore."""

from typing import ContextManager

from django.db import IntegrityError, transaction
from django.utils import timezone

from bookings import models
from bookings.domain import (
    Booking,
    Capacity,
    Enrollment,
    Money,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)
from bookings.domain.errors import BookingAlreadyExistsError
from bookings.stores.composites import BookingWithRoom, TicketWithType
from bookings.stores.interfaces import BookingStore


def _room_to_domain(row: models.Room) -> Room:
    return Room(
        id=row.id,
        hotel_id=row.hotel_id,
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _booking_to_domain(row: models.Booking) -> Booking:
    return Booking(
        id=row.id,
        user_id=row.user_id,
        room_id=row.room_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _ticket_type_to_domain(row: models.TicketType) -> TicketType:
    return TicketType(
        id=row.id,
        name=row.name,
        price=Money(row.price),
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def atomic(self) -> ContextManager[None]:
        return transaction.atomic()

    def find_booking_by_user(self, user_id: int) -> BookingWithRoom | None:
        row = (
            models.Booking.objects.select_related("room")
            .filter(user_id=user_id)
            .first()
        )
        if row is None:
            return None
        return BookingWithRoom(booking=_booking_to_domain(row), room=_room_to_domain(row.room))

    def find_booking_by_user_and_id(self, user_id: int, booking_id: int) -> Booking | None:
        row = models.Booking.objects.filter(id=booking_id, user_id=user_id).first()
        return _booking_to_domain(row) if row is not None else None

    def create_booking(self, user_id: int, room_id: int) -> Booking:
        try:
            # Savepoint so a unique violation doesn't poison an outer transaction.
            with transaction.atomic():
                row = models.Booking.objects.create(user_id=user_id, room_id=room_id)
        except IntegrityError as exc:
            # Backends word the unique violation differently; look for the row instead.
            if models.Booking.objects.filter(user_id=user_id).exists():
                raise BookingAlreadyExistsError(user_id) from exc
            raise
        return _booking_to_domain(row)

    def update_booking_room(self, booking_id: int, room_id: int) -> None:
        # queryset.update() skips auto_now, so the timestamp is set here.
        models.Booking.objects.filter(id=booking_id).update(
            room_id=room_id, updated_at=timezone.now()
        )

    def find_room(self, room_id: int, *, lock: bool = False) -> Room | None:
        queryset = models.Room.objects.filter(id=room_id)
        if lock:
            queryset = queryset.select_for_update()
        row = queryset.first()
        return _room_to_domain(row) if row is not None else None

    def find_enrollment_by_user(self, user_id: int) -> Enrollment | None:
        row = models.Enrollment.objects.filter(user_id=user_id).first()
        if row is None:
            return None
        return Enrollment(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def find_ticket_by_enrollment(self, enrollment_id: int) -> TicketWithType | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id)
            .first()
        )
        if row is None:
            return None
        ticket = Ticket(
            id=row.id,
            enrollment_id=row.enrollment_id,
            ticket_type_id=row.ticket_type_id,
            status=TicketStatus(row.status),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        return TicketWithType(ticket=ticket, ticket_type=_ticket_type_to_domain(row.ticket_type))
