"""Room vacancy check."""

from bookings.domain import Room
from bookings.domain.errors import RoomFullError, RoomNotFoundError
from bookings.stores.interfaces import BookingStore


class RoomAvailabilityChecker:
    """Decides whether a room can take another booking."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def check_room_available(self, room_id: int, *, lock: bool = False) -> Room:
        """Return the room if it has free capacity.

        Raises:
            RoomNotFoundError: If the room does not exist.
            RoomFullError: If the room has no remaining capacity.
        """
        room = self._store.find_room(room_id, lock=lock)
        if room is None:
            raise RoomNotFoundError(room_id)
        if room.capacity.is_full:
            raise RoomFullError(room_id)
        return room
