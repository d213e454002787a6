"""Integration tests for the booking HTTP API.

Run with: pytest tests/test_booking_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from bookings.models import Booking, Ticket
from tests import factories


def _make_eligible(user) -> None:
    factories.create_ticket(factories.create_enrollment(user), factories.create_ticket_type())


@pytest.mark.django_db
class TestAuthentication:
    """All booking routes require a valid token."""

    @pytest.mark.parametrize(
        "method, url",
        [("get", "/api/booking"), ("post", "/api/booking"), ("put", "/api/booking/0")],
    )
    def test_no_token_returns_401(self, api_client: APIClient, method, url):
        """Given no token, returns 401."""
        response = getattr(api_client, method)(url)

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "method, url",
        [("get", "/api/booking"), ("post", "/api/booking"), ("put", "/api/booking/0")],
    )
    def test_unknown_token_returns_401(self, api_client: APIClient, method, url):
        """Given a token with no matching user, returns 401."""
        api_client.credentials(HTTP_AUTHORIZATION="Token not-a-real-token")

        response = getattr(api_client, method)(url)

        assert response.status_code == 401


@pytest.mark.django_db
class TestGetBooking:
    """Tests for GET /api/booking"""

    def test_no_booking_returns_404(self, auth_client: APIClient):
        """Given no booking, returns 404."""
        response = auth_client.get("/api/booking")

        assert response.status_code == 404
        assert response.json()["code"] == "BOOKING_NOT_FOUND"

    def test_returns_booking_with_room(self, auth_client: APIClient, user, hotel):
        """Given a booking, returns its id and room without keys or timestamps."""
        room = factories.create_room(hotel)
        booking = factories.create_booking(user, room)

        response = auth_client.get("/api/booking")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == booking.id
        assert body["Room"]["id"] == room.id
        assert body["Room"]["name"] == room.name
        assert body["Room"]["capacity"] == room.capacity
        assert body["Room"]["hotelId"] == hotel.id
        assert "createdAt" in body["Room"]
        assert "updatedAt" in body["Room"]
        assert set(body) == {"id", "Room"}


@pytest.mark.django_db
class TestCreateBooking:
    """Tests for POST /api/booking"""

    def test_missing_room_id_returns_400(self, auth_client: APIClient):
        """Given a body without roomId, returns 400."""
        response = auth_client.post("/api/booking", {}, format="json")

        assert response.status_code == 400

    def test_no_enrollment_returns_403(self, auth_client: APIClient):
        """Given no enrollment, returns 403."""
        response = auth_client.post("/api/booking", {"roomId": 1}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "NO_ENROLLMENT"

    def test_no_ticket_returns_403(self, auth_client: APIClient, user):
        """Given an enrollment without ticket, returns 403."""
        factories.create_enrollment(user)

        response = auth_client.post("/api/booking", {"roomId": 1}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "NO_TICKET"

    @pytest.mark.parametrize(
        "status, is_remote, includes_hotel",
        [
            (Ticket.Status.PAID, True, True),
            (Ticket.Status.PAID, False, False),
            (Ticket.Status.RESERVED, False, True),
        ],
    )
    def test_ineligible_ticket_returns_403(
        self, auth_client: APIClient, user, hotel, status, is_remote, includes_hotel
    ):
        """Given a remote, hotel-less or unpaid ticket, returns 403."""
        ticket_type = factories.create_ticket_type(is_remote=is_remote, includes_hotel=includes_hotel)
        factories.create_ticket(factories.create_enrollment(user), ticket_type, status=status)
        room = factories.create_room(hotel)

        response = auth_client.post("/api/booking", {"roomId": room.id}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "TICKET_NOT_ELIGIBLE"

    def test_missing_room_returns_404(self, auth_client: APIClient, user, hotel):
        """Given an unknown room, returns 404."""
        _make_eligible(user)
        factories.create_room(hotel)

        response = auth_client.post("/api/booking", {"roomId": 0}, format="json")

        assert response.status_code == 404

    def test_full_room_returns_403(self, auth_client: APIClient, user, hotel):
        """Given a room with no vacancy, returns 403."""
        _make_eligible(user)
        room = factories.create_room(hotel, capacity=0)

        response = auth_client.post("/api/booking", {"roomId": room.id}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "ROOM_FULL"

    def test_creates_booking(self, auth_client: APIClient, user, hotel):
        """Given an eligible user and free room, returns 200 with the booking id."""
        _make_eligible(user)
        room = factories.create_room(hotel, capacity=5)

        response = auth_client.post("/api/booking", {"roomId": room.id}, format="json")

        assert response.status_code == 200
        booking = Booking.objects.get(user=user)
        assert response.json() == {"bookingId": booking.id}
        assert auth_client.get("/api/booking").json()["Room"]["id"] == room.id

    def test_second_booking_returns_403(self, auth_client: APIClient, user, hotel):
        """Given an existing booking, returns 403 for a second one."""
        _make_eligible(user)
        room = factories.create_room(hotel)
        auth_client.post("/api/booking", {"roomId": room.id}, format="json")

        response = auth_client.post("/api/booking", {"roomId": room.id}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "BOOKING_ALREADY_EXISTS"


@pytest.mark.django_db
class TestUpdateBooking:
    """Tests for PUT /api/booking/{booking_id}"""

    def test_missing_room_id_returns_400(self, auth_client: APIClient):
        """Given a body without roomId, returns 400."""
        response = auth_client.put("/api/booking/0", {}, format="json")

        assert response.status_code == 400

    def test_missing_booking_returns_403(self, auth_client: APIClient):
        """Given no booking with that id, returns 403."""
        response = auth_client.put("/api/booking/0", {"roomId": 0}, format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "BOOKING_NOT_OWNED"

    def test_booking_of_other_user_returns_403(self, auth_client: APIClient, hotel):
        """Given another user's booking, returns 403 and leaves it unchanged."""
        other = factories.create_eligible_user()
        booking = factories.create_booking(other, factories.create_room(hotel))
        new_room = factories.create_room(hotel)

        response = auth_client.put(f"/api/booking/{booking.id}", {"roomId": new_room.id}, format="json")

        assert response.status_code == 403
        booking.refresh_from_db()
        assert booking.room_id != new_room.id

    def test_missing_room_returns_404(self, auth_client: APIClient, user, hotel):
        """Given an unknown room, returns 404."""
        _make_eligible(user)
        booking = factories.create_booking(user, factories.create_room(hotel))

        response = auth_client.put(f"/api/booking/{booking.id}", {"roomId": 0}, format="json")

        assert response.status_code == 404

    def test_full_room_returns_403_and_keeps_room(self, auth_client: APIClient, user, hotel):
        """Given a full target room, returns 403 and keeps the old room."""
        _make_eligible(user)
        room = factories.create_room(hotel)
        booking = factories.create_booking(user, room)
        full_room = factories.create_room(hotel, capacity=0)

        response = auth_client.put(f"/api/booking/{booking.id}", {"roomId": full_room.id}, format="json")

        assert response.status_code == 403
        assert auth_client.get("/api/booking").json()["Room"]["id"] == room.id

    def test_moves_booking_to_new_room(self, auth_client: APIClient, user, hotel):
        """Given a free new room, returns 200 and the booking shows the new room."""
        _make_eligible(user)
        booking = factories.create_booking(user, factories.create_room(hotel))
        new_room = factories.create_room(hotel)

        response = auth_client.put(f"/api/booking/{booking.id}", {"roomId": new_room.id}, format="json")

        assert response.status_code == 200
        assert response.json() == {"bookingId": booking.id}
        assert auth_client.get("/api/booking").json()["Room"]["id"] == new_room.id

    def test_update_does_not_recheck_eligibility(self, auth_client: APIClient, user, hotel):
        """A user without enrollment can still move an existing booking."""
        booking = factories.create_booking(user, factories.create_room(hotel))
        new_room = factories.create_room(hotel)

        response = auth_client.put(f"/api/booking/{booking.id}", {"roomId": new_room.id}, format="json")

        assert response.status_code == 200
