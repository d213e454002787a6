"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain.errors import DomainError
from bookings.handlers.errors import error_response
from bookings.handlers.serializers import BookingRequestSerializer, BookingViewSerializer
from bookings.services import BookingService
from bookings.stores.django_store import DjangoBookingStore


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore())


class UserBookingView(APIView):
    """Handler for GET and POST /api/booking"""

    def get(self, request: Request) -> Response:
        try:
            booking = get_booking_service().get_booking(request.user.id)
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingViewSerializer(booking).data)

    def post(self, request: Request) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = get_booking_service().create_booking(
                request.user.id, serializer.validated_data["roomId"]
            )
        except DomainError as exc:
            return error_response(exc)
        return Response({"bookingId": booking.id})


class BookingDetailView(APIView):
    """Handler for PUT /api/booking/{booking_id}"""

    def put(self, request: Request, booking_id: int) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            get_booking_service().update_booking(
                request.user.id, booking_id, serializer.validated_data["roomId"]
            )
        except DomainError as exc:
            return error_response(exc)
        return Response({"bookingId": booking_id})
