from bookings.handlers.views import BookingDetailView, UserBookingView

__all__ = ["BookingDetailView", "UserBookingView"]
