from django.urls import path

from bookings.handlers import BookingDetailView, UserBookingView

urlpatterns = [
    path("booking", UserBookingView.as_view(), name="booking"),
    path(
        "booking/<int:booking_id>",
        BookingDetailView.as_view(),
        name="booking-detail",
    ),
]
