from bookings.services.availability import RoomAvailabilityChecker
from bookings.services.booking_service import BookingService
from bookings.services.eligibility import EligibilityChecker

__all__ = ["BookingService", "EligibilityChecker", "RoomAvailabilityChecker"]
