"""Serializers for request bodies and booking responses."""

from rest_framework import serializers


class BookingRequestSerializer(serializers.Serializer):
    """Body of POST /api/booking and PUT /api/booking/{id}."""

    roomId = serializers.IntegerField()


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    hotelId = serializers.IntegerField(source="hotel_id")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookingViewSerializer(serializers.Serializer):
    """Serializer for BookingView domain model."""

    id = serializers.IntegerField()
    Room = RoomSerializer(source="room")
