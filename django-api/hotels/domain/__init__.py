from hotels.domain.models import Enrollment, Hotel, Room, Ticket, TicketType
from hotels.domain.value_objects import (
    Capacity,
    EnrollmentId,
    HotelId,
    Price,
    RoomId,
    TicketId,
    TicketStatus,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Enrollment",
    "Hotel",
    "Room",
    "Ticket",
    "TicketType",
    "UserId",
    "EnrollmentId",
    "TicketId",
    "TicketTypeId",
    "HotelId",
    "RoomId",
    "TicketStatus",
    "Price",
    "Capacity",
]
