"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models live in hotels/models.py and tickets/models.py
(persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

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


@dataclass(frozen=True)
class Enrollment:
    """A user's registration for the event."""

    id: EnrollmentId
    user_id: UserId


@dataclass(frozen=True)
class TicketType:
    """Ticket category and the entitlements it grants."""

    id: TicketTypeId
    name: str
    price: Price
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """A ticket bought for an enrollment, with its type resolved."""

    id: TicketId
    enrollment_id: EnrollmentId
    status: TicketStatus
    ticket_type: TicketType


@dataclass(frozen=True)
class Room:
    """Domain representation of a hotel Room."""

    id: RoomId
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel."""

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] = ()
