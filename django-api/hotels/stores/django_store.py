"""Django ORM implementations of the hotel stores.

Each method queries the ORM and converts rows to domain models. Database
failures surface as StoreUnavailableError.
"""

from django.db import DatabaseError
from loguru import logger

from hotels import models as hotel_orm
from hotels.domain import (
    Capacity,
    Enrollment,
    EnrollmentId,
    Hotel,
    HotelId,
    Price,
    Room,
    RoomId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from hotels.domain.errors import StoreUnavailableError
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore
from tickets import models as ticket_orm


def _to_room(row: hotel_orm.Room) -> Room:
    return Room(
        id=RoomId(row.pk),
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: hotel_orm.Hotel, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        id=HotelId(row.pk),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


def _to_ticket(row: ticket_orm.Ticket) -> Ticket:
    ticket_type = row.ticket_type
    return Ticket(
        id=TicketId(row.pk),
        enrollment_id=EnrollmentId(row.enrollment_id),
        status=TicketStatus(row.status),
        ticket_type=TicketType(
            id=TicketTypeId(ticket_type.pk),
            name=ticket_type.name,
            price=Price(ticket_type.price),
            is_remote=ticket_type.is_remote,
            includes_hotel=ticket_type.includes_hotel,
        ),
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment lookups backed by the tickets app tables."""

    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        try:
            row = ticket_orm.Enrollment.objects.filter(user_id=user_id.value).first()
        except DatabaseError as exc:
            logger.exception("Enrollment lookup failed for user {}", user_id)
            raise StoreUnavailableError("find_enrollment_by_user_id") from exc
        if row is None:
            return None
        return Enrollment(id=EnrollmentId(row.pk), user_id=UserId(row.user_id))


class DjangoTicketStore(TicketStore):
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        try:
            row = (
                ticket_orm.Ticket.objects.select_related("ticket_type")
                .filter(enrollment_id=enrollment_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Ticket lookup failed for enrollment {}", enrollment_id)
            raise StoreUnavailableError("find_ticket_by_enrollment_id") from exc
        if row is None:
            return None
        return _to_ticket(row)


class DjangoHotelStore(HotelStore):
    """Hotel catalog store using Django ORM."""

    def list_hotels(self) -> list[Hotel]:
        try:
            return [_to_hotel(row) for row in hotel_orm.Hotel.objects.all()]
        except DatabaseError as exc:
            logger.exception("Hotel listing failed")
            raise StoreUnavailableError("list_hotels") from exc

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        try:
            row = (
                hotel_orm.Hotel.objects.prefetch_related("rooms")
                .filter(pk=hotel_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Hotel lookup failed for hotel {}", hotel_id)
            raise StoreUnavailableError("find_hotel_by_id") from exc
        if row is None:
            return None
        return _to_hotel(row, rooms=tuple(_to_room(room) for room in row.rooms.all()))
