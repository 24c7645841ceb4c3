"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from unittest import mock

import pytest
from django.db import DatabaseError

from hotels.domain import EnrollmentId, HotelId, TicketStatus, UserId
from hotels.domain.errors import StoreUnavailableError
from hotels.models import Hotel
from hotels.stores.django_store import (
    DjangoEnrollmentStore,
    DjangoHotelStore,
    DjangoTicketStore,
)
from tickets.models import Enrollment, Ticket
from tests.factories import (
    create_enrollment,
    create_hotel,
    create_room,
    create_ticket,
    create_ticket_type,
    create_user,
)


@pytest.mark.django_db
class TestDjangoEnrollmentStore:
    """Tests for DjangoEnrollmentStore."""

    def test_finds_enrollment_for_user(self):
        """find_by_user_id converts the user's enrollment to a domain model."""
        user = create_user()
        enrollment = create_enrollment(user)

        found = DjangoEnrollmentStore().find_by_user_id(UserId(user.pk))

        assert found.id == EnrollmentId(enrollment.pk)
        assert found.user_id == UserId(user.pk)

    def test_returns_none_without_enrollment(self):
        """find_by_user_id returns None for a user who never enrolled."""
        user = create_user()
        assert DjangoEnrollmentStore().find_by_user_id(UserId(user.pk)) is None

    def test_database_error_is_wrapped(self):
        """find_by_user_id raises StoreUnavailableError when the query fails."""
        with mock.patch.object(
            Enrollment.objects, "filter", side_effect=DatabaseError("connection lost")
        ):
            with pytest.raises(StoreUnavailableError) as exc_info:
                DjangoEnrollmentStore().find_by_user_id(UserId(1))
        assert exc_info.value.operation == "find_enrollment_by_user_id"
        assert isinstance(exc_info.value.__cause__, DatabaseError)


@pytest.mark.django_db
class TestDjangoTicketStore:
    """Tests for DjangoTicketStore."""

    def test_converts_ticket_and_type(self):
        """find_by_enrollment_id returns the ticket with its type resolved."""
        enrollment = create_enrollment(create_user())
        ticket_type = create_ticket_type(is_remote=True, includes_hotel=False)
        create_ticket(enrollment, ticket_type, Ticket.Status.RESERVED)

        ticket = DjangoTicketStore().find_by_enrollment_id(EnrollmentId(enrollment.pk))

        assert ticket.status is TicketStatus.RESERVED
        assert ticket.enrollment_id == EnrollmentId(enrollment.pk)
        assert ticket.ticket_type.is_remote is True
        assert ticket.ticket_type.includes_hotel is False
        assert ticket.ticket_type.price.cents == ticket_type.price

    def test_returns_none_without_ticket(self):
        """find_by_enrollment_id returns None when no ticket was bought."""
        enrollment = create_enrollment(create_user())
        assert DjangoTicketStore().find_by_enrollment_id(EnrollmentId(enrollment.pk)) is None

    def test_database_error_is_wrapped(self):
        """find_by_enrollment_id raises StoreUnavailableError when the query fails."""
        with mock.patch.object(
            Ticket.objects, "select_related", side_effect=DatabaseError("connection lost")
        ):
            with pytest.raises(StoreUnavailableError) as exc_info:
                DjangoTicketStore().find_by_enrollment_id(EnrollmentId(1))
        assert isinstance(exc_info.value.__cause__, DatabaseError)


@pytest.mark.django_db
class TestDjangoHotelStore:
    """Tests for DjangoHotelStore."""

    def test_list_hotels_ordered_by_id_without_rooms(self):
        """list_hotels returns hotels ordered by id and leaves rooms empty."""
        first = create_hotel("Copacabana Palace")
        second = create_hotel("Hotel Fasano")
        create_room(first)

        hotels = DjangoHotelStore().list_hotels()

        assert [h.id.value for h in hotels] == [first.pk, second.pk]
        assert hotels[0].name == "Copacabana Palace"
        assert hotels[0].image == first.image
        assert hotels[0].created_at == first.created_at
        assert hotels[0].rooms == ()

    def test_list_hotels_empty(self):
        """list_hotels returns an empty list for an empty catalog."""
        assert DjangoHotelStore().list_hotels() == []

    def test_get_hotel_with_rooms(self):
        """get_hotel_with_rooms returns only the requested hotel's rooms."""
        hotel = create_hotel()
        rooms = [create_room(hotel, capacity=c) for c in (1, 3)]
        create_room(create_hotel())

        found = DjangoHotelStore().get_hotel_with_rooms(HotelId(hotel.pk))

        assert found.id.value == hotel.pk
        assert [r.id.value for r in found.rooms] == [r.pk for r in rooms]
        assert [r.capacity.value for r in found.rooms] == [1, 3]
        assert all(r.hotel_id == HotelId(hotel.pk) for r in found.rooms)

    def test_get_hotel_with_zero_capacity_room(self):
        """get_hotel_with_rooms converts a room saved with zero capacity."""
        hotel = create_hotel()
        create_room(hotel, capacity=0)

        found = DjangoHotelStore().get_hotel_with_rooms(HotelId(hotel.pk))

        assert [r.capacity.value for r in found.rooms] == [0]

    def test_get_unknown_hotel_returns_none(self):
        """get_hotel_with_rooms returns None for an unknown id."""
        assert DjangoHotelStore().get_hotel_with_rooms(HotelId(12345)) is None

    def test_list_database_error_is_wrapped(self):
        """list_hotels raises StoreUnavailableError when the query fails."""
        with mock.patch.object(Hotel.objects, "all", side_effect=DatabaseError("boom")):
            with pytest.raises(StoreUnavailableError) as exc_info:
                DjangoHotelStore().list_hotels()
        assert exc_info.value.operation == "list_hotels"

    def test_get_database_error_is_wrapped(self):
        """get_hotel_with_rooms raises StoreUnavailableError when the query fails."""
        with mock.patch.object(
            Hotel.objects, "prefetch_related", side_effect=DatabaseError("boom")
        ):
            with pytest.raises(StoreUnavailableError) as exc_info:
                DjangoHotelStore().get_hotel_with_rooms(HotelId(1))
        assert exc_info.value.operation == "find_hotel_by_id"
        assert isinstance(exc_info.value.__cause__, DatabaseError)
