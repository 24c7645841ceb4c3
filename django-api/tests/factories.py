"""ORM-backed builders for integration tests."""

from itertools import count

from django.contrib.auth import get_user_model

from hotels.models import Hotel, Room
from tickets.models import Enrollment, Ticket, TicketType

_sequence = count(1)


def create_user(username: str | None = None):
    n = next(_sequence)
    return get_user_model().objects.create_user(
        username=username or f"user{n}",
        email=f"user{n}@example.com",
        password="s3cret-pass",
    )


def create_enrollment(user) -> Enrollment:
    return Enrollment.objects.create(user=user)


def create_ticket_type(is_remote: bool = False, includes_hotel: bool = True) -> TicketType:
    n = next(_sequence)
    return TicketType.objects.create(
        name=f"Ticket type {n}",
        price=25000 + n,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )


def create_ticket(
    enrollment: Enrollment, ticket_type: TicketType, status: str = Ticket.Status.PAID
) -> Ticket:
    return Ticket.objects.create(enrollment=enrollment, ticket_type=ticket_type, status=status)


def create_hotel(name: str | None = None) -> Hotel:
    n = next(_sequence)
    return Hotel.objects.create(
        name=name or f"Hotel {n}",
        image=f"https://example.com/hotels/{n}.jpg",
    )


def create_room(hotel: Hotel, capacity: int = 2) -> Room:
    n = next(_sequence)
    return Room.objects.create(hotel=hotel, name=f"Room {n}", capacity=capacity)


def create_eligible_user():
    """User with an enrollment and a paid, in-person ticket that includes hotel."""
    user = create_user()
    enrollment = create_enrollment(user)
    create_ticket(enrollment, create_ticket_type(is_remote=False, includes_hotel=True))
    return user
