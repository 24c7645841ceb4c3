"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from hotels.services.hotel_service import HotelService
from tests.factories import create_user
from tests.fakes import InMemoryEnrollmentStore, InMemoryHotelStore, InMemoryTicketStore


@pytest.fixture
def enrollment_store() -> InMemoryEnrollmentStore:
    return InMemoryEnrollmentStore()


@pytest.fixture
def ticket_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def hotel_store() -> InMemoryHotelStore:
    return InMemoryHotelStore()


@pytest.fixture
def hotel_service(enrollment_store, ticket_store, hotel_store) -> HotelService:
    return HotelService(
        enrollments=enrollment_store,
        tickets=ticket_store,
        hotels=hotel_store,
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(db):
    return create_user()


@pytest.fixture
def auth_client(user) -> APIClient:
    token = Token.objects.create(user=user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return client
