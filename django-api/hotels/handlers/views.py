"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Take the authenticated user from the request
- Call services for business logic
- Map domain errors to HTTP responses by error kind
- Never contain business logic
- Never expose internal error details
"""

from loguru import logger
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import DomainError, ErrorKind
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services.hotel_service import HotelService
from hotels.stores.django_store import (
    DjangoEnrollmentStore,
    DjangoHotelStore,
    DjangoTicketStore,
)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def build_hotel_service() -> HotelService:
    return HotelService(
        enrollments=DjangoEnrollmentStore(),
        tickets=DjangoTicketStore(),
        hotels=DjangoHotelStore(),
    )


def error_response(error: DomainError) -> Response:
    """Empty-bodied response carrying the status for the error's kind."""
    if error.kind is ErrorKind.UNEXPECTED:
        logger.error("Hotel request failed: {}", error)
    return Response(status=STATUS_BY_KIND[error.kind])


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = build_hotel_service().list_hotels(request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelRoomsView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = build_hotel_service().get_hotel_rooms(request.user.pk, hotel_id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelWithRoomsSerializer(hotel).data)
