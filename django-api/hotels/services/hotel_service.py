"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Enforce the hotel access gate
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from loguru import logger

from hotels.domain import Hotel, HotelId, Ticket, UserId
from hotels.domain.eligibility import (
    AccessDecision,
    AccessPurpose,
    evaluate_hotel_access,
    ineligibility_reason,
)
from hotels.domain.errors import (
    EnrollmentNotFoundError,
    HotelAccessDeniedError,
    HotelNotFoundError,
    InvalidHotelIdError,
    PaymentRequiredError,
    TicketNotFoundError,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore


class HotelService:
    """Service for hotel catalog reads on behalf of an enrolled user."""

    def __init__(
        self,
        enrollments: EnrollmentStore,
        tickets: TicketStore,
        hotels: HotelStore,
    ) -> None:
        self._enrollments = enrollments
        self._tickets = tickets
        self._hotels = hotels

    def list_hotels(self, user_id: int) -> list[Hotel]:
        """Return every hotel in the catalog.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
        """
        ticket = self._ticket_for(UserId(user_id))
        self._check_access(user_id, ticket, AccessPurpose.LIST_HOTELS)
        return self._hotels.list_hotels()

    def get_hotel_rooms(self, user_id: int, hotel_id: str) -> Hotel:
        """Return a hotel with its rooms.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            HotelAccessDeniedError: If the ticket does not grant hotel access.
            InvalidHotelIdError: If hotel_id is not a positive integer.
            HotelNotFoundError: If the hotel does not exist.
        """
        ticket = self._ticket_for(UserId(user_id))
        self._check_access(user_id, ticket, AccessPurpose.LIST_ROOMS)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            raise InvalidHotelIdError() from None

        hotel = self._hotels.get_hotel_with_rooms(parsed_id)
        if hotel is None:
            raise HotelNotFoundError(parsed_id.value)
        return hotel

    def _ticket_for(self, user_id: UserId) -> Ticket:
        enrollment = self._enrollments.find_by_user_id(user_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(user_id.value)

        ticket = self._tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            raise TicketNotFoundError(enrollment.id.value)
        return ticket

    @staticmethod
    def _check_access(user_id: int, ticket: Ticket, purpose: AccessPurpose) -> None:
        reason = ineligibility_reason(ticket)
        if reason is None:
            return

        logger.bind(user_id=user_id, ticket_id=ticket.id.value, purpose=purpose.value).info(
            "Hotel access denied: {}", reason.value
        )
        if evaluate_hotel_access(ticket, purpose) is AccessDecision.DENIED_PAYMENT_REQUIRED:
            raise PaymentRequiredError(reason)
        raise HotelAccessDeniedError(reason)
