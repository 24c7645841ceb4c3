"""Hotel access eligibility.

A ticket grants access to hotel data only when it is paid, is for in-person
attendance and its type includes hotel accommodation. Both read operations
share these conditions but deny differently: the hotel listing asks the user
to pay, the room listing answers as if the hotel did not exist.
"""

from enum import Enum

from hotels.domain.models import Ticket
from hotels.domain.value_objects import TicketStatus


class AccessPurpose(Enum):
    """Which read operation is asking for access."""

    LIST_HOTELS = "LIST_HOTELS"
    LIST_ROOMS = "LIST_ROOMS"


class AccessDecision(Enum):
    AUTHORIZED = "AUTHORIZED"
    DENIED_PAYMENT_REQUIRED = "DENIED_PAYMENT_REQUIRED"
    DENIED_NOT_FOUND = "DENIED_NOT_FOUND"


class IneligibilityReason(Enum):
    TICKET_NOT_PAID = "TICKET_NOT_PAID"
    REMOTE_TICKET = "REMOTE_TICKET"
    HOTEL_NOT_INCLUDED = "HOTEL_NOT_INCLUDED"


_DENIAL_BY_PURPOSE = {
    AccessPurpose.LIST_HOTELS: AccessDecision.DENIED_PAYMENT_REQUIRED,
    AccessPurpose.LIST_ROOMS: AccessDecision.DENIED_NOT_FOUND,
}


def ineligibility_reason(ticket: Ticket) -> IneligibilityReason | None:
    """Return the first condition that keeps the ticket away from hotels."""
    if ticket.status is TicketStatus.RESERVED:
        return IneligibilityReason.TICKET_NOT_PAID
    if ticket.ticket_type.is_remote:
        return IneligibilityReason.REMOTE_TICKET
    if not ticket.ticket_type.includes_hotel:
        return IneligibilityReason.HOTEL_NOT_INCLUDED
    return None


def evaluate_hotel_access(ticket: Ticket, purpose: AccessPurpose) -> AccessDecision:
    if ineligibility_reason(ticket) is None:
        return AccessDecision.AUTHORIZED
    return _DENIAL_BY_PURPOSE[purpose]
