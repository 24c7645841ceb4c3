"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum

from hotels.domain.eligibility import IneligibilityReason


class ErrorKind(Enum):
    """Failure categories the HTTP boundary switches on."""

    NOT_FOUND = "NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    UNEXPECTED = "UNEXPECTED"


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"
    HOTEL_ACCESS_DENIED = "HOTEL_ACCESS_DENIED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    @property
    def kind(self) -> ErrorKind:
        return _KIND_BY_CODE[self]


_KIND_BY_CODE = {
    ErrorCode.ENROLLMENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.INVALID_HOTEL_ID: ErrorKind.NOT_FOUND,
    ErrorCode.HOTEL_ACCESS_DENIED: ErrorKind.NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: ErrorKind.PAYMENT_REQUIRED,
    ErrorCode.STORE_UNAVAILABLE: ErrorKind.UNEXPECTED,
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has no enrollment."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="Enrollment not found",
        )
        self.user_id = user_id


class TicketNotFoundError(DomainError):
    """Raised when the enrollment has no ticket."""

    def __init__(self, enrollment_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.enrollment_id = enrollment_id


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        self.hotel_id = hotel_id


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            message="Invalid hotel ID format",
        )


class HotelAccessDeniedError(DomainError):
    """Raised when an ineligible ticket asks for a hotel's rooms."""

    def __init__(self, reason: IneligibilityReason) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_ACCESS_DENIED,
            message="Hotel not found",
        )
        self.reason = reason


class PaymentRequiredError(DomainError):
    """Raised when the ticket does not entitle the user to hotel listings."""

    def __init__(self, reason: IneligibilityReason) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="Ticket does not grant hotel access",
        )
        self.reason = reason


class StoreUnavailableError(DomainError):
    """Raised by a store when the backing database fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Data store unavailable",
        )
        self.operation = operation
