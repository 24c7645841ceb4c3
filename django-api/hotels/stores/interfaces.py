"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Enrollment, EnrollmentId, Hotel, HotelId, Ticket, UserId


class EnrollmentStore(ABC):
    """Read access to enrollments."""

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment, or None if the user never enrolled."""
        ...


class TicketStore(ABC):
    """Read access to tickets."""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """Return the enrollment's ticket with its type, or None."""
        ...


class HotelStore(ABC):
    """Interface for hotel catalog read operations."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id, without rooms."""
        ...

    @abstractmethod
    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel and its rooms ordered by id, or None if not found."""
        ...
