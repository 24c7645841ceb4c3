"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class _IntegerId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId(_IntegerId):
    """Identifier of the authenticated user."""


@dataclass(frozen=True)
class EnrollmentId(_IntegerId):
    """Unique identifier for an Enrollment."""


@dataclass(frozen=True)
class TicketId(_IntegerId):
    """Unique identifier for a Ticket."""


@dataclass(frozen=True)
class TicketTypeId(_IntegerId):
    """Unique identifier for a TicketType."""


@dataclass(frozen=True)
class HotelId(_IntegerId):
    """Unique identifier for a Hotel."""


@dataclass(frozen=True)
class RoomId(_IntegerId):
    """Unique identifier for a Room."""


class TicketStatus(Enum):
    """Payment state of a ticket."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Price:
    """Ticket price in cents."""

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Price cannot be negative")

    def __str__(self) -> str:
        return f"{self.cents / 100:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative number of guests a room holds."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
