"""Domain entities and request/response payloads of the booking system."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Role:
    """A user role such as ``admin`` or ``employee``."""

    id: str = ""
    role_name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class User:
    """An employee account able to log in and create bookings."""

    id: str = ""
    name: str = ""
    email: str = ""
    password: str = ""
    role_id: str = ""
    role_name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class Customer:
    """A guest for whom rooms are booked."""

    id: str = ""
    name: str = ""
    email: str = ""
    address: str = ""
    phone_number: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class Room:
    """A bookable room with its nightly price."""

    id: str = ""
    room_number: str = ""
    room_type: str = ""
    capacity: int = 0
    facility: str = ""
    price: int = 0
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class Service:
    """An extra service that can be added to a booked room."""

    id: str = ""
    name: str = ""
    price: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class BookingDetailService:
    """A service attached to one booking detail."""

    id: str = ""
    booking_detail_id: str = ""
    service_id: str = ""
    service_name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class BookingDetail:
    """One room within a booking, with its services and sub-total."""

    id: str = ""
    booking_id: str = ""
    room_id: str = ""
    services: list[BookingDetailService] = field(default_factory=list)
    sub_total: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class Booking:
    """A reservation of one or more rooms for a customer."""

    id: str = ""
    night: int = 0
    check_in: datetime | None = None
    check_out: datetime | None = None
    user_id: str = ""
    customer_id: str = ""
    is_agree: bool = False
    information: str = ""
    booking_details: list[BookingDetail] = field(default_factory=list)
    total_price: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False


@dataclass
class SheetData:
    """One report row written to the booking spreadsheet."""

    booking_id: str = ""
    check_in: str = ""
    check_out: str = ""
    user_name: str = ""
    customer_name: str = ""
    is_agree: bool = False
    information: str = ""
    total_price: int = 0

    def as_row(self) -> list[Any]:
        """Return the field values in column order."""
        return list(astuple(self))


@dataclass
class GetAllParams:
    """Paging parameters for list queries."""

    limit: int = 0
    offset: int = 0


@dataclass
class CreateBookingParams:
    """Input for creating a booking; dates are ``YYYY-MM-DD`` strings."""

    check_in: str = ""
    check_out: str = ""
    user_id: str = ""
    customer_id: str = ""
    booking_details: list[BookingDetail] = field(default_factory=list)


@dataclass
class UpdateBookingStatusParams:
    """Input for accepting or rejecting a booking."""

    booking_id: str = ""
    is_agree: bool = False
    information: str = ""


@dataclass
class AuthRequest:
    """Login credentials."""

    email: str = ""
    password: str = ""


@dataclass
class AuthResponse:
    """The token handed out after a successful login."""

    token: str = ""


@dataclass
class DayReportParams:
    """Report on the bookings checking in on one date (``YYYY-MM-DD``)."""

    date: str = ""


@dataclass
class MonthReportParams:
    """Report on the bookings checking in during one month of a year."""

    month: str = ""
    year: str = ""


@dataclass
class YearReportParams:
    """Report on the bookings checking in during one year."""

    year: str = ""