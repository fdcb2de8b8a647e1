"""Storage of bookings together with their booked rooms and services."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from roomate import queries
from roomate.db import Database
from roomate.models import Booking, BookingDetail, BookingDetailService, SheetData

_BOOKING_COLUMNS = (
    "id",
    "night",
    "check_in",
    "check_out",
    "user_id",
    "customer_id",
    "is_agree",
    "information",
    "total_price",
    "created_at",
    "updated_at",
)
_DETAIL_COLUMNS = ("id", "booking_id", "room_id", "sub_total", "created_at", "updated_at")
_DETAIL_SERVICE_COLUMNS = (
    "id",
    "booking_detail_id",
    "service_id",
    "service_name",
    "created_at",
    "updated_at",
)
_SHEET_COLUMNS = (
    "booking_id",
    "check_in",
    "check_out",
    "user_name",
    "customer_name",
    "is_agree",
    "information",
    "total_price",
)
_SHEET_TEXT_COLUMNS = ("booking_id", "check_in", "check_out", "user_name", "customer_name", "information")


def _now() -> datetime:
    """The current local time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def _fields(columns: Sequence[str], row: Sequence[Any]) -> dict[str, Any]:
    """Pair column names with row values; a row of the wrong width raises ValueError."""
    return dict(zip(columns, row, strict=True))


def _text(value: Any) -> str:
    """Render a column value as text; timestamps become ISO 8601 strings."""
    if value is None:
        raise ValueError("converting NULL to string is unsupported")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _sheet_row(row: Sequence[Any]) -> SheetData:
    """Build a report row; user and customer columns still hold ids at this point."""
    fields = _fields(_SHEET_COLUMNS, row)
    for column in _SHEET_TEXT_COLUMNS:
        fields[column] = _text(fields[column])
    return SheetData(**fields)


class BookingRepository:
    """Stores bookings; deletion is a soft delete."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def get(self, booking_id: str) -> Booking:
        """Return the live booking with ``booking_id`` and its details."""
        row = self.db.query_one(queries.GET_BOOKING, booking_id)
        booking = Booking(**_fields(_BOOKING_COLUMNS, row))
        booking.booking_details = self._details(booking_id)
        return booking

    def get_all(self, limit: int, offset: int) -> list[Booking]:
        """Return one page of live bookings ordered by id, each with its details."""
        bookings = []
        for row in self.db.query_all(queries.GET_ALL_BOOKINGS, limit, offset):
            booking = Booking(**_fields(_BOOKING_COLUMNS, row))
            booking.booking_details = self._details(booking.id)
            bookings.append(booking)
        return bookings

    def _details(self, booking_id: str) -> list[BookingDetail]:
        details = []
        for row in self.db.query_all(queries.GET_ALL_BOOKING_DETAILS, booking_id):
            detail = BookingDetail(**_fields(_DETAIL_COLUMNS, row))
            detail.services = self._detail_services(detail.id)
            details.append(detail)
        return details

    def _detail_services(self, booking_detail_id: str) -> list[BookingDetailService]:
        rows = self.db.query_all(queries.GET_ALL_BOOKING_DETAIL_SERVICES, booking_detail_id)
        return [BookingDetailService(**_fields(_DETAIL_SERVICE_COLUMNS, row)) for row in rows]

    def create(self, booking: Booking) -> Booking:
        """Insert the booking, its details and their services in one transaction."""
        with self.db.transaction() as tx:
            row = tx.query_one(
                queries.CREATE_BOOKING,
                booking.night,
                booking.check_in,
                booking.check_out,
                booking.user_id,
                booking.customer_id,
                booking.total_price,
                _now(),
            )
            created = replace(booking, **_fields(_BOOKING_COLUMNS, row))
            details = [self._create_detail(tx, created.id, detail) for detail in booking.booking_details]
        return replace(created, booking_details=details)

    @staticmethod
    def _create_detail(tx: Database, booking_id: str, detail: BookingDetail) -> BookingDetail:
        row = tx.query_one(queries.CREATE_BOOKING_DETAIL, booking_id, detail.room_id, detail.sub_total, _now())
        stored = BookingDetail(**_fields(_DETAIL_COLUMNS, row))
        stored.services = [
            BookingDetailService(
                **_fields(
                    _DETAIL_SERVICE_COLUMNS,
                    tx.query_one(
                        queries.CREATE_BOOKING_DETAIL_SERVICE,
                        stored.id,
                        service.service_id,
                        service.service_name,
                        _now(),
                    ),
                )
            )
            for service in detail.services
        ]
        return stored

    def update_status(self, booking_id: str, is_agree: bool, information: str) -> Booking:
        """Accept or reject the booking and return it without its details."""
        row = self.db.query_one(queries.UPDATE_BOOKING_STATUS, booking_id, is_agree, information)
        return Booking(**_fields(_BOOKING_COLUMNS, row))

    def delete(self, booking_id: str) -> None:
        """Mark the booking as deleted."""
        self.db.execute(queries.DELETE_BOOKING, booking_id)

    def get_one_day(self, date: str) -> SheetData:
        """Return the booking checking in on ``date``, with user and customer ids."""
        return _sheet_row(self.db.query_one(queries.GET_BOOKING_ONE_DAY, date))

    def get_one_month(self, month: str, year: str) -> list[SheetData]:
        """Return the bookings checking in during ``month`` of ``year``."""
        return [_sheet_row(row) for row in self.db.query_all(queries.GET_BOOKING_ONE_MONTH, month, year)]

    def get_one_year(self, year: str) -> list[SheetData]:
        """Return the bookings checking in during ``year``."""
        return [_sheet_row(row) for row in self.db.query_all(queries.GET_BOOKING_ONE_YEAR, year)]