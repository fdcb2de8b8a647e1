"""Booking workflow: pricing new bookings and accepting or rejecting them."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from roomate.models import (
    Booking,
    BookingDetail,
    BookingDetailService,
    CreateBookingParams,
    GetAllParams,
    UpdateBookingStatusParams,
)

_DATE_FORMAT = "%Y-%m-%d"
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_SECONDS_PER_DAY = 24 * 60 * 60


def _parse_date(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` date as UTC midnight; unparseable input gives the zero time."""
    try:
        return datetime.strptime(text, _DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return _ZERO_TIME


class BookingUseCase:
    """Creates, lists and approves bookings."""

    def __init__(self, booking_repo: Any, room_uc: Any, service_uc: Any) -> None:
        self.booking_repo = booking_repo
        self.room_uc = room_uc
        self.service_uc = service_uc

    def get_all_bookings(self, payload: GetAllParams) -> list[Booking]:
        """Return one page of bookings."""
        return self.booking_repo.get_all(payload.limit, payload.offset)

    def get_booking(self, booking_id: str) -> Booking:
        """Return one booking with its details."""
        return self.booking_repo.get(booking_id)

    def create_booking(self, payload: CreateBookingParams) -> Booking:
        """Price every room and service of the request and store the booking.

        A room's sub-total is its nightly price times the nights plus its services.
        """
        check_in = _parse_date(payload.check_in)
        check_out = _parse_date(payload.check_out)
        night = int((check_out - check_in).total_seconds() / _SECONDS_PER_DAY)

        details = []
        for requested in payload.booking_details:
            room = self.room_uc.get_room(requested.room_id)
            services = []
            services_price = 0
            for wanted in requested.services:
                service = self.service_uc.get_service(wanted.service_id)
                services.append(BookingDetailService(service_id=wanted.service_id, service_name=service.name))
                services_price += service.price
            details.append(
                BookingDetail(
                    room_id=requested.room_id,
                    services=services,
                    sub_total=services_price + room.price * night,
                )
            )

        booking = Booking(
            night=night,
            check_in=check_in,
            check_out=check_out,
            user_id=payload.user_id,
            customer_id=payload.customer_id,
            booking_details=details,
            total_price=sum(detail.sub_total for detail in details),
        )
        return self.booking_repo.create(booking)

    def update_booking_status(self, payload: UpdateBookingStatusParams) -> Booking:
        """Record the decision; an accepted booking marks each of its rooms as booked."""
        booking = self.booking_repo.update_status(payload.booking_id, payload.is_agree, payload.information)
        if payload.is_agree:
            accepted = self.booking_repo.get(payload.booking_id)
            for detail in accepted.booking_details:
                self.room_uc.update_status(detail.room_id)
        return booking