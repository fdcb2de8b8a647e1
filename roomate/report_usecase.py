"""Booking reports written to the spreadsheet and downloaded as a workbook."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from roomate.booking_repository import BookingRepository
from roomate.google_api import GoogleDrive, GoogleSheet
from roomate.models import DayReportParams, MonthReportParams, SheetData, YearReportParams

_ZERO_DATE = date(1, 1, 1)


def _report_date(text: str) -> str:
    """Return the ``YYYY-MM-DD`` part of a timestamp; unparseable input gives ``0001-01-01``."""
    value = text.strip()
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value).date()
    except ValueError:
        parsed = _ZERO_DATE
    return parsed.strftime("%Y-%m-%d") if parsed.year >= 1000 else f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


class ReportUseCase:
    """Builds daily, monthly and yearly booking reports."""

    def __init__(
        self,
        booking_repo: BookingRepository,
        user_uc: Any,
        customer_uc: Any,
        drive: GoogleDrive,
        sheet: GoogleSheet,
    ) -> None:
        self.booking_repo = booking_repo
        self.user_uc = user_uc
        self.customer_uc = customer_uc
        self.drive = drive
        self.sheet = sheet

    def _resolve(self, row: SheetData) -> SheetData:
        """Swap user and customer ids for names and trim the dates."""
        user = self.user_uc.get_user(row.user_name)
        customer = self.customer_uc.get_customer(row.customer_name)
        return replace(
            row,
            user_name=user.name,
            customer_name=customer.name,
            check_in=_report_date(row.check_in),
            check_out=_report_date(row.check_out),
        )

    def _publish(self, rows: Iterable[SheetData]) -> Any:
        """Replace the sheet contents with ``rows`` and return the exported workbook."""
        rows = list(rows)
        service = self.sheet.new_service()
        self.sheet.delete_sheet_data(service)
        self.sheet.append_sheet(rows, service)
        drive_service = self.drive.new_service()
        return self.drive.download(drive_service)

    def daily_report(self, payload: DayReportParams) -> Any:
        """Report the booking checking in on the given date."""
        booking = self.booking_repo.get_one_day(payload.date)
        return self._publish([self._resolve(booking)])

    def monthly_report(self, payload: MonthReportParams) -> Any:
        """Report the bookings checking in during the given month."""
        bookings = self.booking_repo.get_one_month(payload.month, payload.year)
        return self._publish([self._resolve(booking) for booking in bookings])

    def yearly_report(self, payload: YearReportParams) -> Any:
        """Report the bookings checking in during the given year."""
        bookings = self.booking_repo.get_one_year(payload.year)
        return self._publish([self._resolve(booking) for booking in bookings])