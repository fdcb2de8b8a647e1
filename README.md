# roomate

This is the core of a hotel booking back end. A booking holds one or more
rooms, and each booked room can carry extra services. The package can:

- price a booking and store it,
- accept or reject a booking,
- sign staff in with tokens,
- hash passwords,
- write booking reports to a Google spreadsheet and export that spreadsheet
  as an xlsx workbook.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `roomate.models` holds the dataclasses.
  - Records: `Role`, `User`, `Customer`, `Room`, `Service`, `Booking`,
    `BookingDetail` and `BookingDetailService`.
  - Request and response payloads: `GetAllParams`, `CreateBookingParams`,
    `UpdateBookingStatusParams`, `AuthRequest`, `AuthResponse`,
    `DayReportParams`, `MonthReportParams` and `YearReportParams`.
  - The report row `SheetData`. Its `as_row()` method returns the field
    values in column order.
- `roomate.db` has `Database`, which wraps a qmark-style DB-API connection
  such as `sqlite3`.
  - Statements are written with `$1`, `$2`, … placeholders.
  - The methods are `query_one`, `query_all`, `execute` and `transaction()`.
  - Outside a transaction, each statement is committed on its own.
    `transaction()` is a context manager: it commits when the block succeeds
    and rolls back when the block raises.
  - `query_one` raises `NoRowsError` when no row comes back.
- `roomate.queries` holds the SQL text as module constants.
- `roomate.booking_repository` has `BookingRepository`, which stores bookings.
  - Reading and creating cover the booking together with its details and
    their services. `create` does all of its inserts in one transaction.
  - `update_status` records whether a booking is accepted.
  - `delete` is a soft delete.
  - `get_one_day`, `get_one_month` and `get_one_year` fetch report rows.
- `roomate.booking_usecase` has `BookingUseCase`, which holds the booking rules:
  - The number of nights is the number of days between check-in and
    check-out.
  - Each room line costs the room's price times the nights, plus the price of
    every service on that line.
  - The total is the sum of the lines.
  - Accepting a booking marks each of its rooms as booked.
- `roomate.auth_usecase` has `AuthUseCase`. Its `login` looks the user up by
  e-mail and password and returns the token from a `JwtToken`.
- `roomate.jwt_token` has `JwtToken`.
  - It issues HS256 tokens that carry `userId` and `role`.
  - `verify_token` checks a token.
  - `refresh_token` re-signs a token so that it expires 24 hours later.
  - A bad token raises `InvalidTokenError`.
- `roomate.rsa_token` provides `create_token` and `validate_token`.
  - They work with RS256 tokens and base64-encoded PEM keys.
  - Failures raise `TokenError`.
- `roomate.passwords` does bcrypt hashing at cost 10.
  - Hashing: `hash_password` and `generate_password_hash`.
  - Checking: `verify_password` and `compare_password_hash`. A mismatch
    raises `PasswordMismatchError`.
- `roomate.google_api` talks to Google through a service account, configured
  by `SheetConfig`.
  - `GoogleSheet` clears and appends rows in the range `Sheet1!A2:H`.
  - `GoogleDrive` exports the spreadsheet as xlsx.
  - Failures raise `GoogleApiError`.
- `roomate.report_usecase` has `ReportUseCase`, which builds the daily, monthly
  and yearly reports.
  - It replaces user and customer ids with names and trims dates to
    `YYYY-MM-DD`.
  - It rewrites the sheet and returns the exported workbook response.
- `roomate.responses` builds the JSON envelopes `single_response` and
  `paged_response`. Each result has a `to_dict()` method.
- `roomate.logger` has `RequestLogger`, which appends `RequestLog` entries to a
  file. `log_fatal` writes the entry and then exits with status 1.

## Example

```python
from datetime import timedelta

from roomate.booking_usecase import BookingUseCase
from roomate.jwt_token import JwtToken
from roomate.models import (
    BookingDetail, BookingDetailService, CreateBookingParams, Room, Service, User,
)
from roomate.passwords import hash_password, verify_password


class Rooms:
    def get_room(self, room_id):
        return Room(id=room_id, price=150000)

    def update_status(self, room_id):
        pass


class Services:
    def get_service(self, service_id):
        return Service(id=service_id, name="Breakfast", price=80000)


class Store:
    def create(self, booking):
        return booking


bookings = BookingUseCase(Store(), Rooms(), Services())
booking = bookings.create_booking(
    CreateBookingParams(
        check_in="2023-12-14",
        check_out="2023-12-16",
        user_id="1",
        customer_id="1",
        booking_details=[
            BookingDetail(room_id="1", services=[BookingDetailService(service_id="1")])
        ],
    )
)
print(booking.night, booking.total_price)  # 2 380000

tokens = JwtToken("secret", timedelta(hours=1))
issued = tokens.generate_token(User(id="1", name="Ana", role_name="admin"))
print(tokens.verify_token(issued.token)["role"])  # admin

password = "password"
hashed = hash_password(password)
verify_password(hashed, password)  # raises PasswordMismatchError on a mismatch
```

`BookingUseCase` and `ReportUseCase` accept any objects that provide the
methods they call:

- `get_room` and `update_status` for rooms,
- `get_service` for services,
- `get_user` and `get_customer` for the report.

`AuthUseCase` takes any object with `get_by_email_password`.

## What this package does not do

- It has no repositories or use cases for customers, roles, rooms, services
  or users. Only bookings are stored here. Room, service, user and customer
  lookups must come from your own code.
- It does not create the database schema. `Database` runs the statements in
  `roomate.queries` against tables that must already exist.
- It has no HTTP server and no command-line program. `roomate.responses` and
  `roomate.logger` only build response bodies and log entries; you supply the
  web layer yourself.

## Tests

```
pytest
```