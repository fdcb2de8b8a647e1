"""Service-account access to the booking report spreadsheet on Google Sheets and Drive."""

from __future__ import annotations

import base64
import binascii
import json
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import jwt
import requests
from requests.auth import AuthBase

from roomate.models import SheetData

DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_RANGE = "Sheet1!A2:H"

_DRIVE_API = "https://www.googleapis.com/drive/v3"
_SHEETS_API = "https://sheets.googleapis.com/v4"
_TIMEOUT = 60
_ASSERTION_LIFETIME = 3600
_EXPIRY_DELTA = 10
_JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"


class GoogleApiError(Exception):
    """Raised when a Google API call or credential setup fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class SheetConfig:
    """Where the report lives and the base64-encoded service account JSON key."""

    spreadsheet_id: str = ""
    service_account_key: str = ""


class _ServiceAccountAuth(AuthBase):
    """Adds a bearer token obtained through the service-account JWT grant."""

    def __init__(self, client_email: str, private_key: str, private_key_id: str, token_uri: str, scope: str) -> None:
        self.client_email = client_email
        self.private_key = private_key
        self.private_key_id = private_key_id
        self.token_uri = token_uri
        self.scope = scope
        self._token: str | None = None
        self._expiry = 0.0

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self._access_token()}"
        return request

    def _access_token(self) -> str:
        now = time.time()
        if self._token is None or now >= self._expiry - _EXPIRY_DELTA:
            self._token, self._expiry = self._fetch(now)
        return self._token

    def _fetch(self, now: float) -> tuple[str, float]:
        issued = int(now)
        claims = {
            "iss": self.client_email,
            "scope": self.scope,
            "aud": self.token_uri,
            "exp": issued + _ASSERTION_LIFETIME,
            "iat": issued,
        }
        headers = {"kid": self.private_key_id} if self.private_key_id else None
        try:
            assertion = jwt.encode(claims, self.private_key, algorithm="RS256", headers=headers)
        except (jwt.PyJWTError, TypeError, ValueError) as error:
            raise GoogleApiError(f"oauth2: cannot fetch token: {error}") from error
        try:
            response = requests.post(
                self.token_uri,
                data={"grant_type": _JWT_BEARER_GRANT, "assertion": assertion},
                timeout=_TIMEOUT,
            )
        except requests.RequestException as error:
            raise GoogleApiError(f"oauth2: cannot fetch token: {error}") from error
        if not 200 <= response.status_code < 300:
            raise GoogleApiError(
                f"oauth2: cannot fetch token: {response.status_code}\nResponse: {response.text}",
                response.status_code,
            )
        try:
            payload = response.json()
            token = payload["access_token"]
            expires_in = int(payload.get("expires_in") or _ASSERTION_LIFETIME)
        except (ValueError, KeyError, TypeError) as error:
            raise GoogleApiError(f"oauth2: cannot parse token response: {error}") from error
        return token, now + expires_in


def _decode_key(encoded: str) -> bytes:
    return base64.b64decode(encoded.replace("\r", "").replace("\n", ""), validate=True)


def _jwt_config(credentials: bytes, scope: str) -> _ServiceAccountAuth:
    data = json.loads(credentials)
    if not isinstance(data, dict):
        raise ValueError("google: credentials JSON is not an object")
    kind = data.get("type", "")
    if kind != "service_account":
        raise ValueError(
            f"google: read JWT from JSON credentials: 'type' field is \"{kind}\" (expected \"service_account\")"
        )
    return _ServiceAccountAuth(
        client_email=data.get("client_email", ""),
        private_key=data.get("private_key", ""),
        private_key_id=data.get("private_key_id", ""),
        token_uri=data.get("token_uri") or DEFAULT_TOKEN_URI,
        scope=scope,
    )


def _authorized_session(auth: _ServiceAccountAuth) -> requests.Session:
    session = requests.Session()
    session.auth = auth
    return session


def _check_response(response: Any) -> None:
    code = response.status_code
    if 200 <= code < 300:
        return
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        raise GoogleApiError(f"googleapi: got HTTP response code {code} with body: {response.text}", code) from None
    raise GoogleApiError(f"googleapi: Error {code}: {message}", code)


class GoogleDrive:
    """Exports the report spreadsheet from Google Drive."""

    def __init__(self, config: SheetConfig) -> None:
        self.config = config

    def new_service(self) -> requests.Session:
        """Return a session authorised for the Drive scope; no request is sent yet."""
        try:
            credentials = _decode_key(self.config.service_account_key)
            auth = _jwt_config(credentials, DRIVE_SCOPE)
        except (binascii.Error, ValueError) as error:
            raise GoogleApiError(str(error)) from error
        return _authorized_session(auth)

    def download(self, service: Any) -> Any:
        """Export the spreadsheet as an xlsx workbook and return the HTTP response."""
        url = f"{_DRIVE_API}/files/{quote(self.config.spreadsheet_id, safe='')}/export"
        try:
            response = service.get(url, params={"mimeType": XLSX_MIME_TYPE}, timeout=_TIMEOUT)
            _check_response(response)
        except GoogleApiError as error:
            if error.status_code == 404:
                raise GoogleApiError(f"File not found: {error}", 404) from error
            raise GoogleApiError(f"Failed to download file: {error}", error.status_code) from error
        except requests.RequestException as error:
            raise GoogleApiError(f"Failed to download file: {error}") from error
        return response


class GoogleSheet:
    """Writes report rows into the spreadsheet on Google Sheets."""

    def __init__(self, config: SheetConfig) -> None:
        self.config = config

    def new_service(self) -> requests.Session:
        """Return a session authorised for the Sheets scope; no request is sent yet."""
        try:
            credentials = _decode_key(self.config.service_account_key)
        except (binascii.Error, ValueError) as error:
            raise GoogleApiError(f"Failed to decode service account key: {error}") from error
        try:
            auth = _jwt_config(credentials, SHEETS_SCOPE)
        except ValueError as error:
            raise GoogleApiError(f"Failed to create JWT config: {error}") from error
        return _authorized_session(auth)

    def _values_url(self, action: str) -> str:
        spreadsheet = quote(self.config.spreadsheet_id, safe="")
        return f"{_SHEETS_API}/spreadsheets/{spreadsheet}/values/{quote(SHEET_RANGE, safe='')}:{action}"

    def append_sheet(self, sheet_data: list[SheetData], service: Any) -> None:
        """Append one row per entry below the header row, as if typed by a user."""
        body = {"values": [row.as_row() for row in sheet_data]}
        try:
            response = service.post(
                self._values_url("append"),
                params={"valueInputOption": "USER_ENTERED"},
                json=body,
                timeout=_TIMEOUT,
            )
            _check_response(response)
        except (GoogleApiError, requests.RequestException) as error:
            raise GoogleApiError(f"Failed to append sheet data: {error}", getattr(error, "status_code", None)) from error

    def delete_sheet_data(self, service: Any) -> None:
        """Clear every row below the header row."""
        try:
            response = service.post(self._values_url("clear"), json={}, timeout=_TIMEOUT)
            _check_response(response)
        except (GoogleApiError, requests.RequestException) as error:
            raise GoogleApiError(f"Failed to delete sheet data: {error}", getattr(error, "status_code", None)) from error