import base64
import json
from unittest import mock

import jwt
import pytest
import requests
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from roomate.google_api import GoogleApiError, GoogleDrive, GoogleSheet, SheetConfig
from roomate.models import SheetData

TOKEN_URI = "https://oauth2.example.com/token"
CLIENT_EMAIL = "robot@example.com"


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self.response

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self.response


class FailingSession:
    def get(self, url, **kwargs):
        raise requests.ConnectionError("unreachable")

    def post(self, url, **kwargs):
        raise requests.ConnectionError("unreachable")


@pytest.fixture(scope="module")
def key_material():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo
    )
    account = {
        "type": "service_account",
        "client_email": CLIENT_EMAIL,
        "private_key": private_pem,
        "private_key_id": "placeholder",
        "token_uri": TOKEN_URI,
    }
    encoded = base64.b64encode(json.dumps(account).encode()).decode()
    return encoded, public_pem


@pytest.fixture
def config(key_material):
    return SheetConfig(spreadsheet_id="sheet-1", service_account_key=key_material[0])


def _encode(document):
    return base64.b64encode(json.dumps(document).encode()).decode()


def test_sheet_service_authorises_with_service_account(config, key_material):
    session = GoogleSheet(config).new_service()
    prepared = requests.Request("GET", "https://sheets.example.com/x").prepare()
    with mock.patch("requests.post") as post:
        post.return_value = FakeResponse(200, {"access_token": "token", "expires_in": 3600})
        session.auth(prepared)
        session.auth(requests.Request("GET", "https://sheets.example.com/y").prepare())
    assert prepared.headers["Authorization"] == "Bearer token"
    assert post.call_count == 1
    assert post.call_args.args[0] == TOKEN_URI
    data = post.call_args.kwargs["data"]
    claims = jwt.decode(data["assertion"], key_material[1], algorithms=["RS256"], audience=TOKEN_URI)
    assert claims["iss"] == CLIENT_EMAIL
    assert claims["scope"] == "https://www.googleapis.com/auth/spreadsheets"


def test_drive_service_uses_drive_scope(config, key_material):
    session = GoogleDrive(config).new_service()
    prepared = requests.Request("GET", "https://drive.example.com/x").prepare()
    with mock.patch("requests.post") as post:
        post.return_value = FakeResponse(200, {"access_token": "token", "expires_in": 3600})
        session.auth(prepared)
    assert prepared.headers["Authorization"] == "Bearer token"
    assert post.call_args.args[0] == TOKEN_URI
    claims = jwt.decode(
        post.call_args.kwargs["data"]["assertion"], key_material[1], algorithms=["RS256"], audience=TOKEN_URI
    )
    assert claims["scope"] == "https://www.googleapis.com/auth/drive"


def test_token_endpoint_failure_raises(config):
    session = GoogleSheet(config).new_service()
    prepared = requests.Request("GET", "https://sheets.example.com/x").prepare()
    with mock.patch("requests.post") as post:
        post.return_value = FakeResponse(400, text="bad grant")
        with pytest.raises(GoogleApiError, match="cannot fetch token"):
            session.auth(prepared)


def test_sheet_service_rejects_undecodable_key():
    with pytest.raises(GoogleApiError, match="^Failed to decode service account key"):
        GoogleSheet(SheetConfig("sheet-1", "!!not base64!!")).new_service()


def test_sheet_service_rejects_wrong_credentials_type():
    config = SheetConfig("sheet-1", _encode({"type": "authorized_user"}))
    with pytest.raises(GoogleApiError, match="^Failed to create JWT config: .*'type' field is"):
        GoogleSheet(config).new_service()


def test_sheet_service_rejects_invalid_json():
    config = SheetConfig("sheet-1", base64.b64encode(b"{not json").decode())
    with pytest.raises(GoogleApiError, match="^Failed to create JWT config"):
        GoogleSheet(config).new_service()


def test_drive_service_rejects_wrong_credentials_type():
    config = SheetConfig("sheet-1", _encode({"type": "authorized_user"}))
    with pytest.raises(GoogleApiError, match="'type' field is"):
        GoogleDrive(config).new_service()


def test_download_exports_xlsx(config):
    response = FakeResponse(200, text="workbook")
    session = FakeSession(response)
    assert GoogleDrive(config).download(session) is response
    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert "/files/sheet-1/export" in url
    assert kwargs["params"]["mimeType"] == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def test_download_missing_file(config):
    session = FakeSession(FakeResponse(404, {"error": {"message": "File not found"}}))
    with pytest.raises(GoogleApiError, match="^File not found: ") as info:
        GoogleDrive(config).download(session)
    assert info.value.status_code == 404


def test_download_other_failure(config):
    session = FakeSession(FakeResponse(500, text="boom"))
    with pytest.raises(GoogleApiError, match="^Failed to download file: .*boom"):
        GoogleDrive(config).download(session)


def test_download_network_failure(config):
    with pytest.raises(GoogleApiError, match="^Failed to download file: "):
        GoogleDrive(config).download(FailingSession())


def test_append_sheet_sends_rows(config):
    session = FakeSession(FakeResponse(200, {}))
    rows = [SheetData("1", "2023-12-14", "2023-12-16", "John", "Jane", True, "Accepted", 1000)]
    GoogleSheet(config).append_sheet(rows, session)
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url.endswith(":append")
    assert "/spreadsheets/sheet-1/values/" in url
    assert kwargs["params"] == {"valueInputOption": "USER_ENTERED"}
    assert kwargs["json"] == {"values": [["1", "2023-12-14", "2023-12-16", "John", "Jane", True, "Accepted", 1000]]}


def test_append_sheet_failure(config):
    session = FakeSession(FakeResponse(403, {"error": {"message": "denied"}}))
    with pytest.raises(GoogleApiError, match="^Failed to append sheet data: .*denied"):
        GoogleSheet(config).append_sheet([SheetData(booking_id="1")], session)


def test_delete_sheet_data_clears_range(config):
    session = FakeSession(FakeResponse(200, {}))
    GoogleSheet(config).delete_sheet_data(session)
    method, url, _ = session.calls[0]
    assert method == "POST"
    assert url.endswith(":clear")


def test_delete_sheet_data_failure(config):
    with pytest.raises(GoogleApiError, match="^Failed to delete sheet data: "):
        GoogleSheet(config).delete_sheet_data(FailingSession())