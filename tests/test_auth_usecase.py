from unittest import mock

import pytest

from roomate.auth_usecase import AuthUseCase
from roomate.models import AuthRequest, AuthResponse, User

password = "password"


@pytest.fixture
def user_uc():
    return mock.Mock()


@pytest.fixture
def jwt_token():
    return mock.Mock()


def _payload():
    return AuthRequest(email="test@example.com", password=password)


def test_login_success(user_uc, jwt_token):
    user = User(id="1", email="test@example.com", password=password)
    expected = AuthResponse(token="token")
    user_uc.get_by_email_password.return_value = user
    jwt_token.generate_token.return_value = expected

    result = AuthUseCase(user_uc, jwt_token).login(_payload())

    assert result == expected
    user_uc.get_by_email_password.assert_called_once_with("test@example.com", password)
    jwt_token.generate_token.assert_called_once_with(user)


def test_login_get_by_email_password_error(user_uc, jwt_token):
    failure = RuntimeError("some error")
    user_uc.get_by_email_password.side_effect = failure

    with pytest.raises(RuntimeError) as info:
        AuthUseCase(user_uc, jwt_token).login(_payload())

    assert info.value is failure
    jwt_token.generate_token.assert_not_called()


def test_login_generate_token_error(user_uc, jwt_token):
    user = User(id="1", email="test@example.com", password=password)
    failure = ValueError("token generation error")
    user_uc.get_by_email_password.return_value = user
    jwt_token.generate_token.side_effect = failure

    with pytest.raises(ValueError) as info:
        AuthUseCase(user_uc, jwt_token).login(_payload())

    assert info.value is failure
    user_uc.get_by_email_password.assert_called_once_with("test@example.com", password)
    jwt_token.generate_token.assert_called_once_with(user)