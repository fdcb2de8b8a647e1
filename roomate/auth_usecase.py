"""Login: check credentials and hand out a token."""

from __future__ import annotations

from typing import Any

from roomate.models import AuthRequest, AuthResponse


class AuthUseCase:
    """Authenticates users by e-mail and password."""

    def __init__(self, user_uc: Any, jwt_token: Any) -> None:
        self.user_uc = user_uc
        self.jwt_token = jwt_token

    def login(self, payload: AuthRequest) -> AuthResponse:
        """Return a token for the user matching the credentials; errors propagate."""
        user = self.user_uc.get_by_email_password(payload.email, payload.password)
        return self.jwt_token.generate_token(user)