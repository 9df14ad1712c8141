"""
➡️ But : Représenter la session authentifiée côté client.

AuthState est passé explicitement aux vues (pas d'état global) ; les vues ne le modifient jamais.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from taskapp.client.fetch import ApiClient, RequestConfig


@dataclass(frozen=True)
class AuthState:
    token: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token)

    def headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def sign_in(api: ApiClient, username: str, password: str) -> AuthState:
    """Échange des identifiants contre un access token (lève ApiError si refusé)."""
    data = api.fetch_data(
        RequestConfig(url="/auth/sign-in", method="post", data={"username": username, "password": password}),
        show_success_toast=False,
    )
    return AuthState(token=data["access_token"], username=username)
