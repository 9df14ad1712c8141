"""
➡️ But : Fournir l'aide HTTP générique utilisée par toutes les vues.

ApiClient.fetch_data(config) : envoie la requête décrite par un RequestConfig (méthode, url, corps, headers),
gère le flag `loading`, pousse un toast de succès ou d'erreur et retourne le JSON décodé.

Les erreurs (statut HTTP ≥ 400 ou erreur réseau) sont notifiées PUIS relevées (ApiError) : jamais avalées.

🔹 Avantages :

Les vues ne parlent jamais directement à httpx.

Testable avec fastapi.testclient.TestClient (qui est un httpx.Client).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


@dataclass
class RequestConfig:
    url: str
    method: str = "get"
    data: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Toast:
    level: str  # "success" | "error"
    message: str


class Notifier:
    """Collecte les toasts affichés à l'utilisateur."""

    def __init__(self) -> None:
        self.toasts: List[Toast] = []

    def success(self, message: str) -> None:
        self.toasts.append(Toast("success", message))

    def error(self, message: str) -> None:
        self.toasts.append(Toast("error", message))

    @property
    def last(self) -> Optional[Toast]:
        return self.toasts[-1] if self.toasts else None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        # erreurs de validation FastAPI : [{"loc": [...], "msg": "..."}]
        return "; ".join(str(d.get("msg", d)) for d in detail)
    if detail:
        return str(detail)
    return response.reason_phrase or f"HTTP {response.status_code}"


class ApiClient:
    def __init__(
        self,
        http: httpx.Client,
        *,
        base_path: str = "/api/v1",
        notifier: Optional[Notifier] = None,
    ):
        self.http = http
        self.base_path = base_path.rstrip("/")
        self.notifier = notifier or Notifier()
        self.loading = False

    def fetch_data(self, config: RequestConfig, *, show_success_toast: bool = True) -> Dict[str, Any]:
        method = config.method.upper()
        url = self.base_path + config.url
        logger.debug("%s %s", method, url)

        self.loading = True
        try:
            response = self.http.request(method, url, json=config.data, headers=config.headers)
        except httpx.HTTPError as e:
            self.notifier.error(str(e) or "Network error")
            raise ApiError(str(e) or "Network error") from e
        finally:
            self.loading = False

        if response.is_error:
            message = _error_message(response)
            logger.debug("%s %s -> %s %s", method, url, response.status_code, message)
            self.notifier.error(message)
            raise ApiError(message, status_code=response.status_code)

        data: Dict[str, Any] = response.json() if response.content else {}
        if show_success_toast:
            self.notifier.success(data.get("msg") or "Done")
        return data
