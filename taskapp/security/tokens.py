import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal, Tuple, TypedDict

from jose import jwt

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (vérifié au décodage)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un access token
    - `refresh_ttl` : durée de vie d’un refresh token
    """
    secret: str
    issuer: str = "tasks-api"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=15)
    refresh_ttl: timedelta = timedelta(days=30)


# ==========================================================
# 🧱 Types
# ==========================================================

TokenType = Literal["access", "refresh"]

class TokenPair(TypedDict):
    access_token: str
    refresh_token: str
    token_type: str     # "bearer"
    expires_in: int     # durée de vie de l'access token (en secondes)

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant du propriétaire des tâches
    username: str
    typ: str            # "access" | "refresh"
    jti: str
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())


# ==========================================================
# 🎟️ Génération des tokens
# ==========================================================

def _encode(*, typ: TokenType, user_id: int, username: str, jti: str, ttl: timedelta, settings: JWTSettings) -> str:
    now = _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "username": username,
        "typ": typ,
        "jti": jti,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def create_access_token(*, user_id: int, username: str, settings: JWTSettings) -> str:
    """
    Crée un access token JWT court (par défaut 15 min).
    C'est lui qui accompagne chaque requête /tasks (header Authorization).
    """
    return _encode(
        typ="access", user_id=user_id, username=username,
        jti=new_jti(), ttl=settings.access_ttl, settings=settings,
    )


def create_refresh_token(*, user_id: int, username: str, jti: str, settings: JWTSettings) -> str:
    """
    Crée un refresh token JWT long (par défaut 30 jours).
    Le JTI est fourni pour être stocké côté serveur.
    """
    return _encode(
        typ="refresh", user_id=user_id, username=username,
        jti=jti, ttl=settings.refresh_ttl, settings=settings,
    )


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Décode et valide un token JWT (signature + expiration + émetteur).
    Lève JWTError en cas de signature invalide ou expirée.
    """
    decoded = jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        options={"verify_aud": False},
    )
    return decoded  # type: ignore[return-value]


# ==========================================================
# 🪙 Utilitaire pratique pour générer un couple complet
# ==========================================================

def mint_token_pair(*, user_id: int, username: str, settings: JWTSettings) -> Tuple[TokenPair, str]:
    """
    Génère un couple (access_token + refresh_token) cohérent.

    Retourne aussi le JTI du refresh : l'appelant doit l'enregistrer
    via le repository pour que le refresh soit révocable.
    """
    jti = new_jti()
    pair: TokenPair = {
        "access_token": create_access_token(user_id=user_id, username=username, settings=settings),
        "refresh_token": create_refresh_token(user_id=user_id, username=username, jti=jti, settings=settings),
        "token_type": "bearer",
        "expires_in": int(settings.access_ttl.total_seconds()),
    }
    return pair, jti
