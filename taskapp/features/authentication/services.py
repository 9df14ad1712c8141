import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import HTTPException, status
from jose import JWTError

from taskapp.db.models.users import User
from taskapp.db.repositories.users import UserRepository
from taskapp.db.repositories.refresh_tokens import RefreshTokenRepository
from taskapp.security.password import verify_password, hash_password
from taskapp.security.tokens import (
    DecodedToken,
    JWTSettings,
    decode_token,
    mint_token_pair,
)
from taskapp.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    TokenPairOut,
    RefreshIn,
    LogoutIn,
)

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite rend des datetimes naïfs
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class AuthService:
    """
    Service d'authentification : orchestre les repositories + tokens.
    Ne contient pas d'accès SQL direct et lève des HTTPException propres.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        refresh_repo: RefreshTokenRepository,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.user_repo = user_repo
        self.refresh_repo = refresh_repo
        self.jwt = jwt_settings
        self.now_fn = now_fn

    # ---------- Helpers ----------
    def _decode(self, token: str, expected_typ: str) -> DecodedToken:
        try:
            decoded = decode_token(token, self.jwt)
        except JWTError:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

        if decoded.get("typ") != expected_typ:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
        return decoded

    def _issue(self, user: User, *, ip: Optional[str], user_agent: Optional[str]) -> TokenPairOut:
        pair, jti = mint_token_pair(user_id=user.id, username=user.username, settings=self.jwt)

        # Persist refresh (révocable)
        self.refresh_repo.create(
            jti=jti,
            user_id=user.id,
            expires_at=self.now_fn() + self.jwt.refresh_ttl,
            user_agent=user_agent,
            ip=ip,
        )
        return TokenPairOut(**pair)

    # ---------- Sign up ----------
    def sign_up(self, payload: SignUpIn) -> User:
        if self.user_repo.get_by_username(payload.username):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username already exists",
            )
        user = self.user_repo.create(
            username=payload.username,
            hashed_password=hash_password(payload.password),
        )
        logger.info("User %s signed up (id=%s)", user.username, user.id)
        return user

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn, *, ip: Optional[str] = None, user_agent: Optional[str] = None) -> TokenPairOut:
        user = self.user_repo.get_by_username(payload.username)
        if not user or not verify_password(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.warning("Failed sign-in for %r from %s", payload.username, ip)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )
        logger.info("User %s signed in", user.id)
        return self._issue(user, ip=ip, user_agent=user_agent)

    # ---------- Refresh (rotation) ----------
    def refresh(self, payload: RefreshIn, *, ip: Optional[str] = None, user_agent: Optional[str] = None) -> TokenPairOut:
        decoded = self._decode(payload.refresh_token, "refresh")

        jti = decoded.get("jti")
        if not jti:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

        # Vérifier en base (existe, non révoqué, non expiré)
        rec = self.refresh_repo.get_by_jti(jti)
        if not rec or rec.revoked_at is not None or _as_utc(rec.expires_at) <= self.now_fn():
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token invalid")

        user = self.user_repo.get(int(decoded["sub"]))
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        # Rotation : révoquer l'ancien et émettre un nouveau couple
        self.refresh_repo.revoke(jti)
        return self._issue(user, ip=ip, user_agent=user_agent)

    # ---------- Logout ----------
    def log_out(self, payload: LogoutIn) -> None:
        try:
            decoded = decode_token(payload.refresh_token, self.jwt)
        except JWTError:
            # Logout idempotent : silencieux si token illisible
            return

        jti = decoded.get("jti")
        if decoded.get("typ") != "refresh" or not jti:
            return

        if self.refresh_repo.revoke(jti):
            logger.info("User %s logged out", decoded.get("sub"))

    # ---------- Current user depuis access token ----------
    def get_current_user(self, *, access_token: str) -> User:
        decoded = self._decode(access_token, "access")

        user = self.user_repo.get(int(decoded["sub"]))
        if not user:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
        return user
