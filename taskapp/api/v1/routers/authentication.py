from fastapi import APIRouter, Depends, Cookie, Response, status, HTTPException
from typing import Optional

from taskapp.api.v1.dependencies import (
    get_auth_service,
    get_current_user,
    get_client_ip_and_ua,
)
from taskapp.db.models.users import User
from taskapp.features.authentication.services import AuthService
from taskapp.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    TokenPairOut,
    RefreshIn,
    LogoutIn,
)
from taskapp.features.users.schemas import UserOut  # pour /me & sign-up

from taskapp.core.config import settings

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)


def _set_refresh_cookie(response: Response, refresh_token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_REFRESH_COOKIE_NAME,
        value=refresh_token,
        httponly=True,
        samesite=settings.AUTH_COOKIE_SAMESITE,
        secure=settings.AUTH_COOKIE_SECURE,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        path=settings.AUTH_COOKIE_PATH,
    )

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/sign-up",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    responses={409: {"description": "Nom d'utilisateur déjà pris"}},
)
def sign_up(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    return svc.sign_up(payload)

# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/sign-in",
    summary="Se connecter",
    description="Retourne un couple access/refresh. Le refresh est aussi posé en cookie httpOnly.",
    response_model=TokenPairOut,
)
def sign_in(
    payload: SignInIn,
    response: Response,
    svc: AuthService = Depends(get_auth_service),
    client_ctx=Depends(get_client_ip_and_ua),
):
    pair = svc.sign_in(payload, ip=client_ctx.ip, user_agent=client_ctx.user_agent)
    _set_refresh_cookie(response, pair.refresh_token)
    return pair

# -----------------------------
# Refresh (rotation)
# -----------------------------
@router.post(
    "/refresh",
    summary="Renouveler les tokens (rotation)",
    description="Lit le refresh dans le body **ou** dans le cookie httpOnly.",
    response_model=TokenPairOut,
)
def refresh(
    response: Response,
    payload: Optional[RefreshIn] = None,
    refresh_cookie: Optional[str] = Cookie(default=None, alias=settings.AUTH_REFRESH_COOKIE_NAME),
    svc: AuthService = Depends(get_auth_service),
    client_ctx=Depends(get_client_ip_and_ua),
):
    # Priorité payload > cookie (permet aussi d'appeler depuis un client non-navigateur)
    refresh_token = (payload.refresh_token if payload else None) or refresh_cookie
    if not refresh_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing refresh token")

    pair = svc.refresh(
        RefreshIn(refresh_token=refresh_token),
        ip=client_ctx.ip,
        user_agent=client_ctx.user_agent,
    )
    _set_refresh_cookie(response, pair.refresh_token)
    return pair

# -----------------------------
# Logout
# -----------------------------
@router.post(
    "/logout",
    summary="Se déconnecter (révocation du refresh)",
    status_code=status.HTTP_204_NO_CONTENT,
)
def logout(
    response: Response,
    payload: Optional[LogoutIn] = None,
    refresh_cookie: Optional[str] = Cookie(default=None, alias=settings.AUTH_REFRESH_COOKIE_NAME),
    svc: AuthService = Depends(get_auth_service),
):
    refresh_token = (payload.refresh_token if payload else None) or refresh_cookie
    if refresh_token:
        svc.log_out(LogoutIn(refresh_token=refresh_token))
    # Supprime le cookie côté client
    response.delete_cookie(key=settings.AUTH_REFRESH_COOKIE_NAME, path=settings.AUTH_COOKIE_PATH)
    return None

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={
        200: {"description": "Utilisateur courant"},
        401: {"description": "Token invalide ou expiré"},
    },
)
def me(user: User = Depends(get_current_user)):
    return user
