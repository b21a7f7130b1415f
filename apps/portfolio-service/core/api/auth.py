"""
Admin login, logout and current-user endpoints.

A successful login creates an AdminSession and hands the token back both
in the response body and as an HttpOnly cookie.
"""
import logging
from datetime import timedelta
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Header, Request, Response
from sqlalchemy.orm import Session

from core.api.deps import extract_session_token, get_admin_context
from core.db import models, schemas
from core.db.database import get_db
from core.db.repositories import sessions as session_repo
from core.db.repositories import users as user_repo
from core.errors import AuthError
from core.utils.settings import get_settings
from core.utils.token_crypto import (
    hash_password,
    parse_token,
    password_needs_rehash,
    verify_password,
    verify_secret,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def authenticate_admin(db: Session, username: str, password: str) -> models.User:
    user = user_repo.get_user_by_username(db, username)
    if user is None or not user.is_admin or not verify_password(password, user.password_hash):
        logger.warning("login_failed", extra={"username": username})
        raise AuthError("Invalid credentials")
    if password_needs_rehash(user.password_hash):
        user_repo.set_password_hash(db, user, hash_password(password))
    return user


def _set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


@router.post("/login", response_model=schemas.LoginResponse)
def login(
    payload: schemas.LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    user = authenticate_admin(db, payload.username, payload.password)
    settings = get_settings()
    session, token = session_repo.create_session(
        db,
        user_id=user.id,
        max_age=timedelta(hours=settings.session_max_age_hours),
    )
    _set_session_cookie(response, token)
    logger.info("login_succeeded", extra={"user_id": str(user.id), "token_id": session.token_id})
    return schemas.LoginResponse(
        message="Login successful",
        user=schemas.User.model_validate(user),
        token=token,
    )


@router.post("/logout")
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(default=None),
):
    """Revoke the presented session and clear the cookie.

    A stale or unknown session still gets its cookie cleared.
    """
    token = extract_session_token(request, authorization)
    parsed = parse_token(token) if token else None
    if parsed:
        session = session_repo.get_by_token_id(db, token_id=parsed.token_id)
        if session is not None and verify_secret(parsed.secret, session.token_hash):
            session_repo.revoke_session(db, session)
            logger.info("logout", extra={"token_id": parsed.token_id})
    response.delete_cookie(get_settings().session_cookie_name, path="/")
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=schemas.User)
def current_user(context: Tuple[models.User, models.AdminSession] = Depends(get_admin_context)):
    user, _session = context
    return user
