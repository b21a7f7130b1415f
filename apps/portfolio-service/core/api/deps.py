"""
API dependency helpers.

Resolves the admin session from the session cookie or an
`Authorization: Bearer` header.
"""
import logging
from typing import Optional, Tuple

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from core.db import models
from core.db.database import get_db
from core.db.repositories import sessions as session_repo
from core.db.repositories import users as user_repo
from core.errors import AuthError
from core.utils.settings import get_settings
from core.utils.token_crypto import parse_token, verify_secret

logger = logging.getLogger(__name__)


def extract_session_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    """Bearer header wins over the cookie when both are present."""
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:].strip()
        if token:
            return token
    cookie = request.cookies.get(get_settings().session_cookie_name)
    return cookie.strip() if cookie else None


def resolve_admin_session(db: Session, token: Optional[str]) -> Tuple[models.User, models.AdminSession]:
    if not token:
        raise AuthError("Authentication required")
    parsed = parse_token(token)
    if not parsed:
        logger.warning("auth_rejected", extra={"reason": "malformed_token"})
        raise AuthError("Invalid session")
    session = session_repo.get_by_token_id(db, token_id=parsed.token_id)
    if session is None or not verify_secret(parsed.secret, session.token_hash):
        logger.warning("auth_rejected", extra={"reason": "unknown_session", "token_id": parsed.token_id})
        raise AuthError("Invalid session")
    if not session_repo.is_active(session):
        logger.warning("auth_rejected", extra={"reason": "inactive_session", "token_id": parsed.token_id})
        raise AuthError("Session expired")
    user = user_repo.get_user(db, session.user_id)
    if user is None or not user.is_admin:
        logger.warning("auth_rejected", extra={"reason": "not_admin", "token_id": parsed.token_id})
        raise AuthError("Invalid session")
    session_repo.mark_used_now(db, session=session)
    return user, session


# Contract:
# Returns (User, AdminSession); raises AuthError (401) otherwise.
def get_admin_context(
    request: Request,
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(default=None),
) -> Tuple[models.User, models.AdminSession]:
    return resolve_admin_session(db, extract_session_token(request, authorization))


def get_current_admin(
    context: Tuple[models.User, models.AdminSession] = Depends(get_admin_context),
) -> models.User:
    user, _session = context
    return user


def get_optional_admin(
    request: Request,
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(default=None),
) -> Optional[models.User]:
    """Like `get_current_admin` but returns None for anonymous callers."""
    token = extract_session_token(request, authorization)
    if not token:
        return None
    try:
        user, _session = resolve_admin_session(db, token)
    except AuthError:
        return None
    return user
