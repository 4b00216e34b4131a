from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

import policy_desk.repositories.admin as admin_repo
from policy_desk.core.security import ACCESS_TOKEN_TYPE, decode_token
from policy_desk.db import SessionLocal
from policy_desk.db.models.admin import Admin
from policy_desk.errors import InvalidTokenError, NotFoundError, UnauthorizedError

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/login", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_admin(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Admin:
    """
    Resolve the session credential to exactly one admin aggregate.

    Raises:
        UnauthorizedError: If no bearer token was sent.
        TokenExpiredError, InvalidTokenError: From decode_token.
        NotFoundError: If the token's admin no longer exists.
    """
    if not token:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(token)

    # Validate token type - must be "access"
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError("Invalid token")

    subject = payload.get("sub")
    try:
        admin_id = int(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError("Invalid token") from None

    admin = admin_repo.get_admin_by_id(db, admin_id)
    if admin is None:
        raise NotFoundError("Admin not found")

    return admin
