"""Auth service: admin registration and login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import policy_desk.repositories.admin as admin_repo
from policy_desk.core.security import create_admin_token, get_password_hash
from policy_desk.db.models.admin import Admin as AdminModel
from policy_desk.errors import DuplicateResourceError, InvalidCredentialsError
from policy_desk.schemas.admin import AdminPublic, AdminRegister, AuthResponse

logger = logging.getLogger(__name__)


def _auth_response(admin: AdminModel, message: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        access_token=create_admin_token(admin.id),
        token_type="bearer",
        admin=AdminPublic.model_validate(admin),
    )


def register(db: Session, admin_data: AdminRegister) -> AuthResponse:
    """
    Register a new admin and issue its first session credential.

    - Email is compared and stored lower-cased
    - A tenant id is generated once, at creation

    Raises:
        DuplicateResourceError: If an admin with this email already exists.
    """
    if admin_repo.get_admin_by_email(db, admin_data.email):
        raise DuplicateResourceError("Admin already exists")

    try:
        admin = admin_repo.create_admin(
            db,
            name=admin_data.name,
            email=admin_data.email,
            password_hash=get_password_hash(admin_data.password),
        )
    except IntegrityError as e:
        # A concurrent registration took the email after the check above
        db.rollback()
        logger.warning("Concurrent registration for %s rejected", admin_data.email)
        raise DuplicateResourceError("Admin already exists") from e

    logger.info("Registered admin %s (tenant %s)", admin.id, admin.tenant_id)
    return _auth_response(admin, "Admin registered successfully")


def login(db: Session, email: str, password: str) -> AuthResponse:
    """
    Authenticate admin by email and password, return JWT access token.

    Raises:
        InvalidCredentialsError: If email not found or password incorrect.
    """
    admin = admin_repo.get_admin_by_email(db, email)
    if not admin or not admin.compare_password(password):
        logger.warning("Failed login attempt for %s", email)
        raise InvalidCredentialsError("Invalid credentials")

    logger.info("Admin %s logged in", admin.id)
    return _auth_response(admin, "Login successful")
