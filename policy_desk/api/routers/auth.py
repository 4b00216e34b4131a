from fastapi import APIRouter, Depends, Form, status
from sqlalchemy.orm import Session

from policy_desk.api.deps import get_current_admin, get_db
from policy_desk.db.models.admin import Admin as AdminModel
from policy_desk.schemas.admin import AdminPublic, AdminRegister, AuthResponse
from policy_desk.services import auth as auth_service

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(admin_data: AdminRegister, db: Session = Depends(get_db)):
    """Register a new admin. Returns a session token and the admin's public profile."""
    return auth_service.register(db, admin_data)


@router.post("/login", response_model=AuthResponse)
def login(
    username: str = Form(...),  # OAuth2 uses "username", but we treat it as email
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """
    Login endpoint - returns JWT token.
    Uses form data for OAuth2 compatibility (Swagger UI authorization).
    The 'username' field should contain the admin's email address.
    """
    return auth_service.login(db, email=username, password=password)


@router.get("/me", response_model=AdminPublic)
def get_current_admin_info(current_admin: AdminModel = Depends(get_current_admin)):
    """Get current authenticated admin information."""
    return AdminPublic.model_validate(current_admin)
