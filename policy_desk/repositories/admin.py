from sqlalchemy.orm import Session

from policy_desk.db.base import utcnow
from policy_desk.db.models.admin import Admin as AdminModel


def get_admin_by_email(db: Session, email: str) -> AdminModel | None:
    """Get an admin by email. Emails are stored lower-cased."""
    return db.query(AdminModel).filter(AdminModel.email == email.lower()).first()


def get_admin_by_id(db: Session, admin_id: int) -> AdminModel | None:
    """Get an admin by ID."""
    return db.query(AdminModel).filter(AdminModel.id == admin_id).first()


def create_admin(db: Session, name: str, email: str, password_hash: str) -> AdminModel:
    """Create a new admin in the database. Pure data access - no business logic."""
    db_admin = AdminModel(
        name=name,
        email=email.lower(),
        password_hash=password_hash,
    )
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin


def save_admin(db: Session, admin: AdminModel) -> AdminModel:
    """
    Persist the admin aggregate together with every policy it owns.

    Added, changed and removed policies are written in the same commit.
    Always advances updated_at, since policy changes alone do not touch the
    admin row.
    """
    admin.updated_at = utcnow()
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin
