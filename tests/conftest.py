import os
import shutil
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_policy_desk.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["NOTIFICATION_WINDOW_DAYS"] = "14"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from policy_desk.core.security import create_admin_token, get_password_hash
from policy_desk.main import app
from policy_desk.repositories.admin import create_admin

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


@pytest.fixture(scope="function")
def session_factory():
    """Create a fresh database for each test, run migrations, and yield a session factory."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    finally:
        test_engine.dispose()
        shutil.rmtree(temp_db_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from policy_desk.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


def _create_admin_dict(db: Session, name: str, email: str, password: str) -> dict:
    admin = create_admin(db, name=name, email=email, password_hash=get_password_hash(password))
    return {
        "id": admin.id,
        "name": admin.name,
        "email": admin.email,
        "password": password,
        "tenant_id": admin.tenant_id,
    }


@pytest.fixture(scope="function")
def admin_user(db: Session) -> dict:
    """Create an agency admin for testing."""
    return _create_admin_dict(db, "Agency Admin", "admin@agency.example.com", "AdminPass1")


@pytest.fixture(scope="function")
def admin_token(admin_user: dict) -> str:
    """Get JWT token for the admin."""
    return create_admin_token(admin_user["id"])


@pytest.fixture(scope="function")
def other_admin_user(db: Session) -> dict:
    """Create a second, unrelated admin (different tenant)."""
    return _create_admin_dict(db, "Other Admin", "other@agency.example.com", "OtherPass1")


@pytest.fixture(scope="function")
def other_admin_token(other_admin_user: dict) -> str:
    return create_admin_token(other_admin_user["id"])


@pytest.fixture(scope="function")
def policy_payload():
    """Factory for a valid add-policy request body. End date defaults to 10 days from now."""

    def _make(**overrides) -> dict:
        now = datetime.now(timezone.utc)
        payload = {
            "name": "Jane Doe",
            "email": "jane.doe@example.com",
            "phone_number": "+15550100",
            "insurance_type": "Auto",
            "insurance_company": "Acme Insurance",
            "policy_number": "P1",
            "policy_start_date": (now - timedelta(days=355)).isoformat(),
            "policy_end_date": (now + timedelta(days=10)).isoformat(),
            "premium_amount": 1200.0,
        }
        payload.update(overrides)
        return payload

    return _make
