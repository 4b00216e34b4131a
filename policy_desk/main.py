import logging
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.cors import CORSMiddleware

from policy_desk.api.exception_handlers import register_exception_handlers
from policy_desk.api.v1.router import api_router
from policy_desk.core.config import settings
from policy_desk.db import engine

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_database_connection() -> None:
    """Open one connection at startup. The service cannot run without its database."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.critical("Failed to connect to the database", exc_info=True)
        raise SystemExit(1)
    logger.info("Connected to the database")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    check_database_connection()
    yield


app = FastAPI(title="Policy Desk", lifespan=lifespan)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
