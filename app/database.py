import logging
from typing import Generator

from sqlmodel import SQLModel, Session, create_engine

from app.core.config import get_settings

settings = get_settings()

connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.database_url, echo=settings.sql_echo, connect_args=connect_args)

logger = logging.getLogger(__name__)


def create_db_and_tables():
    # importar los modelos para registrarlos en la metadata
    from app.models import automation, expense, income, user  # noqa: F401
    logger.info("Creating tables on %s", engine.url)
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
