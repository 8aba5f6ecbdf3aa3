import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from trackfit.core.config import settings
from trackfit.core.errors import DatabaseUnavailable

logger = logging.getLogger(__name__)

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def make_engine(database_url: str | None):
    """Engine for `database_url`, or None when no database is configured."""
    if not database_url:
        return None
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # One shared connection, otherwise each thread sees an empty database
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,   # helps avoid stale connections
    )


engine = make_engine(settings.database_url)

# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency we will use in FastAPI routes
def get_db():
    if engine is None:
        logger.error("DATABASE_URL is not set; database connection unavailable")
        raise DatabaseUnavailable()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
