import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from biztime.api.core.config import settings

logger = logging.getLogger(__name__)


# ----------------------------------------------------
# 1. ENGINE FACTORY
# ----------------------------------------------------
def build_engine(database_url: str):
    """
    Create an engine for the given URL.

    SQLite connections are shared across the request threadpool, and an
    in-memory SQLite database must live on a single connection or every
    session would see an empty schema.
    """
    url = make_url(database_url)
    kwargs = {}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


engine = build_engine(settings.DATABASE_URL)

# ----------------------------------------------------
# 2. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 4. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session scoped to one request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 5. SCHEMA BOOTSTRAP
# ----------------------------------------------------
def init_db(bind=None):
    """
    Create any missing tables. Existing tables are left untouched.
    """
    # Register every model on Base.metadata
    from biztime.api.models import company_model, industry_model, invoice_model  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
