import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wishlist.models.tables import Base

logger = logging.getLogger(__name__)


def create_session_factory(database_url: str) -> sessionmaker:
    """
    Connect to ``database_url`` and create any missing tables.

    SQLite connections are shared across the server's worker threads. An
    in-memory SQLite database lives on a single pooled connection, so every
    session sees the same data.
    """
    url = make_url(database_url)
    engine_kwargs = {}
    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **engine_kwargs)
    Base.metadata.create_all(engine)
    logger.info(f"Connected to {url.render_as_string(hide_password=True)}")
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
