from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.engine import make_url

from config.app_config import settings


def build_engine(database_url: str):
    """Create an engine; SQLite files get their parent directory created."""
    url = make_url(database_url)
    if url.get_backend_name() != 'sqlite':
        return create_engine(database_url, echo=False, pool_pre_ping=True, pool_recycle=3600)

    if url.database and url.database != ':memory:':
        Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

    sqlite_engine = create_engine(
        database_url,
        connect_args={'check_same_thread': False},
        echo=False,
        pool_pre_ping=True,
    )

    # Enable WAL mode on connection
    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
