import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Configuration is read at import time; pin it before importing app modules
os.environ["FRIENDS_DATABASE_URL"] = "sqlite:///:memory:"
os.environ["FRIENDS_LOG_DIR"] = tempfile.mkdtemp(prefix="friends-api-logs-")
os.environ["FRIENDS_APP_NAME"] = "friendsApp"
os.environ["FRIENDS_ENABLE_TRANSLATION"] = "true"

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from database import Base, get_db
import models  # noqa: F401


@pytest.fixture
def db_engine():
    """In-memory database shared across threads (TestClient runs the app in another one)"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database session for testing"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_engine):
    """TestClient whose requests use the in-memory database"""
    from main import app

    TestingSessionLocal = sessionmaker(bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
