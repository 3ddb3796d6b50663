import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Point config at a throwaway directory BEFORE importing app modules
os.environ["TUTORIALS_DATA_DIR"] = tempfile.mkdtemp(prefix="tutorials-api-tests-")
os.environ.pop("TUTORIALS_DATABASE_URL", None)
os.environ.pop("TUTORIALS_LOG_DIR", None)

# Now import after path and environment are set
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from dependencies import get_tutorial_service
from models import Tutorial
from services.interfaces import ITutorialService


@pytest.fixture
def db_engine():
    """In-memory database shared by every connection of one test"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def app():
    from main import app as fastapi_app
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, db_engine):
    """TestClient backed by the in-memory database"""
    SessionLocal = sessionmaker(bind=db_engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def tutorial_service():
    """Mock service honouring the ITutorialService interface"""
    return Mock(spec=ITutorialService)


@pytest.fixture
def mock_client(app, tutorial_service):
    """TestClient whose handlers talk to the mock service"""
    app.dependency_overrides[get_tutorial_service] = lambda: tutorial_service
    return TestClient(app)


@pytest.fixture
def sample_tutorials():
    return [
        Tutorial(id=1, title="Java", description="Learn Java programming", published=True),
        Tutorial(id=2, title="Python", description="Learn Python programming", published=False),
        Tutorial(id=3, title="JavaScript", description="Learn JavaScript programming", published=True),
    ]
