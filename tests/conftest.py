"""
Shared pytest fixtures for LocalLife test suite.

Provides database sessions, record factories and an API test client.
"""

import os

# Keep the app's own engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import date, timedelta
from typing import Generator, List

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from locallife.database import Base
from locallife.models import DayRecordRow
from locallife.records import DailyRecord


# === Database Fixtures ===

@pytest.fixture(scope="function")
def test_engine():
    """Create an in-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db(session_factory) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# === Test Data Factories ===

@pytest.fixture
def create_day_record(db: Session):
    """Factory fixture to store day records."""
    def _create(date: str = "2024-06-01", **fields) -> DayRecordRow:
        row = DayRecordRow(date=date, **fields)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row
    return _create


@pytest.fixture
def correlated_records() -> List[DailyRecord]:
    """Ten days where activity rises with temperature."""
    temperatures = [10, 15, 20, 25, 30, 35, 15, 20, 25, 30]
    activity = [20, 25, 35, 40, 55, 65, 28, 38, 42, 58]
    start = date(2024, 6, 1)

    return [
        DailyRecord(
            date=(start + timedelta(days=i)).isoformat(),
            temperature=float(t),
            humidity=50.0 + i,
            uv_index=3 + i % 4,
            air_quality_index=40 + i,
            activity_score=float(a),
            step_count=int(a * 150),
            screen_time_minutes=300 - int(t) * 5,
            total_media_minutes=200 - int(t) * 3,
            places_visited=1 + i % 3,
            weather_condition="Sunny" if t >= 25 else "Cloudy"
        )
        for i, (t, a) in enumerate(zip(temperatures, activity))
    ]


# === API Testing Fixtures ===

@pytest.fixture
def test_client(session_factory):
    """Create a FastAPI test client reading from the test database."""
    from fastapi.testclient import TestClient
    from locallife.api import app
    from locallife.analysis_service import AnalysisService, get_analysis_service
    from locallife.data_source import DatabaseDataSource

    service = AnalysisService(DatabaseDataSource(session_factory), max_workers=2)
    app.dependency_overrides[get_analysis_service] = lambda: service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    service.shutdown()
