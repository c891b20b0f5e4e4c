"""
LocalLife Data Models

SQLAlchemy model for the daily record table written by the collectors.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, DateTime, Index

from .database import Base


class DayRecordRow(Base):
    """
    One calendar day of environmental and behavioral measurements.

    Rows are produced by external collectors; the analysis engine
    only reads them.
    """
    __tablename__ = "day_records"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(String(10), nullable=False, unique=True)  # YYYY-MM-DD

    # Environment
    temperature = Column(Float, default=0.0)
    humidity = Column(Float, default=0.0)
    uv_index = Column(Integer, default=0)
    air_quality_index = Column(Integer, default=0)
    weather_condition = Column(String(50))

    # Behavior
    activity_score = Column(Float, default=0.0)
    step_count = Column(Integer, default=0)
    screen_time_minutes = Column(Integer, default=0)
    total_media_minutes = Column(Integer, default=0)
    places_visited = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_day_records_date', 'date'),
    )
