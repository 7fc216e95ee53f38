from sqlalchemy import Column, Integer, String, DateTime, Float, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()

class PlanetRecord(Base):
    """Published planets"""
    __tablename__ = "planets"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    # Casefolded name for case-insensitive lookups
    name_key = Column(String(255), nullable=False, index=True)
    size_km = Column(Float, nullable=False)
    atmosphere = Column(Text, nullable=False)
    type = Column(String(100), nullable=False)
    distance_from_sun_km = Column(Float, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

class PendingPlanetRecord(Base):
    """Submissions waiting for moderation"""
    __tablename__ = "pending_planets"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    name_key = Column(String(255), nullable=False, index=True)
    size_km = Column(Float, nullable=False)

    # Nullable for the legacy minimal intake
    atmosphere = Column(Text, nullable=True)
    type = Column(String(100), nullable=True)

    distance_from_sun_km = Column(Float, nullable=False)

    submitted_at = Column(DateTime, default=datetime.utcnow)
