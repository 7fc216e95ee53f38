from .database import create_tables, get_db, init_database, seed_solar_system, engine, SessionLocal, SOLAR_SYSTEM
from .models import Base, PlanetRecord, PendingPlanetRecord

__all__ = [
    "create_tables", "get_db", "init_database", "seed_solar_system", "engine", "SessionLocal",
    "SOLAR_SYSTEM", "Base", "PlanetRecord", "PendingPlanetRecord"
]
