from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base
from app.settings import settings
import logging

log = logging.getLogger(__name__)

# The eight planets, used to seed an empty registry
SOLAR_SYSTEM = [
    {"name": "Mercury", "size_km": 4879, "atmosphere": "Trace (O2, Na, H2)", "type": "Terrestrial", "distance_from_sun_km": 57909227},
    {"name": "Venus", "size_km": 12104, "atmosphere": "Carbon Dioxide, Nitrogen", "type": "Terrestrial", "distance_from_sun_km": 108209475},
    {"name": "Earth", "size_km": 12742, "atmosphere": "Nitrogen, Oxygen", "type": "Terrestrial", "distance_from_sun_km": 149598262},
    {"name": "Mars", "size_km": 6779, "atmosphere": "Carbon Dioxide", "type": "Terrestrial", "distance_from_sun_km": 227943824},
    {"name": "Jupiter", "size_km": 139820, "atmosphere": "Hydrogen, Helium", "type": "Gas Giant", "distance_from_sun_km": 778340821},
    {"name": "Saturn", "size_km": 116460, "atmosphere": "Hydrogen, Helium", "type": "Gas Giant", "distance_from_sun_km": 1426666422},
    {"name": "Uranus", "size_km": 50724, "atmosphere": "Hydrogen, Helium, Methane", "type": "Ice Giant", "distance_from_sun_km": 2870658186},
    {"name": "Neptune", "size_km": 49244, "atmosphere": "Hydrogen, Helium, Methane", "type": "Ice Giant", "distance_from_sun_km": 4498396441},
]


def _engine_kwargs(database_url: str) -> dict:
    kwargs = {"pool_pre_ping": True, "echo": settings.debug}
    if database_url.startswith("sqlite"):
        # One connection may serve several threads under the test client
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_recycle"] = 300
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind=None):
    """Create all tables in the database"""
    Base.metadata.create_all(bind=bind or engine)

def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def seed_solar_system(db) -> int:
    """Publish the eight planets into an empty registry; returns how many were added"""
    from app.services.planet_store import PublishedRegistry

    registry = PublishedRegistry(db)
    if registry.list_all():
        return 0

    for planet in SOLAR_SYSTEM:
        registry.insert(planet)
    return len(SOLAR_SYSTEM)

def init_database():
    """Initialize database with default data"""
    create_tables()

    if not settings.seed_solar_system:
        return

    db = SessionLocal()
    try:
        added = seed_solar_system(db)
        if added:
            log.info("✅ Seeded %d solar system planets", added)
        else:
            log.info("✅ Planet registry already populated")
    except Exception:
        log.exception("❌ Error initializing database")
        db.rollback()
    finally:
        db.close()
