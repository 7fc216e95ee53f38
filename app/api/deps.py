from fastapi import Depends, Form, Request
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.planet import PlanetSubmissionForm
from app.services import ModerationEngine, PublishedRegistry, PendingStore
from typing import Optional


def get_moderation_engine(db: Session = Depends(get_db)) -> ModerationEngine:
    """Dependency building the engine over the request's database session"""
    return ModerationEngine(PublishedRegistry(db), PendingStore(db))


def get_is_admin(request: Request) -> bool:
    """Admin flag set in the signed session by the members area"""
    return bool(request.session.get("admin", False))


def get_submission_form(
    name: Optional[str] = Form(None),
    size_km: Optional[str] = Form(None),
    atmosphere: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    distance_from_sun_km: Optional[str] = Form(None),
) -> PlanetSubmissionForm:
    return PlanetSubmissionForm(
        name=name,
        size_km=size_km,
        atmosphere=atmosphere,
        type=type,
        distance_from_sun_km=distance_from_sun_km,
    )
