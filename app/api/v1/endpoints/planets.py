from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, RedirectResponse
from app.api.deps import get_is_admin, get_moderation_engine, get_submission_form
from app.schemas import (
    PlanetListResponse, PlanetSubmissionForm,
    PublishStatus, ApprovalStatus, RejectionStatus
)
from app.services import ModerationEngine
from app.settings import settings
from typing import Optional
from urllib.parse import urlencode

router = APIRouter()

INDEX_URL = "/planets"
INVALID_PLANET = "check that the planet does not already exist and that the fields are valid"


def redirect_to_index(message: Optional[str] = None, errors: Optional[str] = None) -> RedirectResponse:
    params = {}
    if errors:
        params["errors"] = errors
    if message:
        params["message"] = message
    url = f"{INDEX_URL}?{urlencode(params)}" if params else INDEX_URL
    return RedirectResponse(url=url, status_code=302)


def parse_planet_id(raw: str) -> Optional[int]:
    """Numeric id from the path; anything else matches no planet"""
    try:
        return int(raw)
    except ValueError:
        return None


def redirect_to_members() -> RedirectResponse:
    return RedirectResponse(url=settings.members_url, status_code=302)


@router.get("", response_model=PlanetListResponse)
async def list_planets(
    errors: Optional[str] = Query(default=None),
    message: Optional[str] = Query(default=None),
    engine: ModerationEngine = Depends(get_moderation_engine)
):
    """
    List published planets and the submissions waiting for moderation.

    The `errors` and `message` flags set by the redirects below are echoed back.
    """
    overview = engine.overview()
    return PlanetListResponse(
        planets=overview["planets"],
        pending_planets=overview["pending_planets"],
        errors=errors,
        message=message
    )


@router.post("/add")
async def add_planet(
    form: PlanetSubmissionForm = Depends(get_submission_form),
    is_admin: bool = Depends(get_is_admin),
    engine: ModerationEngine = Depends(get_moderation_engine)
):
    """Publish a planet directly, bypassing moderation (administrators only)."""
    result = engine.publish(form.to_candidate(), requester_is_admin=is_admin)

    if result.status == PublishStatus.DENIED:
        return redirect_to_members()
    if result.status != PublishStatus.PUBLISHED:
        return redirect_to_index(errors=INVALID_PLANET)
    return redirect_to_index()


@router.post("/submit")
async def submit_planet(
    form: PlanetSubmissionForm = Depends(get_submission_form),
    engine: ModerationEngine = Depends(get_moderation_engine)
):
    """
    Submit a planet for moderation.

    All five fields are required as form text; numbers are parsed from text.
    """
    if not form.is_complete():
        return PlainTextResponse("All fields are required", status_code=400)

    result = engine.submit(form.to_candidate())
    if not result.ok:
        return redirect_to_index(errors=result.reason)
    return redirect_to_index(message="Planet submitted successfully")


@router.post("/approve/{planet_id}")
async def approve_planet(
    planet_id: str,
    is_admin: bool = Depends(get_is_admin),
    engine: ModerationEngine = Depends(get_moderation_engine)
):
    """Move a pending planet into the published registry (administrators only)."""
    result = engine.approve(parse_planet_id(planet_id), requester_is_admin=is_admin)

    if result.status == ApprovalStatus.DENIED:
        return redirect_to_members()
    if result.status == ApprovalStatus.NOT_FOUND:
        return redirect_to_index(errors="Pending planet not found")
    if result.status == ApprovalStatus.FAILED:
        return redirect_to_index(errors="Planet could not be approved")
    return redirect_to_index(message="; ".join(["Planet approved"] + result.warnings))


@router.post("/reject/{planet_id}")
async def reject_planet(
    planet_id: str,
    is_admin: bool = Depends(get_is_admin),
    engine: ModerationEngine = Depends(get_moderation_engine)
):
    """Discard a pending planet (administrators only)."""
    result = engine.reject(parse_planet_id(planet_id), requester_is_admin=is_admin)

    if result.status == RejectionStatus.DENIED:
        return redirect_to_members()
    if result.status != RejectionStatus.REJECTED:
        return redirect_to_index(errors="Planet could not be rejected")
    return redirect_to_index(message="Planet rejected")
