from fastapi import APIRouter
from app.api.v1.endpoints import (
    planets,
    members
)

api_router = APIRouter()

api_router.include_router(
    planets.router,
    prefix="/planets",
    tags=["Planets & Moderation"]
)

api_router.include_router(
    members.router,
    prefix="/members",
    tags=["Members"]
)
