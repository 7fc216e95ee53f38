from fastapi import APIRouter, Depends
from app.api.deps import get_is_admin

router = APIRouter()


@router.get("")
async def members_home(is_admin: bool = Depends(get_is_admin)):
    """Landing page for visitors sent away from the moderation actions"""
    return {
        "is_admin": is_admin,
        "message": "Moderation is reserved for administrators" if not is_admin else "Welcome back, administrator",
    }
