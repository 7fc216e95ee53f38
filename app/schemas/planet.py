from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
import math

PLANET_FIELDS = ("name", "size_km", "atmosphere", "type", "distance_from_sun_km")


class Planet(BaseModel):
    """A published or pending planet as returned by the stores"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Store-assigned identifier")
    name: str = Field(..., example="Mars", description="Planet name")
    size_km: float = Field(..., example=6779, description="Diameter (km)")
    atmosphere: Optional[str] = Field(None, example="Carbon Dioxide", description="Atmosphere composition")
    type: Optional[str] = Field(None, example="Terrestrial", description="Planet category")
    distance_from_sun_km: float = Field(..., example=227943824, description="Distance from the Sun (km)")

    def candidate(self) -> Dict[str, Any]:
        """Planet fields without the id, ready for another store's insert"""
        return self.model_dump(include=set(PLANET_FIELDS))


class PlanetListResponse(BaseModel):
    planets: List[Planet] = Field(..., description="Published planets")
    pending_planets: List[Planet] = Field(..., description="Submissions awaiting moderation")
    errors: Optional[str] = Field(None, description="Error flag echoed from the query string")
    message: Optional[str] = Field(None, description="Message flag echoed from the query string")


def _parse_number(value: str) -> Any:
    # Unparseable text is passed through so validation reports the field
    try:
        number = float(value)
    except (TypeError, ValueError):
        return value
    return number if math.isfinite(number) else value


class PlanetSubmissionForm(BaseModel):
    """Raw form input; every field arrives as text"""
    name: Optional[str] = None
    size_km: Optional[str] = None
    atmosphere: Optional[str] = None
    type: Optional[str] = None
    distance_from_sun_km: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [field for field in PLANET_FIELDS if not (getattr(self, field) or "").strip()]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_candidate(self) -> Dict[str, Any]:
        """Candidate record with the numeric fields parsed from text"""
        return {
            "name": self.name.strip() if self.name else self.name,
            "size_km": _parse_number(self.size_km),
            "atmosphere": self.atmosphere,
            "type": self.type,
            "distance_from_sun_km": _parse_number(self.distance_from_sun_km),
        }
