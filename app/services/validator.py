"""
Domain rules deciding whether a candidate planet may be stored.

Two variants are exposed. ``validate`` checks all five fields and is the one
used for publishing and for the public submission path. ``validate_minimal``
skips ``atmosphere`` and ``type``; it backs the legacy lightweight intake and
is deprecated.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import math

from app.settings import settings
from .errors import ValidationFailed


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    field: Optional[str] = None
    reason: Optional[str] = None

    def raise_for_status(self):
        if not self.ok:
            raise ValidationFailed(self.field, self.reason)


VALID = ValidationResult(ok=True)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _as_mapping(candidate: Any) -> Mapping[str, Any]:
    if isinstance(candidate, Mapping):
        return candidate
    if hasattr(candidate, "model_dump"):
        return candidate.model_dump()
    return vars(candidate)


class PlanetValidator:
    """Pure validation of candidate planet records"""

    def __init__(
        self,
        min_distance_km: Optional[float] = None,
        max_distance_km: Optional[float] = None,
    ):
        self.min_distance_km = settings.min_distance_from_sun_km if min_distance_km is None else min_distance_km
        self.max_distance_km = settings.max_distance_from_sun_km if max_distance_km is None else max_distance_km

    def validate(self, candidate: Any) -> ValidationResult:
        """Check every field of the candidate"""
        return self._check(_as_mapping(candidate), full=True)

    def validate_minimal(self, candidate: Any) -> ValidationResult:
        """Check name, size and distance only (deprecated relaxed intake)"""
        return self._check(_as_mapping(candidate), full=False)

    def _check(self, data: Mapping[str, Any], full: bool) -> ValidationResult:
        if not _is_text(data.get("name")):
            return ValidationResult(False, "name", "Planet name is required and must be a non-empty string")

        size = data.get("size_km")
        if not _is_number(size) or size <= 0:
            return ValidationResult(False, "size_km", "Planet size must be a positive number")

        if full:
            if not _is_text(data.get("atmosphere")):
                return ValidationResult(False, "atmosphere", "Planet atmosphere is required and must be a non-empty string")
            if not _is_text(data.get("type")):
                return ValidationResult(False, "type", "Planet type is required and must be a non-empty string")

        distance = data.get("distance_from_sun_km")
        if not _is_number(distance):
            return ValidationResult(False, "distance_from_sun_km", "Planet distance from sun must be a number")
        if distance <= self.min_distance_km or distance >= self.max_distance_km:
            return ValidationResult(
                False,
                "distance_from_sun_km",
                f"Planet distance from sun must be greater than {self.min_distance_km:g} km "
                f"and less than {self.max_distance_km:g} km",
            )

        return VALID
