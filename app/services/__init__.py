from .errors import PlanetServiceError, ValidationFailed, DuplicateName, StorageFailure
from .validator import PlanetValidator, ValidationResult
from .planet_store import PlanetStore, SqlPlanetStore, PublishedRegistry, PendingStore
from .moderation_service import DuplicateChecker, ModerationEngine

__all__ = [
    "PlanetServiceError", "ValidationFailed", "DuplicateName", "StorageFailure",
    "PlanetValidator", "ValidationResult",
    "PlanetStore", "SqlPlanetStore", "PublishedRegistry", "PendingStore",
    "DuplicateChecker", "ModerationEngine"
]
