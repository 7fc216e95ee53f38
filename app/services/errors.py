from typing import Optional
from app.schemas.moderation import ErrorCode


class PlanetServiceError(Exception):
    """Base class for errors raised by the planet stores and moderation engine"""
    code: ErrorCode

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ValidationFailed(PlanetServiceError):
    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, field: Optional[str], reason: str):
        super().__init__(reason)
        self.field = field


class DuplicateName(PlanetServiceError):
    code = ErrorCode.DUPLICATE_NAME

    def __init__(self, name: str):
        super().__init__(f"A planet named '{name}' already exists")
        self.name = name


class StorageFailure(PlanetServiceError):
    code = ErrorCode.STORAGE_FAILURE
