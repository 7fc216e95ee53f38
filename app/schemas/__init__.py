from .planet import Planet, PlanetListResponse, PlanetSubmissionForm, PLANET_FIELDS
from .moderation import (
    ErrorCode, SubmissionStatus, PublishStatus, ApprovalStatus, RejectionStatus,
    ModerationResult, SubmissionResult, PublishResult, ApprovalResult, RejectionResult
)

__all__ = [
    "Planet", "PlanetListResponse", "PlanetSubmissionForm", "PLANET_FIELDS",
    "ErrorCode", "SubmissionStatus", "PublishStatus", "ApprovalStatus", "RejectionStatus",
    "ModerationResult", "SubmissionResult", "PublishResult", "ApprovalResult", "RejectionResult"
]
