from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    STORAGE_FAILURE = "storage_failure"


class SubmissionStatus(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"


class PublishStatus(str, Enum):
    PUBLISHED = "published"
    REJECTED = "rejected"
    DENIED = "denied"
    FAILED = "failed"


class ApprovalStatus(str, Enum):
    APPROVED = "approved"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class RejectionStatus(str, Enum):
    REJECTED = "rejected"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ModerationResult(BaseModel):
    """Common shape of every moderation outcome"""
    planet_id: Optional[int] = Field(None, description="Pending or published id involved")
    error: Optional[ErrorCode] = Field(None, description="Error category when the action did not succeed")
    reason: Optional[str] = Field(None, description="Human-readable outcome")
    field: Optional[str] = Field(None, description="Offending field for validation failures")
    warnings: List[str] = Field(default_factory=list, description="Recoverable issues noticed along the way")

    @property
    def ok(self) -> bool:
        return self.error is None


class SubmissionResult(ModerationResult):
    status: SubmissionStatus


class PublishResult(ModerationResult):
    status: PublishStatus


class ApprovalResult(ModerationResult):
    status: ApprovalStatus


class RejectionResult(ModerationResult):
    status: RejectionStatus
