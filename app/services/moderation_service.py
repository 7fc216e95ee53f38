"""
Moderation workflow for submitted planets.

A submission is validated, checked for a case-insensitive name clash against
both the published registry and the pending store, then parked in the pending
store. An administrator later approves it (copied into the registry, then
removed from pending) or rejects it (removed from pending).

Expected failures come back as result objects; storage errors are logged here
and never propagate to the caller.
"""
from app.schemas.moderation import (
    ErrorCode, SubmissionStatus, PublishStatus, ApprovalStatus, RejectionStatus,
    SubmissionResult, PublishResult, ApprovalResult, RejectionResult
)
from app.schemas.planet import Planet
from .errors import PlanetServiceError, StorageFailure, ValidationFailed
from .planet_store import PlanetStore
from .validator import PlanetValidator
from typing import Any, Dict, List, Mapping, Optional
import logging
import warnings

log = logging.getLogger(__name__)

DENIED_REASON = "Administrator privileges are required"
STORAGE_REASON = "The planet store is unavailable, please try again later"


def _as_dict(candidate: Any) -> Dict[str, Any]:
    if isinstance(candidate, Mapping):
        return dict(candidate)
    return candidate.model_dump()


class DuplicateChecker:
    """Case-insensitive name lookup across both stores"""

    def __init__(self, published: PlanetStore, pending: PlanetStore):
        self.published = published
        self.pending = pending

    def exists(self, name: str) -> bool:
        return (
            self.published.find_by_name(name, case_insensitive=True) is not None
            or self.pending.find_by_name(name, case_insensitive=True) is not None
        )


class ModerationEngine:
    """Submission intake and admin decisions over the two planet stores"""

    def __init__(
        self,
        published: PlanetStore,
        pending: PlanetStore,
        validator: Optional[PlanetValidator] = None,
    ):
        self.published = published
        self.pending = pending
        self.validator = validator or PlanetValidator()
        self.duplicates = DuplicateChecker(published, pending)

    def overview(self) -> Dict[str, List[Planet]]:
        """Published and pending planets for the index page"""
        return {
            "planets": self.published.list_all(),
            "pending_planets": self.pending.list_all(),
        }

    def submit(self, candidate: Any, minimal: bool = False) -> SubmissionResult:
        """
        Validate a candidate and park it in the pending store.

        ``minimal=True`` runs the legacy relaxed intake that does not require
        atmosphere or type; it is deprecated.
        """
        data = _as_dict(candidate)

        if minimal:
            warnings.warn(
                "Minimal planet submissions are deprecated; submit all five fields",
                DeprecationWarning,
                stacklevel=2,
            )
            verdict = self.validator.validate_minimal(data)
        else:
            verdict = self.validator.validate(data)

        if not verdict.ok:
            return SubmissionResult(
                status=SubmissionStatus.REJECTED,
                error=ErrorCode.VALIDATION_FAILED,
                field=verdict.field,
                reason=verdict.reason,
            )

        name = data["name"].strip()
        try:
            if self.duplicates.exists(name):
                return SubmissionResult(
                    status=SubmissionStatus.REJECTED,
                    error=ErrorCode.DUPLICATE_NAME,
                    field="name",
                    reason=f"A planet named '{name}' is already published or pending",
                )
            pending_id = self.pending.insert(data)
        except StorageFailure:
            log.exception("Error adding pending planet %r", name)
            return SubmissionResult(
                status=SubmissionStatus.FAILED,
                error=ErrorCode.STORAGE_FAILURE,
                reason=STORAGE_REASON,
            )

        log.info("Planet %r submitted for moderation (pending id %s)", name, pending_id)
        return SubmissionResult(
            status=SubmissionStatus.ACCEPTED,
            planet_id=pending_id,
            reason="Planet submitted successfully",
        )

    def publish(self, candidate: Any, requester_is_admin: bool) -> PublishResult:
        """Admin shortcut: publish directly, skipping the pending store"""
        if not requester_is_admin:
            return PublishResult(status=PublishStatus.DENIED, error=ErrorCode.PERMISSION_DENIED, reason=DENIED_REASON)

        data = _as_dict(candidate)
        verdict = self.validator.validate(data)
        if not verdict.ok:
            return PublishResult(
                status=PublishStatus.REJECTED,
                error=ErrorCode.VALIDATION_FAILED,
                field=verdict.field,
                reason=verdict.reason,
            )

        name = data["name"].strip()
        try:
            if self.pending.find_by_name(name, case_insensitive=True) is not None:
                return PublishResult(
                    status=PublishStatus.REJECTED,
                    error=ErrorCode.DUPLICATE_NAME,
                    field="name",
                    reason=f"A planet named '{name}' is waiting for moderation",
                )
            planet_id = self.published.insert(data)
        except StorageFailure:
            log.exception("Error publishing planet %r", name)
            return PublishResult(status=PublishStatus.FAILED, error=ErrorCode.STORAGE_FAILURE, reason=STORAGE_REASON)
        except PlanetServiceError as e:
            return PublishResult(
                status=PublishStatus.REJECTED,
                error=e.code,
                field=getattr(e, "field", "name"),
                reason=e.reason,
            )

        log.info("Planet %r published directly (id %s)", name, planet_id)
        return PublishResult(status=PublishStatus.PUBLISHED, planet_id=planet_id, reason="Planet published")

    def approve(self, pending_id: Optional[int], requester_is_admin: bool) -> ApprovalResult:
        """Promote a pending planet into the published registry; a None id matches nothing"""
        if not requester_is_admin:
            return ApprovalResult(status=ApprovalStatus.DENIED, error=ErrorCode.PERMISSION_DENIED, reason=DENIED_REASON)

        if pending_id is None:
            return ApprovalResult(status=ApprovalStatus.NOT_FOUND, error=ErrorCode.NOT_FOUND, reason="Pending planet not found")

        try:
            pending = self.pending.find_by_id(pending_id)
        except StorageFailure:
            log.exception("Error reading pending planet %s", pending_id)
            return ApprovalResult(status=ApprovalStatus.FAILED, error=ErrorCode.STORAGE_FAILURE, reason=STORAGE_REASON)

        if pending is None:
            return ApprovalResult(status=ApprovalStatus.NOT_FOUND, error=ErrorCode.NOT_FOUND, reason="Pending planet not found")

        # Pending record stays put until the registry has accepted the copy
        try:
            published_id = self.published.insert(pending.candidate())
        except StorageFailure:
            log.exception("Error publishing pending planet %s (%r)", pending_id, pending.name)
            return ApprovalResult(
                status=ApprovalStatus.FAILED,
                planet_id=pending_id,
                error=ErrorCode.STORAGE_FAILURE,
                reason=STORAGE_REASON,
            )
        except PlanetServiceError as e:
            log.info("Pending planet %s (%r) could not be approved: %s", pending_id, pending.name, e.reason)
            return ApprovalResult(
                status=ApprovalStatus.FAILED,
                planet_id=pending_id,
                error=e.code,
                field=e.field if isinstance(e, ValidationFailed) else None,
                reason=e.reason,
            )

        notices: List[str] = []
        try:
            removed = self.pending.delete_by_id(pending_id)
        except StorageFailure:
            log.exception("Error removing approved pending planet %s", pending_id)
            removed = False
        if not removed:
            message = f"Planet '{pending.name}' was published but its pending entry {pending_id} could not be removed"
            log.warning(message)
            notices.append(message)

        log.info("Pending planet %s (%r) approved as planet %s", pending_id, pending.name, published_id)
        return ApprovalResult(
            status=ApprovalStatus.APPROVED,
            planet_id=published_id,
            reason="Planet approved",
            warnings=notices,
        )

    def reject(self, pending_id: Optional[int], requester_is_admin: bool) -> RejectionResult:
        """Discard a pending planet; a None id matches nothing"""
        if not requester_is_admin:
            return RejectionResult(status=RejectionStatus.DENIED, error=ErrorCode.PERMISSION_DENIED, reason=DENIED_REASON)

        if pending_id is None:
            return RejectionResult(status=RejectionStatus.NOT_FOUND, error=ErrorCode.NOT_FOUND, reason="Pending planet not found")

        try:
            removed = self.pending.delete_by_id(pending_id)
        except StorageFailure:
            log.exception("Error rejecting pending planet %s", pending_id)
            return RejectionResult(status=RejectionStatus.FAILED, error=ErrorCode.STORAGE_FAILURE, reason=STORAGE_REASON)

        if not removed:
            return RejectionResult(status=RejectionStatus.NOT_FOUND, error=ErrorCode.NOT_FOUND, reason="Pending planet not found")

        log.info("Pending planet %s rejected", pending_id)
        return RejectionResult(status=RejectionStatus.REJECTED, planet_id=pending_id, reason="Planet rejected")
