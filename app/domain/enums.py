"""Domain enumerations for advisory casework.

Enums represent fixed sets of domain values (application status, roles,
review outcomes). Values are the strings persisted in the database.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (declaration order)."""
        return [member.value for member in cls]


class ApplicationStatus(_ValuesMixin, str, Enum):
    """Lifecycle status of a CRBI application."""

    DRAFT = "draft"
    STARTED = "started"
    SUBMITTED = "submitted"
    READY_FOR_SUBMISSION = "ready_for_submission"
    SUBMITTED_TO_GOVERNMENT = "submitted_to_government"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    ARCHIVED = "archived"


class UserRole(_ValuesMixin, str, Enum):
    """Firm user role."""

    ADMIN = "admin"
    ADVISOR = "advisor"
    JUNIOR = "junior"


class StageStatus(_ValuesMixin, str, Enum):
    """Computed status of one workflow stage."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ReviewStatus(_ValuesMixin, str, Enum):
    """Outcome of a document review. Only the latest review per document counts."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_CLARIFICATION = "needs_clarification"


class OriginalDocumentStatus(_ValuesMixin, str, Enum):
    """Courier status of a physical original document."""

    REQUESTED = "requested"
    ORIGINALS_SHIPPED = "originals_shipped"
    ORIGINALS_RECEIVED = "originals_received"
    ORIGINALS_VERIFIED = "originals_verified"


class TaskStatus(_ValuesMixin, str, Enum):
    """Task status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ActivityAction(_ValuesMixin, str, Enum):
    """Activity log actions written by the lifecycle engine."""

    STATUS_CHANGED = "status_changed"
    APPLICATION_DELETED = "application_deleted"
    APPLICATION_ARCHIVED = "application_archived"
    APPLICATION_UNARCHIVED = "application_unarchived"
