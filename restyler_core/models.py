"""
Checklist data model.

One ``ChecklistItem`` per row pair of the source table. Items hold live
element handles for the nodes that get moved into the new layout; the
handles are owned by the item until the renderer re-parents them.

Items are frozen: every pass extracts a fresh list instead of updating
the previous one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class SubmissionStatus(str, Enum):
    RECEIVED = "Received"
    PENDING = "Pending"

    @classmethod
    def from_text(cls, raw: Optional[str], received: str = "received") -> "SubmissionStatus":
        """Anything that is not ``received`` (case-insensitive) is pending."""
        if raw and raw.strip().lower() == received.lower():
            return cls.RECEIVED
        return cls.PENDING


@dataclass(frozen=True)
class ChecklistAction:
    """Action controls of one item plus the host row id they must stay bound to."""
    controls: List[Any] = field(default_factory=list)
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class ChecklistItem:
    index: int
    title: str
    title_is_required: bool = False
    description: str = ""
    description_node: Optional[Any] = None
    submission_status: SubmissionStatus = SubmissionStatus.PENDING
    raw_status: str = ""
    action: Optional[ChecklistAction] = None

    @property
    def has_action(self) -> bool:
        return self.action is not None

    @property
    def is_received(self) -> bool:
        return self.submission_status is SubmissionStatus.RECEIVED

    def to_dict(self) -> dict:
        """Plain summary without element handles (for logs and CLI output)."""
        return {
            "index": self.index,
            "title": self.title,
            "title_is_required": self.title_is_required,
            "description": self.description,
            "submission_status": self.submission_status.value,
            "action_controls": len(self.action.controls) if self.action else 0,
            "correlation_id": self.action.correlation_id if self.action else None,
        }
