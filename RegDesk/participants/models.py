from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

FIRST_TIME_CHOICES = {"yes", "no"}

# Stored event identifiers with a human readable label; others render verbatim
EVENT_LABELS: Dict[str, str] = {
    "event1": "Event 1 (September 2, 2025)",
    "event2": "Event 2 (September 3, 2025)",
}

APPROVED = "approved"
REJECTED = "rejected"
DECISION_FIELDS = (APPROVED, REJECTED)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _flag(value: Any) -> Optional[bool]:
    if value is None:
        return None
    return bool(value)


@dataclass
class Participant:
    """One registration record as stored in the participants collection."""

    email: str
    full_name: str = ""
    full_name_upper: str = ""
    contact_number: str = ""
    address: str = ""
    company: str = ""
    designation: str = ""
    first_time: str = ""
    selected_events: List[str] = field(default_factory=list)
    approved: Optional[bool] = None
    rejected: Optional[bool] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "Participant":
        # Stored verbatim: updates are keyed on the exact value in the collection
        email = "" if doc.get("email") is None else str(doc.get("email"))
        first_time = _text(doc.get("first_time")).lower()
        if first_time and first_time not in FIRST_TIME_CHOICES:
            logger.warning("Participant %s has unexpected first_time value %r", email, first_time)
            first_time = ""
        full_name = _text(doc.get("full_name"))
        events = doc.get("selected_events") or []
        if isinstance(events, str):
            events = [events]
        return cls(
            email=email,
            full_name=full_name,
            full_name_upper=_text(doc.get("full_name_upper")) or full_name.upper(),
            contact_number=_text(doc.get("contact_number")),
            address=_text(doc.get("address")),
            company=_text(doc.get("company")),
            designation=_text(doc.get("designation")),
            first_time=first_time,
            selected_events=[_text(e) for e in events if _text(e)],
            approved=_flag(doc.get(APPROVED)),
            rejected=_flag(doc.get(REJECTED)),
        )

    @property
    def is_decided(self) -> bool:
        return bool(self.approved) or bool(self.rejected)

    @property
    def status(self) -> str:
        if self.approved and self.rejected:
            return "conflict"
        if self.approved:
            return APPROVED
        if self.rejected:
            return REJECTED
        return "pending"

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.full_name_upper.split()).upper()

    @property
    def event_labels(self) -> List[str]:
        return [EVENT_LABELS.get(event, event) for event in self.selected_events]

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, email and company."""
        needle = (term or "").lower()
        if not needle:
            return True
        return any(
            needle in value.lower()
            for value in (self.full_name_upper, self.email, self.company)
        )
