from __future__ import annotations

import logging
from typing import List, Optional, Set

from django.conf import settings
from pymongo.errors import PyMongoError

from core.mongo import get_collection
from participants.errors import LoadError, MutationError
from participants.models import DECISION_FIELDS, Participant

logger = logging.getLogger(__name__)


class ParticipantStore:
    """Read-all and patch-one access to the registrations collection."""

    def __init__(self, collection=None, collection_name: Optional[str] = None):
        self._collection = collection
        self.collection_name = collection_name or settings.PARTICIPANTS_COLLECTION

    @classmethod
    def from_settings(cls) -> "ParticipantStore":
        return cls(collection_name=settings.PARTICIPANTS_COLLECTION)

    @property
    def collection(self):
        if self._collection is None:
            self._collection = get_collection(self.collection_name)
        return self._collection

    def fetch_all(self) -> List[Participant]:
        try:
            docs = list(self.collection.find({}, {"_id": 0}))
        except PyMongoError as e:
            raise LoadError(f"Could not read {self.collection_name}: {e}") from e

        participants: List[Participant] = []
        seen: Set[str] = set()
        for doc in docs:
            participant = Participant.from_doc(doc)
            if not participant.email.strip():
                logger.warning("Skipping registration without email in %s", self.collection_name)
                continue
            if participant.email in seen:
                logger.warning("Duplicate registration for %s, keeping the first one", participant.email)
                continue
            if participant.approved and participant.rejected:
                # Both flags are independent in storage; surface it instead of picking one
                logger.warning("Registration %s is marked both approved and rejected", participant.email)
            seen.add(participant.email)
            participants.append(participant)
        return participants

    def set_field(self, email: str, field: str, value: bool = True) -> None:
        if field not in DECISION_FIELDS:
            raise ValueError(f"Unsupported field {field!r}; expected one of {DECISION_FIELDS}")
        try:
            result = self.collection.update_one({"email": email}, {"$set": {field: value}})
        except PyMongoError as e:
            raise MutationError(str(e)) from e
        if result.matched_count == 0:
            raise MutationError(f"No registration found for {email}")
        logger.info("Set %s=%s for %s", field, value, email)
