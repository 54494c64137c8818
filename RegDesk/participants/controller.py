"""
Review workflow for the registrations dashboard.

A ReviewController is built per request. It holds the loaded participant
list, the current selection and search term, and the approve/reject
in-flight flags, and it talks to the store, the email notifier and the
toast channel.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Callable, Dict, List, Optional

from participants.errors import NotificationError, StoreError
from participants.models import APPROVED, REJECTED, Participant

logger = logging.getLogger(__name__)

Toast = Callable[[str, str], None]

APPROVE = "approve"
REJECT = "reject"


class InFlightGuard:
    """Process-wide record of which emails have a mutation outstanding."""

    def __init__(self):
        self._lock = threading.Lock()
        self._actions: Dict[str, str] = {}

    def claim(self, email: str, action: str) -> bool:
        with self._lock:
            if email in self._actions:
                return False
            self._actions[email] = action
            return True

    def release(self, email: str) -> None:
        with self._lock:
            self._actions.pop(email, None)

    def action_for(self, email: str) -> Optional[str]:
        with self._lock:
            return self._actions.get(email)


in_flight = InFlightGuard()


def filter_participants(participants: List[Participant], term: str) -> List[Participant]:
    return [p for p in participants if p.matches(term)]


def _discard_toast(level: str, text: str) -> None:
    logger.debug("toast[%s]: %s", level, text)


class ReviewController:
    def __init__(self, store, notifier, toast: Optional[Toast] = None, guard: Optional[InFlightGuard] = None):
        self.store = store
        self.notifier = notifier
        self.toast = toast or _discard_toast
        self.guard = guard or in_flight

        self.participants: List[Participant] = []
        self.selected: Optional[Participant] = None
        self.search_term: str = ""
        self.loading = False
        self.approving = False
        self.rejecting = False

    @property
    def busy(self) -> bool:
        return self.approving or self.rejecting

    @property
    def filtered_participants(self) -> List[Participant]:
        return filter_participants(self.participants, self.search_term)

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = (term or "").strip()

    def find(self, email: Optional[str]) -> Optional[Participant]:
        if not email:
            return None
        return next((p for p in self.participants if p.email == email), None)

    def select(self, email: Optional[str]) -> Optional[Participant]:
        self.selected = self.find(email)
        return self.selected

    def load(self) -> List[Participant]:
        self.loading = True
        try:
            self.participants = self.store.fetch_all()
        except StoreError as e:
            logger.error("Loading participants failed: %s", e)
            self.participants = []
            self.toast("error", "Could not load participants.")
        finally:
            self.loading = False
        return self.participants

    def _reconcile_selected(self, **patch) -> None:
        # The refreshed list is the source of truth; the patch covers a stale read
        if self.selected is None:
            return
        current = self.find(self.selected.email) or self.selected
        self.selected = dataclasses.replace(current, **patch) if patch else current

    def _begin(self, action: str) -> Optional[Participant]:
        participant = self.selected
        if participant is None:
            return None
        if participant.is_decided:
            self.toast("warning", f"{participant.full_name_upper or participant.email} has already been decided.")
            return None
        if self.busy or not self.guard.claim(participant.email, action):
            self.toast("warning", f"{participant.full_name_upper or participant.email} is already being processed.")
            return None
        return participant

    def approve(self) -> bool:
        participant = self._begin(APPROVE)
        if participant is None:
            return False

        self.approving = True
        try:
            try:
                self.store.set_field(participant.email, APPROVED, True)
            except StoreError as e:
                logger.error("Approve failed for %s: %s", participant.email, e)
                self.toast("error", f"Failed to approve: {e}")
                return False

            notified = True
            try:
                self.notifier.send(participant.full_name_upper, participant.email)
            except NotificationError as e:
                # The approval stays committed; the admin only gets a warning
                notified = False
                logger.warning("Approved %s but notification failed: %s", participant.email, e)
                self.toast("warning", "User approved, but the notification email could not be sent.")

            if notified:
                self.toast("success", "User approved and email sent successfully!")
            else:
                self.toast("success", "User approved successfully!")
            self.load()
            self._reconcile_selected(approved=True)
            return True
        finally:
            self.approving = False
            self.guard.release(participant.email)

    def reject(self) -> bool:
        participant = self._begin(REJECT)
        if participant is None:
            return False

        self.rejecting = True
        try:
            try:
                self.store.set_field(participant.email, REJECTED, True)
            except StoreError as e:
                logger.error("Reject failed for %s: %s", participant.email, e)
                self.toast("error", "Failed to reject user.")
                return False

            self.toast("success", "User rejected successfully!")
            self.load()
            self._reconcile_selected()
            return True
        finally:
            self.rejecting = False
            self.guard.release(participant.email)
