from __future__ import annotations


class ParticipantsError(Exception):
    """Base class for registration review failures."""


class StoreError(ParticipantsError):
    """The participants collection could not be read or written."""


class LoadError(StoreError):
    """Fetching the full participant list failed."""


class MutationError(StoreError):
    """An approve/reject field update failed or matched no record."""


class NotificationError(ParticipantsError):
    """The approval email could not be delivered to the email service."""
