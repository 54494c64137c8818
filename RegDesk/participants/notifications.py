from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from participants.errors import NotificationError

logger = logging.getLogger(__name__)

EMAILJS_SEND_URL = "https://api.emailjs.com/api/v1.0/email/send"


class EmailNotifier:
    """Sends the approval email through the EmailJS REST API."""

    def __init__(
        self,
        service_id: str,
        template_id: str,
        public_key: str,
        private_key: Optional[str] = None,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        url: str = EMAILJS_SEND_URL,
    ):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.url = url

    @classmethod
    def from_settings(cls) -> "EmailNotifier":
        return cls(
            service_id=settings.EMAILJS_SERVICE_ID,
            template_id=settings.EMAILJS_TEMPLATE_ID,
            public_key=settings.EMAILJS_PUBLIC_KEY,
            private_key=settings.EMAILJS_PRIVATE_KEY or None,
            timeout=settings.EMAILJS_TIMEOUT,
        )

    def _payload(self, recipient_name: str, recipient_email: str) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": {
                "fullName": recipient_name,
                "email": recipient_email,
            },
        }
        if self.private_key:
            body["accessToken"] = self.private_key
        return body

    def send(self, recipient_name: str, recipient_email: str) -> None:
        """Deliver the approval template to one recipient.

        Raises NotificationError when the service is unreachable or answers
        with a non-2xx status. Nothing is retried.
        """
        if not (self.service_id and self.template_id and self.public_key):
            raise NotificationError("EmailJS is not configured")
        try:
            resp = self.session.post(
                self.url,
                json=self._payload(recipient_name, recipient_email),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NotificationError(f"EmailJS request failed: {e}") from e
        if not 200 <= resp.status_code < 300:
            raise NotificationError(f"EmailJS error {resp.status_code}: {resp.text}")
        logger.info("Approval email sent to %s", recipient_email)
