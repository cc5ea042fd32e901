"""
Client side of the contact form.

``ContactForm`` holds the field values the visitor typed, ``ContactFormClient``
submits them to the contact endpoint and keeps the status banner state.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Optional, Union

import requests

from config import CONTACT_ENDPOINT

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thanks! We received your message and will respond within one business day."
ERROR_MESSAGE = (
    "Something went wrong while sending your message. "
    "Please try again, or email hello@xceltax.com."
)


# (token, label) pairs offered by the revenue select, "" means no selection
REVENUE_OPTIONS = (
    ("", "Select a range"),
    ("under-250k", "$0 – $250k"),
    ("250-750k", "$250k – $750k"),
    ("750-1_5m", "$750k – $1.5M"),
    ("1_5m-plus", "$1.5M+"),
)


@dataclass(frozen=True)
class Idle:
    message: str = field(default="", init=False)


@dataclass(frozen=True)
class Success:
    message: str


@dataclass(frozen=True)
class Error:
    message: str


SubmissionStatus = Union[Idle, Success, Error]


class TransportError(Exception):
    """The submission did not come back with a successful verdict."""


@dataclass
class ContactForm:
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    company: str = ""
    revenue: str = ""
    message: str = ""

    def update(self, **values: str) -> None:
        names = {form_field.name for form_field in fields(self)}
        for name, value in values.items():
            if name not in names:
                raise AttributeError(f"Unknown contact form field: {name}")
            if name == "revenue" and value not in {token for token, _ in REVENUE_OPTIONS}:
                raise ValueError(f"Unknown revenue range: {value}")
            setattr(self, name, value)

    def reset(self) -> None:
        for form_field in fields(self):
            setattr(self, form_field.name, "")

    def to_payload(self) -> dict:
        return {form_field.name: getattr(self, form_field.name) for form_field in fields(self)}


class ContactFormClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        endpoint: str = CONTACT_ENDPOINT,
    ) -> None:
        self.url = base_url.rstrip("/") + endpoint
        self.session = session or requests.Session()
        self.status: SubmissionStatus = Idle()
        self.is_submitting = False

    def submit(self, form: ContactForm) -> SubmissionStatus:
        """Send the form once and update ``status`` with the outcome."""
        if self.is_submitting:
            logger.debug("Contact form submission already in flight, ignoring")
            return self.status

        self.status = Idle()
        self.is_submitting = True
        try:
            self._post(form.to_payload())
            form.reset()
            self.status = Success(SUCCESS_MESSAGE)
        except TransportError as e:
            logger.error(f"Contact form submission failed: {e}")
            self.status = Error(ERROR_MESSAGE)
        finally:
            self.is_submitting = False
        return self.status

    def _post(self, payload: dict) -> None:
        try:
            response = self.session.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not response.ok or result.get("success") is not True:
            raise TransportError(result.get("error") or "Unable to send message")
