import html
import logging
from datetime import datetime, timezone
from typing import Optional, Protocol
import resend
from config import CONTACT_EMAIL_FROM, CONTACT_EMAIL_TO, RESEND_API_KEY
from helpers.exceptions import ConfigurationError, DeliveryError
from models.contact_model import ContactSubmission, EmailMessage

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"


class EmailProvider(Protocol):
    is_configured: bool

    def send(self, message: EmailMessage) -> None:
        ...


class ResendProvider:
    """Sends rendered contact emails through the Resend API."""

    def __init__(self, api_key: Optional[str]):
        self.is_configured = bool(api_key)
        if self.is_configured:
            resend.api_key = api_key

    def send(self, message: EmailMessage) -> None:
        response = resend.Emails.send(message.to_provider_params())
        logger.info(f"Contact email accepted by Resend with id {response.get('id')}")


# Shared by every request, the provider holds no per-request state
email_provider = ResendProvider(RESEND_API_KEY)

def get_email_provider() -> EmailProvider:
    return email_provider

def escape_html(value) -> str:
    return html.escape(str(value), quote=True)

def submission_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def _table_row(label: str, value: str) -> str:
    return f"""<tr>
    <td style="padding:6px 12px;font-weight:600;">{escape_html(label)}</td>
    <td style="padding:6px 12px;color:#1f2937;">{escape_html(value)}</td>
  </tr>"""

#html body
def render_html_body(submission: ContactSubmission, submitted_at: str) -> str:
    rows = "\n          ".join([
        _table_row("Name", submission.full_name),
        _table_row("Email", submission.email),
        _table_row("Company", submission.company or PLACEHOLDER),
        _table_row("Revenue", submission.revenue or PLACEHOLDER),
        _table_row("Message", submission.message or PLACEHOLDER),
    ])
    return f"""
    <main style="max-width:640px;margin:0 auto;font-family:Arial,'Helvetica Neue',Helvetica,sans-serif;color:#111827;">
      <h2 style="font-size:20px;margin-bottom:12px;">New contact form submission</h2>
      <p style="margin-bottom:16px;color:#4b5563;">Submitted at {escape_html(submitted_at)}</p>
      <table style="width:100%;border-collapse:collapse;background:#f9fafb;border-radius:12px;overflow:hidden;">
        <tbody>
          {rows}
        </tbody>
      </table>
    </main>
    """

#plain text body
def render_text_body(submission: ContactSubmission, submitted_at: str) -> str:
    return f"""New contact form submission

Submitted at: {submitted_at}
Name: {submission.full_name}
Email: {submission.email}
Company: {submission.company or PLACEHOLDER}
Revenue: {submission.revenue or PLACEHOLDER}

Message:
{submission.message or PLACEHOLDER}
"""

def build_email_message(submission: ContactSubmission, submitted_at: Optional[str] = None) -> EmailMessage:
    submitted_at = submitted_at or submission_timestamp()
    return EmailMessage(
        sender=CONTACT_EMAIL_FROM,
        to=list(CONTACT_EMAIL_TO),
        subject=f"New contact form submission from {submission.full_name}",
        html=render_html_body(submission, submitted_at),
        text=render_text_body(submission, submitted_at),
    )

def send_email(submission: ContactSubmission, provider: EmailProvider) -> EmailMessage:
    """Renders the notification for a submission and hands it to the provider."""
    if not provider.is_configured:
        logger.error("RESEND_API_KEY is not set, contact email cannot be sent")
        raise ConfigurationError()

    message = build_email_message(submission)
    try:
        provider.send(message)
    except Exception as e:
        details = str(getattr(e, "message", None) or e)
        logger.error(f"Failed to send contact email: {details}")
        raise DeliveryError(details)
    return message
