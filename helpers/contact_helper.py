import json
import logging
from urllib.parse import parse_qsl
from models.contact_model import ContactSubmission
from helpers.exceptions import INVALID_BODY_EXCEPTION, MISSING_FIELDS_EXCEPTION

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("firstName", "lastName", "email")
OPTIONAL_FIELDS = ("company", "revenue", "message")

#request body parsing
def parse_request_body(body: bytes, content_type: str) -> dict:
    try:
        text = body.decode("utf-8")
        if "application/json" in (content_type or ""):
            payload = json.loads(text)
        else:
            payload = dict(parse_qsl(text, keep_blank_values=True, strict_parsing=False))
    except (UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Rejected contact request body: {e}")
        raise INVALID_BODY_EXCEPTION

    if not isinstance(payload, dict):
        logger.warning(f"Rejected contact request body of type {type(payload).__name__}")
        raise INVALID_BODY_EXCEPTION
    return payload

def _field_value(payload: dict, name: str) -> str:
    value = payload.get(name)
    if not value and not isinstance(value, str):
        return ""
    return str(value)

#payload validation
def build_submission(payload: dict) -> ContactSubmission:
    values = {name: _field_value(payload, name) for name in REQUIRED_FIELDS + OPTIONAL_FIELDS}

    missing = [name for name in REQUIRED_FIELDS if not values[name].strip()]
    if missing:
        logger.warning(f"Contact submission missing required fields: {', '.join(missing)}")
        raise MISSING_FIELDS_EXCEPTION

    return ContactSubmission(**values)
