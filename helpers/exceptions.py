from typing import Optional


class ContactFormError(Exception):
    """Terminal failure while handling a contact form request."""
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ClientRequestError(ContactFormError):
    status_code = 400


class MethodNotAllowedError(ClientRequestError):
    status_code = 405

    def __init__(self):
        super().__init__("Method Not Allowed")


class ConfigurationError(ContactFormError):
    status_code = 500

    def __init__(self):
        super().__init__("Email service is not configured")


class DeliveryError(ContactFormError):
    status_code = 502

    def __init__(self, details: Optional[str] = None):
        super().__init__("Failed to send email", details or "Unknown error")


INVALID_BODY_EXCEPTION = ClientRequestError("Invalid request body")
MISSING_FIELDS_EXCEPTION = ClientRequestError("Missing required fields")
