import os
from dotenv import load_dotenv

load_dotenv()

RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")

CONTACT_EMAIL_FROM = os.getenv("CONTACT_EMAIL_FROM", "Xceltax Contact <contact@mail.xceltax.com>")
CONTACT_EMAIL_TO = [
    address.strip()
    for address in os.getenv("CONTACT_EMAIL_TO", "masood@xceltax.com").split(",")
    if address.strip()
]
CONTACT_ENDPOINT = os.getenv("CONTACT_ENDPOINT", "/api/contact-email")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
