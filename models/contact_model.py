from pydantic import BaseModel, ConfigDict, Field
from typing import List

class ContactSubmission(BaseModel):
    """One contact form submission as received from the public form."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str  # Presence only, the provider rejects malformed addresses
    company: str = ""
    revenue: str = ""
    message: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

class EmailMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(alias="from")
    to: List[str]
    subject: str
    html: str
    text: str

    def to_provider_params(self) -> dict:
        return self.model_dump(by_alias=True)
