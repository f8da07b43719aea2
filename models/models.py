# models.py
"""
Pydantic models for parsed contacts and their HTTP envelopes.

ParsedContact fields are snake_case in Python and camelCase on the wire
(fullName, jobTitle, linkedinSearchUrl, ...). A field that was not
extracted stays None internally and is left out of every serialized form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParsedContact(CamelModel):
    full_name: Optional[str] = None
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin_url: Optional[str] = None
    linkedin_search_url: Optional[str] = None
    address: Optional[str] = None

    def to_dict(self) -> dict:
        """camelCase dict holding only the fields that were resolved."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_dict()


class SplitAddress(CamelModel):
    street: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""

    def is_blank(self) -> bool:
        return not any((self.street, self.city, self.state, self.postcode, self.country))


# -------------------------------
# HTTP request / response bodies
# -------------------------------
class ParseRequest(CamelModel):
    text: str = Field(..., description="Raw OCR text or a pasted email signature")


class ParseResponse(CamelModel):
    raw_text: str
    contact: dict


class SplitAddressRequest(CamelModel):
    address: str = Field(..., description="Free-form address, e.g. '1 Park St, Sydney NSW 2000'")
