# address_splitter.py
"""
Breaks a single-line postal address into street / city / state / postcode /
country, e.g. for the ADR property of a vCard.

    >>> split_address("45B/2 Park Street, Sydney NSW 2000 Australia").city
    'Sydney'
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from lexicons import AU_STATES
from models.models import SplitAddress

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "Australia"

_STATES = "|".join(AU_STATES)

# street, City STATE 1234[ country]
COMMA_PATTERN = re.compile(
    rf"^(?P<street>.+),\s*(?P<city>[^,]+?)\s+(?P<state>{_STATES})\s+(?P<postcode>\d{{4}})"
    r"(?:[\s,]+(?P<country>.+?))?[\s,.]*$",
    re.IGNORECASE,
)

# street City STATE 1234[ country]; the city is a single word here
SPACE_PATTERN = re.compile(
    rf"^(?P<street>.+?)\s+(?P<city>[^\s,]+)\s+(?P<state>{_STATES})\s+(?P<postcode>\d{{4}})"
    r"(?:[\s,]+(?P<country>.+?))?[\s,.]*$",
    re.IGNORECASE,
)

AU_HINT_RE = re.compile(rf"\b(?:{_STATES})\b|\b\d{{4}}\b", re.IGNORECASE)


def split_address(address: Optional[str]) -> SplitAddress:
    text = re.sub(r"\s+", " ", address or "").strip()
    if not text:
        return SplitAddress()

    for pattern in (COMMA_PATTERN, SPACE_PATTERN):
        m = pattern.match(text)
        if m:
            return SplitAddress(
                street=m.group("street").strip(" ,"),
                city=m.group("city").strip(" ,"),
                state=m.group("state").upper(),
                postcode=m.group("postcode"),
                country=(m.group("country") or DEFAULT_COUNTRY).strip(" ,"),
            )

    logger.debug("Address %r kept whole as street", text)
    country = DEFAULT_COUNTRY if AU_HINT_RE.search(text) else ""
    return SplitAddress(street=text, country=country)
