# vcard.py
"""vCard 3.0 export of a parsed contact."""
from __future__ import annotations

import re

from address_splitter import split_address
from models.models import ParsedContact

CRLF = "\r\n"


def escape_value(value: str) -> str:
    """RFC 2426 text escaping: backslash, comma, semicolon and newlines."""
    value = value.replace("\\", "\\\\")
    value = value.replace(",", "\\,").replace(";", "\\;")
    return re.sub(r"\r\n|\r|\n", "\\\\n", value)


def vcard_filename(contact: ParsedContact) -> str:
    if not contact.full_name:
        return "contact.vcf"
    return re.sub(r"[^a-zA-Z0-9]", "_", contact.full_name) + ".vcf"


def generate_vcard(contact: ParsedContact) -> str:
    lines = ["BEGIN:VCARD", "VERSION:3.0"]

    if contact.full_name:
        names = contact.full_name.split()
        last = names.pop() if names else ""
        first = " ".join(names)
        lines.append(f"N:{escape_value(last)};{escape_value(first)};;;")
        lines.append(f"FN:{escape_value(contact.full_name)}")

    if contact.company_name:
        lines.append(f"ORG:{escape_value(contact.company_name)}")
    if contact.job_title:
        lines.append(f"TITLE:{escape_value(contact.job_title)}")
    if contact.email:
        lines.append(f"EMAIL;TYPE=INTERNET:{contact.email}")
    if contact.phone:
        lines.append(f"TEL;TYPE=CELL:{contact.phone}")
    if contact.website:
        lines.append(f"URL:{contact.website}")
    if contact.linkedin_url:
        lines.append(f"X-SOCIALPROFILE;TYPE=linkedin:{contact.linkedin_url}")

    if contact.address:
        parts = split_address(contact.address)
        if not parts.is_blank():
            adr = ";".join(
                escape_value(v) for v in (parts.street, parts.city, parts.state, parts.postcode, parts.country)
            )
            lines.append(f"ADR;TYPE=WORK:;;{adr}")

    lines.append("END:VCARD")
    return CRLF.join(lines)
