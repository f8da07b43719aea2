# contact_parser.py
from __future__ import annotations

import logging
import re
import unicodedata
from typing import List, Optional, Tuple
from urllib.parse import quote_plus

import html2text
import tldextract
from bs4 import BeautifulSoup

from lexicons import (
    ADDRESS_LABEL_RE,
    AU_POSTCODE_RE,
    AU_STATE_RE,
    AU_STATES,
    CEDEX_RE,
    COMMON_FIRST_NAMES,
    DISCLAIMER_TRIGGERS,
    DOMAIN_SPLIT_SUFFIXES,
    FIELD_LABEL_RE,
    GENERIC_EMAIL_DOMAINS,
    HTML_BLOCK_TAGS,
    HTML_HINT_RE,
    LEGAL_SUFFIX_RE,
    NAME_LIKE_SURNAMES,
    ORG_SUFFIX_RE,
    PHONE_LABEL_RE,
    ROLE_LOCAL_PARTS,
    SECTION_HEADING_RE,
    SIGN_OFF_RE,
    STREET_PART_RE,
    STREET_TYPE_RE,
    TITLE_KEYWORD_RE,
    TITLE_ROLE_RE,
    TRACKING_HINTS,
    VALID_TLDS,
    WEBSITE_LABEL_RE,
)
from models.models import ParsedContact

logger = logging.getLogger(__name__)

# Public suffix lookups run offline against the snapshot bundled with tldextract.
_tld_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)

_UPPER = "A-ZÀ-ÖØ-Þ"
_LOWER = "a-zß-öø-ÿ"

NAME_TOKEN_PATTERNS = (
    re.compile(rf"[{_UPPER}][{_LOWER}]+"),                       # Smith, José
    re.compile(r"[A-Z]\.?"),                                     # J / J.
    re.compile(rf"[{_UPPER}][{_LOWER}]+-[{_UPPER}][{_LOWER}]+"),  # Smith-Jones
    re.compile(r"[A-Z][a-z]*['’][A-Z][a-z]+"),                  # O'Brien, D'Arcy
    re.compile(r"(?:Mc|Mac)[A-Z][a-z]+"),                        # McDonald, MacLeod
)
ALL_CAPS_TOKEN = re.compile(r"[A-Z]{2,}(?:-[A-Z]{2,})?")


def normalize_name(value: Optional[str]) -> str:
    """Accent-stripped, lowercase, punctuation-free form used to compare names."""
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    stripped = re.sub(r"[^\w\s]|_", "", stripped.lower())
    return re.sub(r"\s+", " ", stripped).strip()


def normalize_for_duplicate_check(value: Optional[str]) -> str:
    """
    Lowercased, trimmed key for callers matching a parsed contact against
    contacts they already hold (email, phone, company). "" when absent.
    """
    if not value:
        return ""
    return value.lower().strip()


class ContactParser:
    """
    Rule-based extraction of a contact record from business-card OCR text or
    a pasted email signature. Every public method is a pure function of its
    arguments; nothing here raises for odd input, missing fields stay None.
    """

    def __init__(self):
        self.email_pattern = r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}'
        self.phone_pattern = r'(?:\+?\d{1,4}[-. ]?)?(?:\(?\d{1,4}\)?[-. ]?)?(?:\d{1,4}[-. ]?){2,4}\d{1,4}'
        self.url_pattern = r'(?:https?://)?(?:www\.)?[a-zA-Z0-9][-a-zA-Z0-9]*(?:\.[a-zA-Z0-9][-a-zA-Z0-9]*)+(?:/[^\s]*)?'
        self.explicit_url_pattern = r'(?:https?://|www\.)[a-zA-Z0-9][-a-zA-Z0-9]*(?:\.[a-zA-Z0-9][-a-zA-Z0-9]*)+(?:/[^\s]*)?'
        self.bare_domain_pattern = r'\b[a-zA-Z0-9][-a-zA-Z0-9]*\.[a-zA-Z]{2,}(?:\.[a-zA-Z]{2,})?\b'
        self.linkedin_pattern = r'(?:https?://)?(?:[a-z]{2,3}\.)?(?:www\.)?linkedin\.com/(?:in|company)/[A-Za-z0-9_%\-]+/?'
        self.tld_hint_pattern = r'\.(?:com|org|net|io|co|au|uk|nz|biz|info)\b'
        self.url_marker_pattern = r'https?://|www\.'

    # ---------- preprocessing ----------
    def preclean(self, raw_text: Optional[str]) -> List[str]:
        """
        Split into trimmed, non-empty lines; drop leading sign-offs and cut
        everything from the first disclaimer line onwards.
        """
        text = (raw_text or "").replace("\xa0", " ")
        lines = []
        for line in re.split(r"[\r\n]+", text):
            line = re.sub(r"[ \t\f\v]+", " ", line).strip()
            if line:
                lines.append(line)

        start = 0
        while start < len(lines) and SIGN_OFF_RE.match(lines[start]):
            start += 1
        if start:
            logger.debug("Dropped %d leading sign-off line(s)", start)
        lines = lines[start:]

        for i, line in enumerate(lines):
            lowered = line.lower()
            if any(trigger in lowered for trigger in DISCLAIMER_TRIGGERS):
                logger.debug("Disclaimer starts at line %d; dropping %d line(s)", i, len(lines) - i)
                return lines[:i]
        return lines

    def html_to_text(self, raw_html: str) -> Tuple[str, List[str]]:
        """
        Returns (text, link_values). Anchor hrefs are read BEFORE the markup is
        flattened, otherwise a website hidden behind "Visit us" is lost.
        """
        soup = BeautifulSoup(raw_html, "html.parser")

        links: List[str] = []
        for a in soup.find_all("a", href=True):
            href = a["href"].strip()
            lowered = href.lower()
            if lowered.startswith("mailto:"):
                value = href[len("mailto:"):].split("?", 1)[0]
            elif lowered.startswith("tel:"):
                value = href[len("tel:"):]
            elif lowered.startswith(("http://", "https://")):
                if any(hint in lowered for hint in TRACKING_HINTS):
                    continue
                value = href
            else:
                continue
            value = value.strip()
            if value:
                links.append(value)

        for tag in soup(["script", "style", "meta", "link", "head", "title"]):
            tag.decompose()
        for br in soup.find_all("br"):
            br.replace_with("\n")
        for block in soup.find_all(list(HTML_BLOCK_TAGS)):
            block.append("\n")

        text = soup.get_text()
        if not text.strip():
            # fallback to html2text only if soup yielded nothing
            h = html2text.HTML2Text()
            h.ignore_links = True
            h.ignore_images = True
            h.ignore_emphasis = True
            h.body_width = 0
            text = h.handle(raw_html)
        return text, links

    def prepare(self, raw_text: Optional[str]) -> Tuple[List[str], List[str]]:
        """Cleaned lines plus any link values that never made it into the text."""
        raw_text = raw_text or ""
        links: List[str] = []
        if HTML_HINT_RE.search(raw_text):
            raw_text, links = self.html_to_text(raw_text)
        lines = self.preclean(raw_text)

        visible = "\n".join(lines).lower()
        extras = []
        for value in links:
            if value.lower() not in visible and value not in extras:
                extras.append(value)
        return lines, extras

    # ---------- helpers ----------
    def _has_company_suffix(self, line: str) -> bool:
        if LEGAL_SUFFIX_RE.search(line):
            return True
        return bool(ORG_SUFFIX_RE.search(line)) and not TITLE_ROLE_RE.search(line)

    def _looks_like_title(self, line: str) -> bool:
        return bool(TITLE_KEYWORD_RE.search(line))

    def _has_url_marker(self, line: str) -> bool:
        return bool(re.search(self.url_marker_pattern, line, re.IGNORECASE))

    def _looks_like_phone_line(self, line: str) -> bool:
        digits = re.sub(r"\D", "", line)
        compact = re.sub(r"\s", "", line)
        return len(digits) >= 7 and len(digits) / max(len(compact), 1) > 0.5

    def _is_contact_line(self, line: str) -> bool:
        return (
            bool(FIELD_LABEL_RE.match(line))
            or "@" in line
            or self._has_url_marker(line)
            or self._looks_like_phone_line(line)
        )

    def _is_noise_line(self, line: str) -> bool:
        """Filters shared by the name and title resolvers."""
        if len(line) < 2 or len(line) > 60:
            return True
        if FIELD_LABEL_RE.match(line) or "@" in line:
            return True
        if re.match(r"^\+?\d", line):
            return True
        if self._has_url_marker(line) or re.search(self.tld_hint_pattern, line, re.IGNORECASE):
            return True
        return False

    def _looks_like_address(self, text: str) -> bool:
        if AU_STATE_RE.search(text) and AU_POSTCODE_RE.search(text):
            return True
        if re.search(r"\d", text) and STREET_TYPE_RE.search(text):
            return True
        return bool(re.search(r"\b(?:p\.?\s*o\.?|gpo)\s*box\b", text, re.IGNORECASE))

    def _looks_like_url(self, text: str) -> bool:
        if self._has_url_marker(text):
            return True
        token = text.strip()
        if not token or re.search(r"\s", token) or "." not in token:
            return False
        ext = _tld_extract(token)
        return bool(ext.domain and ext.suffix)

    def _is_title_case(self, line: str) -> bool:
        words = [w for w in line.split() if len(w) > 2]
        if not words:
            return False
        capitalized = [w for w in words if re.match(r"[A-Z]", w)]
        return len(capitalized) / len(words) >= 0.6

    def _registered_domain(self, host: str) -> str:
        ext = _tld_extract(host)
        if ext.domain and ext.suffix:
            return f"{ext.domain}.{ext.suffix}".lower()
        return host.lower()

    def _email_domain(self, email: Optional[str]) -> Optional[str]:
        if not email or "@" not in email:
            return None
        domain = email.rsplit("@", 1)[1].lower().strip(". ")
        return domain if "." in domain else None

    def is_generic_email_domain(self, domain: str) -> bool:
        domain = domain.lower()
        return domain in GENERIC_EMAIL_DOMAINS or self._registered_domain(domain) in GENERIC_EMAIL_DOMAINS

    def _host_of(self, candidate: str) -> str:
        host = candidate.strip().lower().rstrip(".,;:!?)")
        host = re.sub(r"^https?://", "", host)
        host = re.sub(r"^www\.", "", host)
        return re.split(r"[/?#]", host, maxsplit=1)[0]

    # ---------- field extractors ----------
    def extract_emails(self, text: str) -> List[str]:
        emails = re.findall(self.email_pattern, text or "")
        return list(dict.fromkeys(e.lower() for e in emails))

    def extract_phones(self, text: str, lines: List[str]) -> List[str]:
        """
        Labelled lines (m:, mobile, t:, tel, p:, phone, ph) are scanned first,
        then the whole text. Candidates must carry 7-15 digits.
        """
        candidates: List[str] = []
        for line in lines:
            if PHONE_LABEL_RE.match(line):
                candidates.extend(re.findall(self.phone_pattern, line))

        # addresses like jane2000@... never hold a phone number
        scrubbed = re.sub(self.email_pattern, " ", text or "")
        for line in scrubbed.splitlines():
            candidates.extend(re.findall(self.phone_pattern, line))

        phones: List[str] = []
        for candidate in candidates:
            cleaned = re.sub(r"[^\d+\s()\-]", "", candidate).strip()
            digits = re.sub(r"\D", "", cleaned)
            if 7 <= len(digits) <= 15 and cleaned not in phones:
                phones.append(cleaned)
        return phones

    def format_phone(self, phone: str) -> str:
        cleaned = re.sub(r"[^\d+\s()\-]", "", phone).strip()
        if cleaned.startswith("+"):
            return cleaned

        digits = re.sub(r"\D", "", cleaned)
        if len(digits) == 10:
            return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
        if len(digits) == 11 and digits.startswith("1"):
            return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
        return cleaned

    def is_valid_website(self, candidate: str) -> bool:
        if not candidate or re.search(r"\s", candidate) or "@" in candidate:
            return False
        if "linkedin.com" in candidate.lower():
            return False

        host = self._host_of(candidate)
        if "." not in host:
            return False
        parts = host.split(".")
        if any(not p for p in parts):
            return False

        tld = parts[-1]
        tld2 = ".".join(parts[-2:])
        if tld not in VALID_TLDS and tld2 not in VALID_TLDS:
            # unlisted gTLDs are fine; unlisted 2-letter labels are usually surnames
            if not re.fullmatch(r"[a-z]{3,6}", tld):
                return False

        if len(parts) == 2 and re.fullmatch(r"[a-z]+", parts[0]) and len(parts[0]) <= 15:
            second = parts[1]
            if second in NAME_LIKE_SURNAMES:
                return False
            if second not in VALID_TLDS and (len(second) <= 3 or parts[0] in COMMON_FIRST_NAMES):
                return False
        return True

    def normalize_website(self, candidate: str) -> str:
        url = candidate.strip().rstrip(".,;:!?)")
        url = re.sub(r"^https?://", "", url, flags=re.IGNORECASE)
        host, _, path = url.partition("/")
        host = host.lower()
        if not host.startswith("www.") and not _tld_extract(host).subdomain:
            host = f"www.{host}"
        path = path.rstrip("/")
        return f"https://{host}/{path}" if path else f"https://{host}"

    def extract_websites(self, text: str, lines: List[str], email: Optional[str] = None) -> List[str]:
        """
        Candidates in priority order: labelled (w:/web:/website:) values,
        explicit http(s)/www URLs, then bare word.tld tokens. Falls back to the
        email's domain unless it belongs to a consumer mail provider.
        """
        candidates: List[str] = []

        for line in lines:
            m = WEBSITE_LABEL_RE.match(line)
            if not m:
                continue
            value = m.group("value").strip()
            urls = re.findall(self.url_pattern, value)
            for url in urls or [value]:
                if self.is_valid_website(url):
                    candidates.append(url)

        # the local part of an email is never a website
        scrubbed = re.sub(self.email_pattern, " ", text or "")

        for url in re.findall(self.explicit_url_pattern, scrubbed, re.IGNORECASE):
            if self.is_valid_website(url):
                candidates.append(url)

        for domain in re.findall(self.bare_domain_pattern, scrubbed, re.IGNORECASE):
            if any(domain.lower() in c.lower() for c in candidates):
                continue
            if self.is_valid_website(domain):
                candidates.append(domain)

        websites = list(dict.fromkeys(self.normalize_website(c) for c in candidates))

        if not websites and email:
            domain = self._email_domain(email)
            if domain and not self.is_generic_email_domain(domain):
                logger.debug("Website derived from email domain %s", domain)
                websites.append(f"https://www.{domain}")
        return websites

    def extract_linkedin(self, text: str) -> Optional[str]:
        m = re.search(self.linkedin_pattern, text or "", re.IGNORECASE)
        if not m:
            return None
        url = m.group(0)
        if not url.lower().startswith("http"):
            url = f"https://{url}"
        return url

    def linkedin_search_url(self, full_name: Optional[str], company_name: Optional[str]) -> Optional[str]:
        terms = [t for t in (full_name, company_name) if t]
        if not terms:
            return None
        return "https://www.google.com/search?q=" + quote_plus(" ".join(terms + ["LinkedIn"]))

    # ---------- entity resolvers ----------
    def _is_name_token(self, token: str, token_count: int) -> bool:
        if any(p.fullmatch(token) for p in NAME_TOKEN_PATTERNS):
            return True
        # an all-caps surname needs a given name beside it
        return token_count >= 2 and bool(ALL_CAPS_TOKEN.fullmatch(token)) and token not in AU_STATES

    def _name_from_email(self, email: Optional[str]) -> Optional[str]:
        if not email or "@" not in email:
            return None
        local = email.split("@", 1)[0].split("+", 1)[0]
        bits = [b for b in re.split(r"[._\-]+", local) if b]
        if any(b.lower() in ROLE_LOCAL_PARTS for b in bits):
            return None
        bits = [re.sub(r"^\d+|\d+$", "", b) for b in bits]   # trim edge digits
        bits = [b for b in bits if len(b) > 1 and b.isalpha()]
        if len(bits) < 2:
            return None
        return " ".join(b[0].upper() + b[1:].lower() for b in bits)

    def extract_name(self, lines: List[str], email: Optional[str] = None) -> Tuple[Optional[str], int]:
        """
        Returns (name, anchor). The anchor is the line index of the name and
        bounds the title/company search; -1 when the name came from the email.
        """
        for i, line in enumerate(lines):
            if self._is_noise_line(line):
                continue
            if self._has_company_suffix(line) or self._looks_like_title(line):
                continue
            tokens = line.split()
            if 1 <= len(tokens) <= 4 and all(self._is_name_token(t, len(tokens)) for t in tokens):
                logger.debug("Name %r found on line %d", line, i)
                return line, i

        derived = self._name_from_email(email)
        if derived:
            logger.debug("Name %r derived from email local part", derived)
        return derived, -1

    def extract_job_title(self, lines: List[str], anchor: int = -1, company_name: Optional[str] = None) -> Optional[str]:
        start = anchor + 1 if anchor >= 0 else 0
        for line in lines[start:]:
            if self._is_noise_line(line) or self._has_company_suffix(line):
                continue
            if company_name and line.lower() == company_name.lower():
                continue
            if SECTION_HEADING_RE.match(line) or self._looks_like_address(line):
                continue
            if self._looks_like_title(line):
                return line
        return None

    def _skip_for_company(self, line: str) -> bool:
        return bool(FIELD_LABEL_RE.match(line)) or "@" in line or bool(re.match(r"^\+?\d", line)) \
            or self._has_url_marker(line)

    def extract_company_name(self, lines: List[str], anchor: int = -1) -> Optional[str]:
        """
        Strong signal: first line after the anchor carrying a company suffix.
        Weak signal: a Title Case line within the next five lines.
        """
        start = anchor + 1 if anchor >= 0 else 0

        for line in lines[start:]:
            if self._skip_for_company(line):
                continue
            if self._has_company_suffix(line):
                logger.debug("Company %r from suffix match", line)
                return line

        for line in lines[start:start + 5]:
            if self._skip_for_company(line) or self._looks_like_title(line):
                continue
            if SECTION_HEADING_RE.match(line) or self._looks_like_address(line):
                continue
            if not 3 <= len(line) <= 60 or len(line.split()) > 6:
                continue
            if self._is_title_case(line):
                logger.debug("Company %r from Title Case line", line)
                return line
        return None

    # ---------- company validation ----------
    def _is_plausible_company(self, name: str, full_name: Optional[str]) -> bool:
        if not normalize_name(name):
            return False
        if self._looks_like_address(name) or self._looks_like_url(name):
            return False
        if full_name and normalize_name(name) == normalize_name(full_name):
            return False
        return True

    def _split_domain_label(self, label: str) -> List[str]:
        for suffix in sorted(DOMAIN_SPLIT_SUFFIXES, key=len, reverse=True):
            if label.endswith(suffix) and len(label) - len(suffix) >= 2:
                return [label[:-len(suffix)], suffix]
        return [label]

    def company_from_domain(self, value: Optional[str]) -> Optional[str]:
        """
        Turns a website or domain into a readable company name:
        flowpower.com.au -> "Flow Power", acme-labs.io -> "Acme Labs".
        """
        if not value:
            return None
        text = value.strip().lower()
        if "@" in text:
            text = text.rsplit("@", 1)[1]
        text = re.sub(r"^w\.\s+", "", text)
        text = re.sub(r"^(?:website|web|w)\s*[:|\-]\s*", "", text)
        text = re.sub(r"^https?://", "", text)
        text = re.sub(r"^www\.", "", text)

        m = re.search(r"[a-z0-9][a-z0-9\-]*(?:\.[a-z0-9\-]+)+", text)
        if not m:
            return None
        label = m.group(0).split(".", 1)[0]
        words = [w for w in label.split("-") if w]
        if len(words) == 1:
            words = self._split_domain_label(words[0])
        name = " ".join(w[0].upper() + w[1:] for w in words)
        return name or None

    def validate_company(
        self,
        company_name: Optional[str],
        lines: List[str],
        full_name: Optional[str] = None,
        anchor: int = -1,
        job_title: Optional[str] = None,
        email: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Optional[str]:
        """
        Keep the resolved company only when it has a company suffix and is not
        an address, a URL or the person's own name. Otherwise repair it, in
        this order:
          1. a line holding the email domain label AND a company suffix
          2. any other line with a company suffix
          3. a name derived from the website / email domain
          4. a line holding the domain label without a suffix
          5. (no domain at all) the first remaining line
        """
        if company_name:
            if self._has_company_suffix(company_name) and self._is_plausible_company(company_name, full_name):
                return company_name
            logger.debug("Company %r rejected; repairing", company_name)

        email_domain = self._email_domain(email)
        if email_domain and self.is_generic_email_domain(email_domain):
            email_domain = None
        website_host = self._host_of(website) if website else None
        if not company_name and not (email_domain or website_host):
            return None

        label_domain = email_domain or website_host
        label = re.sub(r"[^a-z0-9]", "", label_domain.split(".")[0]) if label_domain else ""
        if len(label) < 3:
            label = ""

        full_key = normalize_name(full_name)
        pool = []
        for i, line in enumerate(lines):
            if i == anchor or (full_key and normalize_name(line) == full_key):
                continue
            if self._is_contact_line(line) or line == company_name or line == job_title:
                continue
            if SECTION_HEADING_RE.match(line) or len(line) < 2 or len(line) > 60:
                continue
            if not self._is_plausible_company(line, full_name):
                continue
            pool.append(line)

        def holds_label(line: str) -> bool:
            return bool(label) and label in re.sub(r"[^a-z0-9]", "", line.lower())

        for line in pool:
            if holds_label(line) and self._has_company_suffix(line):
                logger.debug("Company repaired from domain-matching suffix line %r", line)
                return line

        for line in pool:
            if self._has_company_suffix(line):
                logger.debug("Company repaired from suffix line %r", line)
                return line

        derive_from = website or email_domain
        if derive_from:
            derived = self.company_from_domain(derive_from)
            if derived and self._is_plausible_company(derived, full_name):
                logger.debug("Company %r derived from domain %s", derived, derive_from)
                return derived

        for line in pool:
            if holds_label(line):
                return line

        if company_name and not (email_domain or website_host):
            for line in pool:
                if not self._looks_like_title(line):
                    return line
        return None

    # ---------- addresses ----------
    def _blocks_street(self, line: str, context: Tuple[Optional[str], ...]) -> bool:
        if ADDRESS_LABEL_RE.match(line):
            line = ADDRESS_LABEL_RE.sub("", line)
        elif FIELD_LABEL_RE.match(line):
            return True
        if not line or "@" in line or self._has_url_marker(line) or self._looks_like_phone_line(line):
            return True
        if self._has_company_suffix(line) or SECTION_HEADING_RE.match(line):
            return True
        if any(value and line.lower() == value.lower() for value in context):
            return True
        return self._looks_like_title(line) and not STREET_TYPE_RE.search(line)

    def _address_label_score(self, lines: List[str], start: int) -> int:
        """office=100, registered=10, unlabelled=50; the nearest label wins."""
        window = []
        if ":" in lines[start]:
            window.append(lines[start].split(":", 1)[0])
        window.extend(reversed(lines[max(0, start - 2):start]))
        for text in window:
            lowered = text.lower()
            if "registered" in lowered:
                return 10
            if "office" in lowered:
                return 100
        return 50

    def _extract_au_address(self, lines: List[str], context: Tuple[Optional[str], ...]) -> Optional[str]:
        candidates = []
        for i, raw in enumerate(lines):
            line = ADDRESS_LABEL_RE.sub("", raw)
            if not (AU_STATE_RE.search(line) and AU_POSTCODE_RE.search(line)):
                continue
            if "@" in line or self._has_url_marker(line):
                continue

            parts = [line]
            start = i
            if i > 0 and not STREET_PART_RE.search(line) and not self._blocks_street(lines[i - 1], context):
                parts.insert(0, ADDRESS_LABEL_RE.sub("", lines[i - 1]))
                start = i - 1

            address = ", ".join(parts)
            if i + 1 < len(lines) and lines[i + 1].strip(" .,").lower() == "australia":
                address += ", " + lines[i + 1].strip(" .,")
            elif "australia" not in address.lower():
                address += ", Australia"

            score = self._address_label_score(lines, start)
            candidates.append((score, -i, address))

        if not candidates:
            return None
        score, _, address = max(candidates)
        logger.debug("AU address %r picked (score %d of %d candidate(s))", address, score, len(candidates))
        return address

    def _extract_generic_address(self, lines: List[str], context: Tuple[Optional[str], ...]) -> Optional[str]:
        for i, raw in enumerate(lines):
            labelled = bool(ADDRESS_LABEL_RE.match(raw))
            line = ADDRESS_LABEL_RE.sub("", raw)
            if not (re.search(r"\d", line) and STREET_TYPE_RE.search(line)):
                continue
            if not labelled and self._is_contact_line(raw):
                continue
            if self._looks_like_phone_line(line) or self._has_company_suffix(line):
                continue
            if any(value and line.lower() == value.lower() for value in context):
                continue

            parts = [line]
            if i + 1 < len(lines):
                nxt = lines[i + 1]
                if (re.search(r"\b\d{4,5}\b", nxt) or CEDEX_RE.search(nxt)) and not self._is_contact_line(nxt):
                    parts.append(nxt)
            return ", ".join(parts)
        return None

    def extract_address(
        self,
        lines: List[str],
        full_name: Optional[str] = None,
        job_title: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> Optional[str]:
        """Australian layout first, then a generic street-keyword line. Never invented."""
        context = (full_name, job_title, company_name)
        return self._extract_au_address(lines, context) or self._extract_generic_address(lines, context)

    # ---------- main ----------
    def parse(self, raw_text: Optional[str]) -> ParsedContact:
        lines, links = self.prepare(raw_text)
        full_text = "\n".join(lines + links)

        emails = self.extract_emails(full_text)
        email = emails[0] if emails else None

        phones = self.extract_phones(full_text, lines)
        phone = self.format_phone(phones[0]) if phones else None

        websites = self.extract_websites(full_text, lines, email)
        website = websites[0] if websites else None

        linkedin_url = self.extract_linkedin(full_text)

        full_name, anchor = self.extract_name(lines, email)
        company_name = self.extract_company_name(lines, anchor)
        job_title = self.extract_job_title(lines, anchor, company_name)
        company_name = self.validate_company(
            company_name,
            lines,
            full_name=full_name,
            anchor=anchor,
            job_title=job_title,
            email=email,
            website=website,
        )
        address = self.extract_address(lines, full_name, job_title, company_name)

        contact = ParsedContact(
            full_name=full_name,
            job_title=job_title,
            company_name=company_name,
            email=email,
            phone=phone,
            website=website,
            linkedin_url=linkedin_url,
            linkedin_search_url=None if linkedin_url else self.linkedin_search_url(full_name, company_name),
            address=address,
        )
        logger.debug("Parsed contact: %s", contact.to_dict())
        return contact


_default_parser = ContactParser()


def parse_contact(raw_text: Optional[str]) -> ParsedContact:
    """Parse with a shared, stateless ContactParser."""
    return _default_parser.parse(raw_text)
