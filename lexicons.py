# lexicons.py
"""
Read-only vocabularies used by the contact parser.

Everything here is a module-level constant built once at import time and
never mutated afterwards, so a single ContactParser can be shared freely.
"""
from __future__ import annotations

import re


# ---------- preprocessing ----------
SIGN_OFFS = (
    "regards", "kind regards", "best regards", "warm regards", "warmest regards",
    "with regards", "many regards", "sincerely", "yours sincerely", "yours faithfully",
    "yours truly", "cheers", "many thanks", "thanks", "thank you", "thanks again",
    "best", "all the best", "best wishes", "respectfully", "talk soon",
)

SIGN_OFF_RE = re.compile(
    r"^(?:" + "|".join(re.escape(s) for s in SIGN_OFFS) + r")[\s,.!]*$|^--\s*$",
    re.IGNORECASE,
)

DISCLAIMER_TRIGGERS = (
    "important notice",
    "this e-mail message is intended",
    "this email message is intended",
    "confidentiality notice",
    "disclaimer",
    "this message is confidential",
    "if you are not the intended recipient",
    "this communication is intended",
    "please consider the environment",
    "this email and any attachments",
    "privilege and confidential",
    "unauthorized use",
)

HTML_HINT_RE = re.compile(
    r"<\s*/?\s*(?:html|body|br|div|p|span|table|tr|td|a|b|strong|font|img)(?=[\s/>])[^>]*>",
    re.IGNORECASE,
)

HTML_BLOCK_TAGS = ("p", "div", "tr", "li", "table", "h1", "h2", "h3", "h4", "h5", "h6")

# hosts that only ever show up as click trackers in pasted signatures
TRACKING_HINTS = (
    "utm_", "mandrillapp", "sendgrid", "mailchimp", "list-manage", "link.track",
    "r20.rs6.net", "emltrk", "sfmc", "postmarkapp", "sparkpost", "amazonses",
    "unsubscribe",
)


# ---------- field labels ----------
FIELD_LABEL_RE = re.compile(
    r"^(?:m|mobile|t|tel|telephone|p|phone|ph|f|fax|e|email|w|web|website|a|address|linkedin)"
    r"\s*[:|\-]",
    re.IGNORECASE,
)

PHONE_LABEL_RE = re.compile(
    r"^(?:(?:mobile|telephone|tel|phone|ph)\b\.?|(?:m|t|p)\s*[:|\-])",
    re.IGNORECASE,
)

WEBSITE_LABEL_RE = re.compile(
    r"^(?:website|web|w)\s*(?:[:|\-]|\.\s)\s*(?P<value>.+)$",
    re.IGNORECASE,
)

# "A:", "Address:", "Office:", "Head Office:", "Registered Address:" ...
ADDRESS_LABEL_RE = re.compile(
    r"^(?:a|(?:(?:registered|postal|mailing|head|main|business|street|physical|billing)\s+)?"
    r"(?:office|address|location)(?:\s+address)?)\s*[:|\-]\s*",
    re.IGNORECASE,
)


# ---------- companies ----------
LEGAL_SUFFIXES = (
    "pty ltd", "pty. ltd.", "pty limited", "pty",
    "inc", "incorporated",
    "llc", "l.l.c.",
    "ltd", "limited",
    "corp", "corporation",
    "co", "company",
    "gmbh", "ag", "s.a.", "nv", "bv", "b.v.", "srl", "s.r.l.", "sarl", "oy", "ab",
    "plc", "llp", "pte", "pte ltd", "pvt",
)

# words that close a trading name but also turn up inside job titles
ORG_SUFFIXES = (
    "group", "holdings", "partners", "partnership",
    "associates", "consulting", "services", "solutions",
    "international", "enterprises", "industries",
)


def _suffix_pattern(suffix: str) -> str:
    parts = suffix.replace(".", " ").split()
    if suffix == "s.a.":
        # dots stay mandatory so the SA state code never reads as a company
        body = r"s\.a\."
    elif all(len(p) == 1 for p in parts):
        body = r"\.?".join(re.escape(p) for p in parts) + r"\.?"
    else:
        body = r"\.?\s*".join(re.escape(p) for p in parts) + r"\.?"
    return r"(?<![\w.\-])" + body + r"(?![\w\-])"


def _alternation(words, pattern) -> re.Pattern:
    return re.compile(
        "|".join(pattern(w) for w in sorted(words, key=len, reverse=True)),
        re.IGNORECASE,
    )


LEGAL_SUFFIX_RE = _alternation(LEGAL_SUFFIXES, _suffix_pattern)
ORG_SUFFIX_RE = _alternation(ORG_SUFFIXES, _suffix_pattern)

# label splits used when turning "flowpower.com.au" into "Flow Power"
DOMAIN_SPLIT_SUFFIXES = (
    "international", "consulting", "solutions", "australia", "services", "partners",
    "digital", "finance", "capital", "systems", "energy", "global", "group",
    "media", "power", "works", "labs", "tech",
)


# ---------- job titles ----------
TITLE_KEYWORDS = (
    "ceo", "cto", "cfo", "coo", "cmo", "cio", "cpo", "chro", "ciso", "cro",
    "president", "vice president", "vp", "svp", "evp",
    "director", "managing director", "md",
    "manager", "general manager", "gm",
    "lead", "head", "chief",
    "engineer", "developer", "programmer", "architect", "designer",
    "analyst", "consultant", "specialist", "coordinator", "administrator",
    "executive", "officer", "partner", "founder", "co-founder", "owner",
    "sales", "marketing", "hr", "finance", "operations", "legal",
    "senior", "junior", "principal", "associate", "assistant",
    "project", "product", "program", "account", "client", "customer",
    "advisor", "adviser", "strategist", "researcher", "scientist",
    "supervisor", "representative", "accountant", "lawyer", "solicitor",
    "recruiter", "broker", "agent",
)

# functional words name a department, not a role
FUNCTIONAL_TITLE_WORDS = frozenset((
    "sales", "marketing", "hr", "finance", "operations", "legal",
    "senior", "junior", "project", "product", "program", "account", "client", "customer",
))


def _word_pattern(word: str) -> str:
    return r"(?<![\w\-])" + re.escape(word) + r"(?![\w\-])"


TITLE_KEYWORD_RE = _alternation(TITLE_KEYWORDS, _word_pattern)
TITLE_ROLE_RE = _alternation(
    [k for k in TITLE_KEYWORDS if k not in FUNCTIONAL_TITLE_WORDS], _word_pattern
)


# ---------- websites ----------
VALID_TLDS = frozenset((
    # generic
    "com", "org", "net", "io", "co", "ai", "app", "dev", "tech", "biz", "info",
    "edu", "gov", "mil", "int", "pro", "name", "aero", "coop", "museum",
    # popular new gTLDs
    "solutions", "services", "consulting", "digital", "agency", "studio", "design",
    "systems", "cloud", "software", "online", "store", "shop", "energy", "global",
    "group", "holdings", "capital", "finance", "ventures", "partners", "legal",
    "media", "marketing", "technology", "engineering", "construction", "health",
    "education", "academy", "institute", "foundation", "center", "centre",
    "network", "zone", "world", "life", "work", "space", "site", "website",
    "company", "business", "enterprises", "industries", "international",
    # country codes
    "au", "uk", "de", "fr", "es", "it", "nl", "be", "ch", "at", "nz", "ca", "us",
    "jp", "cn", "kr", "sg", "hk", "tw", "in", "pk", "ae", "sa", "za", "br", "mx",
    "ar", "cl", "pe", "ve", "ru", "pl", "cz", "hu", "ro", "bg", "ua", "tr",
    "gr", "pt", "se", "no", "fi", "dk", "ie", "is", "il", "eg", "ng", "ke", "gh",
    "my", "ph", "th", "vn", "id", "bd",
    # compound ccTLDs
    "com.au", "co.uk", "co.nz", "com.br", "co.za", "co.in", "com.sg", "com.hk",
    "co.jp", "co.kr", "com.mx", "com.ar", "co.th", "com.my", "com.ph", "co.id",
    "org.uk", "org.au", "net.au", "gov.au", "edu.au", "ac.uk", "gov.uk",
    # misc
    "eu", "asia", "me", "tv", "cc", "ws", "fm", "ly", "to", "gg", "xyz", "club",
    "link", "click", "news", "live", "one", "plus", "today", "tips", "guide",
    "blog", "video", "photos", "games", "tools", "reviews", "directory",
))

# "francisco.guerrero" is a person, not a host
NAME_LIKE_SURNAMES = frozenset((
    "guerrero", "smith", "johnson", "williams", "brown", "jones", "garcia", "miller",
    "davis", "rodriguez", "martinez", "hernandez", "lopez", "gonzalez", "wilson",
    "anderson", "thomas", "taylor", "moore", "jackson", "martin", "lee", "perez",
    "thompson", "white", "harris", "sanchez", "clark", "ramirez", "lewis", "robinson",
    "walker", "young", "allen", "king", "wright", "scott", "torres", "nguyen", "hill",
    "flores", "green", "adams", "nelson", "baker", "hall", "rivera", "campbell",
    "mitchell", "carter", "roberts", "savage", "chen", "wang", "zhang", "liu", "singh",
    "kumar", "patel", "sharma", "tran", "le", "pham", "kelly", "murphy", "ryan",
    "walsh", "obrien", "kim", "park", "yu", "wu", "li", "ng",
))

COMMON_FIRST_NAMES = frozenset((
    "james", "john", "robert", "michael", "william", "david", "richard", "joseph",
    "thomas", "charles", "daniel", "matthew", "anthony", "mark", "paul", "steven",
    "andrew", "peter", "chris", "christopher", "ben", "sam", "tom", "nick", "luke",
    "jack", "josh", "adam", "simon", "tim", "mary", "patricia", "jennifer", "linda",
    "elizabeth", "barbara", "susan", "jessica", "sarah", "karen", "nancy", "lisa",
    "emma", "olivia", "sophie", "chloe", "emily", "jane", "kate", "anna", "maria",
    "laura", "rachel", "amy", "michelle", "francisco", "carlos", "jose", "juan",
    "luis", "wei", "ming", "raj", "priya",
))

# consumer mailbox providers never stand in for a company website
GENERIC_EMAIL_DOMAINS = frozenset((
    "gmail.com", "googlemail.com", "outlook.com", "hotmail.com", "hotmail.co.uk",
    "live.com", "live.com.au", "msn.com", "yahoo.com", "yahoo.com.au", "yahoo.co.uk",
    "ymail.com", "icloud.com", "me.com", "mac.com", "aol.com", "protonmail.com",
    "proton.me", "gmx.com", "gmx.net", "mail.com", "zoho.com", "yandex.com",
    "bigpond.com", "bigpond.net.au", "optusnet.com.au", "tpg.com.au",
    "iinet.net.au", "internode.on.net", "fastmail.com", "qq.com", "163.com",
))

# local parts that name a mailbox role rather than a person
ROLE_LOCAL_PARTS = frozenset((
    "support", "help", "hello", "contact", "team", "sales", "marketing", "info",
    "noreply", "no-reply", "donotreply", "newsletter", "alerts", "updates",
    "admin", "hr", "jobs", "career", "careers", "billing", "accounts", "office",
    "enquiries", "reception", "mail",
))


# ---------- addresses ----------
AU_STATES = ("NSW", "VIC", "QLD", "WA", "SA", "TAS", "ACT", "NT")

# the short codes clash with English words, so only the long ones match in any case
AU_STATE_RE = re.compile(r"\b(?:(?i:NSW|VIC|QLD|TAS)|WA|SA|ACT|NT)\b")

AU_POSTCODE_RE = re.compile(r"(?<![\d/\-])\b\d{4}\b(?![\d/\-])")

STREET_TYPES = (
    "street", "st", "road", "rd", "avenue", "ave", "boulevard", "blvd", "lane", "ln",
    "drive", "dr", "way", "place", "pl", "court", "ct", "crescent", "cres", "parade",
    "pde", "terrace", "tce", "highway", "hwy", "circuit", "close", "square", "sq",
    "esplanade", "floor", "fl", "level", "lvl", "suite", "ste", "unit", "building",
    "tower", "po box", "gpo box", "rue", "via", "plaza", "strasse", "straße", "calle",
    "avenida", "weg", "laan", "straat",
)

STREET_TYPE_RE = re.compile(
    r"(?<![\w])(?:" + "|".join(re.escape(s) for s in sorted(STREET_TYPES, key=len, reverse=True))
    + r")\.?(?![\w])",
    re.IGNORECASE,
)

# a number followed by a street type inside one comma segment, or a PO box
STREET_PART_RE = re.compile(
    r"\d[^,]*?(?<![\w])(?:"
    + "|".join(re.escape(s) for s in sorted(STREET_TYPES, key=len, reverse=True))
    + r")\.?(?![\w])|\b(?:p\.?\s*o\.?|gpo)\s*box\b",
    re.IGNORECASE,
)

SECTION_HEADING_RE = re.compile(
    r"^(?:registered|postal|mailing|head|main|business|office|street|physical|billing)?"
    r"\s*(?:office|address|location|addresses)(?:\s+address)?\s*:?\s*$",
    re.IGNORECASE,
)

CEDEX_RE = re.compile(r"\bcedex\b", re.IGNORECASE)
