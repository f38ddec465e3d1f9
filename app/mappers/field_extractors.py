import re

from bs4 import BeautifulSoup

from app.schemas.website import FieldExtraction, Platform, SourcePage

COUNTRY_CODE = "91"

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

# Optional +91 prefix, then a mobile number starting with 6-9. The halves may be
# split by one space or hyphen. Digits glued on either side disqualify the match.
_PHONE_RE = re.compile(
    r"(?<![\d+])(?:\+?91[\s\-]?)?[6-9]\d{4}[\s\-]?\d{5}(?!\d)",
)

_SHOPIFY_MARKER = "cdn.shopify.com"

_MIN_ADDRESS_LENGTH = 20

# Key -> substrings of the href that identify the platform
_SOCIAL_PATTERNS: dict[str, tuple[str, ...]] = {
    "instagram": ("instagram.com",),
    "facebook": ("facebook.com",),
    "linkedin": ("linkedin.com",),
    "whatsapp": ("wa.me", "whatsapp"),
}


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def page_text(soup: BeautifulSoup) -> str:
    """Visible text of <body>, or of the whole document when there is no body."""
    root = soup.body or soup
    return root.get_text()


def normalize_phone(raw: str) -> str | None:
    """Normalize to +91XXXXXXXXXX, or None if it is not a 10-digit subscriber number."""
    digits = "".join(c for c in raw if c.isdigit())
    if len(digits) == 12 and digits.startswith(COUNTRY_CODE):
        digits = digits[2:]
    if len(digits) != 10:
        return None
    return f"+{COUNTRY_CODE}{digits}"


def extract_email(text: str) -> str | None:
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else None


def extract_phones(text: str) -> list[str]:
    phones: list[str] = []
    for match in _PHONE_RE.finditer(text):
        normalized = normalize_phone(match.group(0))
        if normalized and normalized not in phones:
            phones.append(normalized)
    return phones


def extract_name(soup: BeautifulSoup) -> str | None:
    meta = soup.find("meta", attrs={"property": "og:site_name"})
    if meta is not None:
        name = _clean(meta.get("content"))
        if name:
            return name
    if soup.title is not None:
        return _clean(soup.title.get_text())
    return None


def extract_about(soup: BeautifulSoup) -> str | None:
    meta = soup.find("meta", attrs={"name": "description"})
    if meta is None:
        return None
    return meta.get("content") or None


def extract_platform(html: str) -> Platform:
    # Only Shopify is detected; everything else reports unknown.
    return Platform.shopify if _SHOPIFY_MARKER in html else Platform.unknown


def extract_location(soup: BeautifulSoup) -> str | None:
    """Last <address> block that is long enough and contains a digit."""
    location = None
    for address in soup.find_all("address"):
        text = address.get_text().strip()
        if len(text) > _MIN_ADDRESS_LENGTH and any(c.isdigit() for c in text):
            location = text
    return location


def extract_socials(soup: BeautifulSoup) -> dict[str, str]:
    """First matching href per platform, in document order."""
    socials: dict[str, str] = {}
    for a in soup.find_all("a", href=True):
        href = a["href"]
        if not href:
            continue
        for key, needles in _SOCIAL_PATTERNS.items():
            if key not in socials and any(n in href for n in needles):
                socials[key] = href
    return socials


def extract_fields(page: SourcePage) -> FieldExtraction:
    soup = BeautifulSoup(page.html, "html.parser")
    text = page_text(soup)
    return FieldExtraction(
        name=extract_name(soup),
        about=extract_about(soup),
        email=extract_email(text),
        phones=extract_phones(text),
        location=extract_location(soup),
        socials=extract_socials(soup),
        platform=extract_platform(page.html),
    )
