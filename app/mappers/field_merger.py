from collections.abc import Callable, Sequence
from typing import Any

from app.schemas.company import ProfileCandidate
from app.schemas.website import FieldExtraction


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def first_non_empty(values: Sequence[Any]) -> Any:
    """First value that is not empty; later values are never consulted."""
    for value in values:
        if not _is_empty(value):
            return value
    return values[0] if values else None


def homepage_only(values: Sequence[Any]) -> Any:
    return values[0]


Rule = Callable[[Sequence[Any]], Any]

# Phones use first_non_empty too: the first non-empty set replaces the whole
# (empty) homepage set, it is never merged element-wise.
PRECEDENCE: dict[str, Rule] = {
    "name": first_non_empty,
    "about": first_non_empty,
    "email": first_non_empty,
    "phones": first_non_empty,
    "location": first_non_empty,
    "socials": homepage_only,
    "platform": homepage_only,
}


def merge_extractions(
    homepage: FieldExtraction,
    deep_pages: Sequence[FieldExtraction] = (),
) -> ProfileCandidate:
    """Reconcile the homepage extraction with deep-page extractions.

    Sources are ordered homepage first, then deep pages in fetch order.
    """
    sources = [homepage, *deep_pages]
    merged: dict[str, Any] = {}
    for field, rule in PRECEDENCE.items():
        merged[field] = rule([getattr(source, field) for source in sources])
    return ProfileCandidate(**merged)
