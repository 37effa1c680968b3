"""
Case-insensitive text matching used by the categorical criteria.
"""

from typing import Iterable, List, Optional


def normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def matches_any(value: Optional[str], allowed: Iterable[str]) -> bool:
    """True when value equals any allowed entry, ignoring case."""
    target = normalize(value)
    if not target:
        return False
    return any(normalize(item) == target for item in allowed)


def overlaps(left: str, right: str) -> bool:
    """True when either string contains the other, ignoring case."""
    a, b = normalize(left), normalize(right)
    if not a or not b:
        return False
    return a in b or b in a


def matched_items(required: Iterable[str], provided: Iterable[str]) -> List[str]:
    """Required entries that overlap with at least one provided entry."""
    provided = [item for item in provided if normalize(item)]
    return [req for req in required if any(overlaps(req, item) for item in provided)]


def active_requirement(value: Optional[str]) -> bool:
    """A categorical requirement is active unless blank or "Any"."""
    return bool(normalize(value)) and normalize(value) != "any"
