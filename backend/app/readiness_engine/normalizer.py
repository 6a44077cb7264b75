"""Text normalization for destination and product lookups."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_country(raw: str | None) -> str:
    """Canonical lookup key for a destination name.

    Lower-cases, trims, drops periods and commas and collapses whitespace runs,
    so "U.K." and " united  kingdom " both become comparable keys.
    Empty or None input yields "" which matches no destination pack.
    """
    if not raw:
        return ""
    key = str(raw).strip().lower().replace(".", "").replace(",", "")
    return _WHITESPACE.sub(" ", key).strip()


def normalize_product(raw: str | None) -> str:
    """Lower-cased product text used for keyword matching."""
    return str(raw or "").lower()
