# utils/validators.py
"""
Explicit parsing of query-string and form values.

Every helper takes the raw value exactly as Django hands it over
(a ``str`` or ``None``) and never raises: absent or malformed input
falls back to the documented default.
"""
from typing import Optional


# -----------------------------
# Numbers
# -----------------------------
def parse_positive_int(val, default: int) -> int:
    """
    Parse a page number / page size.
    Returns ``default`` when the value is absent, not an integer, or < 1.
    """
    if val is None:
        return default
    try:
        number = int(str(val).strip())
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


# -----------------------------
# Booleans
# -----------------------------
def parse_checkbox(val) -> bool:
    """HTML checkbox: only the literal "on" means True."""
    return val == "on"


def parse_bool_filter(val) -> Optional[bool]:
    """
    Listing filter value.
    Absent or empty → None (no filter); "true" → True; anything else → False.
    """
    if not val:
        return None
    return val == "true"


# -----------------------------
# Strings
# -----------------------------
def clean_optional(val) -> Optional[str]:
    """Trim an optional text value; empty or absent becomes None."""
    if val is None:
        return None
    val = str(val).strip()
    return val or None
