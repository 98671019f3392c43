"""Address summarization - Pure functions.

Workout locations arrive as full street addresses; listings only need
"City, ST". All functions are pure with no side effects.
"""

import re


_STATE = re.compile(r"([A-Z]{2})(\s+\d{5})?", re.IGNORECASE)
_POSTAL_CODE = re.compile(r"[A-Z0-9\s]*\d[A-Z0-9\s]*", re.IGNORECASE)
_COUNTRY_CODE = re.compile(r"[A-Z]{2}", re.IGNORECASE)
_US = re.compile(r"US|United States", re.IGNORECASE)


def _could_be_city(part: str) -> bool:
    """Street lines and postal codes contain digits; city names do not."""
    return bool(part) and not any(c.isdigit() for c in part)


def _find_city_and_state(parts: list[str]) -> str | None:
    """Find "City, ST" or "City, ST 12345" adjacent parts."""
    for current, following in zip(parts, parts[1:]):
        if not _could_be_city(current):
            continue
        state = _STATE.fullmatch(following)
        if state:
            return f"{current}, {state.group(1).upper()}"
    return None


def _find_city_and_country(parts: list[str]) -> str | None:
    """Find "City, POSTAL, CC" or "City, CC" parts."""
    for i, (current, following) in enumerate(zip(parts, parts[1:])):
        if not _could_be_city(current):
            continue

        if (
            _POSTAL_CODE.fullmatch(following)
            and i + 2 < len(parts)
            and _COUNTRY_CODE.fullmatch(parts[i + 2])
        ):
            return f"{current}, {parts[i + 2].upper()}"

        if _COUNTRY_CODE.fullmatch(following):
            return f"{current}, {following.upper()}"
    return None


def extract_city_and_state(location: str) -> str:
    """Extract "City, ST" from a full address.

    Pure function.

    Args:
        location: Address such as "123 Main St, Katy, TX, 77494, United States"

    Returns:
        "City, ST" (or "City, CC" for international addresses); the input
        unchanged if it has no commas; the last two parts as a fallback
    """
    if not location:
        return ""

    parts = [p.strip() for p in location.split(",")]
    if len(parts) == 1:
        return location

    clean_parts = [p for p in parts if not _US.fullmatch(p)]

    found = _find_city_and_state(clean_parts) or _find_city_and_country(clean_parts)
    if found:
        return found

    return ", ".join(clean_parts[-2:])
