"""
Helper utilities for the Dark Web Leak Monitor
"""

import re
from datetime import datetime, timezone
from typing import Iterable, List
from urllib.parse import urlparse

# Labels of 1-63 chars, no leading/trailing hyphen, alphabetic TLD
DOMAIN_PATTERN = re.compile(
    r'^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$'
)
MAX_DOMAIN_LENGTH = 253


def normalize_domain(raw: str) -> str:
    """
    Reduce a user-supplied domain string to a bare lowercase host

    Strips surrounding whitespace, scheme, credentials, port, path, query,
    fragment and a trailing dot. The result is not validated.

    Args:
        raw: Domain, host or URL as typed by the user

    Returns:
        Normalized host string (possibly empty)
    """
    if not isinstance(raw, str):
        return ""

    candidate = raw.strip().lower()
    if not candidate:
        return ""

    if "://" not in candidate:
        candidate = "//" + candidate

    try:
        host = urlparse(candidate).hostname or ""
    except ValueError:
        return ""

    return host.rstrip(".")


def is_valid_domain(domain: str) -> bool:
    """
    Check if a string is a valid domain

    Args:
        domain: Domain string

    Returns:
        True if valid domain
    """
    if not domain or not isinstance(domain, str):
        return False

    if len(domain) > MAX_DOMAIN_LENGTH:
        return False

    return bool(DOMAIN_PATTERN.match(domain.lower()))


def validate_domains(raw_domains: Iterable[str]) -> List[str]:
    """
    Normalize and filter a list of user-supplied domains

    Invalid entries are dropped, duplicates removed, input order kept.

    Args:
        raw_domains: Raw domain strings

    Returns:
        Canonical domains
    """
    normalized = []

    for raw in raw_domains:
        domain = normalize_domain(raw)
        if is_valid_domain(domain):
            normalized.append(domain)

    return deduplicate_list(normalized)


def split_domain_args(values: Iterable[str]) -> List[str]:
    """Split comma-separated CLI values into individual entries"""
    entries = []
    for value in values:
        entries.extend(part.strip() for part in value.split(",") if part.strip())
    return entries


def deduplicate_list(items: List[str]) -> List[str]:
    """
    Remove duplicates from a list while preserving order

    Args:
        items: Input list

    Returns:
        Deduplicated list
    """
    seen = set()
    result = []

    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)

    return result


def truncate_text(text: str, limit: int) -> str:
    """Return at most ``limit`` characters of ``text``"""
    if not text:
        return ""
    return text[:limit]


def get_timestamp() -> str:
    """
    Get current UTC timestamp in ISO-8601 format

    Returns:
        Timestamp string
    """
    return datetime.now(timezone.utc).isoformat()
