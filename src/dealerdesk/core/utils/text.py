"""Text processing utilities."""

import re
from collections.abc import Iterable

from dealerdesk.core.constants import MAX_SLUG_LENGTH


_SLUG_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")


def generate_slug(name: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a URL-safe slug from a name.

    Lowercases, drops punctuation, and joins words with single hyphens.
    The result is also a valid DNS label so it can be used as a subdomain.

    Examples:
        >>> generate_slug("Acme Copiers, Inc.")
        'acme-copiers-inc'
        >>> generate_slug("  Print & Go 2024 ")
        'print-go-2024'
    """
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug[:max_length].strip("-")


def is_valid_slug(value: str) -> bool:
    """Check that a value is a lowercase DNS label usable as a tenant slug."""
    return len(value) <= MAX_SLUG_LENGTH and bool(_SLUG_PATTERN.match(value))


def path_has_prefix(path: str, prefixes: Iterable[str]) -> bool:
    """Check whether ``path`` starts with one of ``prefixes`` on a segment boundary.

    Examples:
        >>> path_has_prefix("/health/live", ["/health"])
        True
        >>> path_has_prefix("/healthcare-copiers/api", ["/health"])
        False
    """
    return any(
        path == prefix or path.startswith(f"{prefix.rstrip('/')}/")
        for prefix in prefixes
    )
