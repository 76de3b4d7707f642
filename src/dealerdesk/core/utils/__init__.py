"""Shared utilities."""

from dealerdesk.core.utils.text import generate_slug, is_valid_slug, path_has_prefix


__all__ = ["generate_slug", "is_valid_slug", "path_has_prefix"]
