"""Authentication module for JWT and password handling.

Dependencies, middleware and routes are imported from their own modules
to keep this package free of database and routing imports.
"""

from dealerdesk.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from dealerdesk.core.auth.schemas import TokenData


__all__ = [
    "TokenData",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
]
