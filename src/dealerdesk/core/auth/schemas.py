"""Authentication schemas for token handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class TokenData(BaseModel):
    """Data extracted from a JWT token.

    Attributes:
        user_id: The user's UUID
        tenant_id: The tenant the token was issued for
        exp: Token expiration time
        type: Token type
        jti: Unique token ID
    """

    user_id: UUID
    tenant_id: UUID
    exp: datetime
    type: str = "access"
    jti: str | None = None
