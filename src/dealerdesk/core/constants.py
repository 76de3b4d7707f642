"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Slugs
MAX_SLUG_LENGTH = 63

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_CODE_LENGTH = 50

# Pagination defaults
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

# Passwords
MIN_PASSWORD_LENGTH = 12
MAX_PASSWORD_LENGTH = 128

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Tenant routing
RESERVED_HOST_LABELS = frozenset({"www", "api"})
RESERVED_PATH_PREFIXES = frozenset({"api", "login", "signup", "auth"})
TENANT_SESSION_PREFIX = "tenant:session:"
TENANT_SESSION_TTL_SECONDS = 60 * 60 * 12  # 12 hours
