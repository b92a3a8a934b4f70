"""
JWT issuer package.

Issues compact HS256 JSON Web Tokens from a shared secret and a JSON
claims payload, with an `exp` claim set at issuance time.
"""

from jwt_issuer.errors import (
    TokenIssueError,
    MalformedPayloadError,
    KeyDerivationError,
    SigningError,
)
from jwt_issuer.jwt_utils import (
    ALGORITHM,
    TOKEN_LIFETIME_SECONDS,
    derive_signing_key,
    parse_claims,
    expiry_timestamp,
    issue,
)

__all__ = [
    # Errors
    "TokenIssueError",
    "MalformedPayloadError",
    "KeyDerivationError",
    "SigningError",
    # Issuance
    "ALGORITHM",
    "TOKEN_LIFETIME_SECONDS",
    "derive_signing_key",
    "parse_claims",
    "expiry_timestamp",
    "issue",
]
