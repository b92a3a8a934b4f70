"""
Error taxonomy for token issuance.

Every failure surfaced by the issuer is a subclass of TokenIssueError,
so callers can catch the family or a single kind.
"""


class TokenIssueError(Exception):
    """Base class for failures while issuing a token."""
    pass


class MalformedPayloadError(TokenIssueError):
    """Raised when the payload text is not valid JSON or is not a JSON object."""
    pass


class KeyDerivationError(TokenIssueError):
    """Raised when the secret cannot be imported as HMAC key material."""
    pass


class SigningError(TokenIssueError):
    """Raised when the signing primitive fails unexpectedly."""
    pass
