from jose import jwk, jwt
from jose.backends.base import Key
from jose.exceptions import JWKError, JWSError, JWTError
from typing import Any, Dict, Optional
import json
import logging
import math
import time

from jwt_issuer.errors import KeyDerivationError, MalformedPayloadError, SigningError

ALGORITHM = "HS256"
TOKEN_LIFETIME_SECONDS = 1000

logger = logging.getLogger("jwt_logger")
logger.setLevel(logging.INFO)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def derive_signing_key(secret_key: str) -> Key:
    """
    Import a secret string as HS256 key material.

    Args:
        secret_key: Shared secret, encoded as UTF-8 before import

    Returns:
        python-jose HMAC key usable for signing

    Raises:
        KeyDerivationError: If the secret is empty or refused by python-jose
    """
    key_bytes = secret_key.encode("utf-8")
    if not key_bytes:
        raise KeyDerivationError("Secret key must not be empty")
    try:
        return jwk.construct(key_bytes, algorithm=ALGORITHM)
    except JWKError as e:
        # python-jose refuses secrets that look like public keys or certificates
        raise KeyDerivationError(f"Secret key refused by the HMAC key backend: {e}") from e


def parse_claims(payload_json: str) -> Dict[str, Any]:
    """
    Parse caller JSON text into a mutable claims mapping.

    Key order is preserved. Anything other than a JSON object is rejected,
    as are NaN/Infinity and numbers too large for a float, which would
    otherwise serialize as non-standard JSON.

    Raises:
        MalformedPayloadError: If the text is not a valid JSON object
    """
    try:
        claims = json.loads(
            payload_json,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(claims, dict):
        raise MalformedPayloadError(
            f"Payload must be a JSON object, got {type(claims).__name__}"
        )
    return claims


def expiry_timestamp(now: Optional[float] = None) -> int:
    """UNIX timestamp TOKEN_LIFETIME_SECONDS after `now` (defaults to the current time)."""
    if now is None:
        now = time.time()
    # Halves round up
    return math.floor(now + TOKEN_LIFETIME_SECONDS + 0.5)


def issue(secret_key: str, payload_json: str) -> str:
    """
    Issue a compact HS256 JWT for the given claims.

    The `exp` claim is always overwritten with the issuance time plus
    TOKEN_LIFETIME_SECONDS.

    Args:
        secret_key: Shared HMAC secret
        payload_json: JSON text of a claims object

    Returns:
        Token string of the form header.payload.signature

    Raises:
        KeyDerivationError: If the secret is unusable as key material
        MalformedPayloadError: If the payload is not a JSON object
        SigningError: If the signing primitive fails
    """
    key = derive_signing_key(secret_key)
    headers = {"alg": ALGORITHM, "typ": "JWT"}

    try:
        claims = parse_claims(payload_json)
    except MalformedPayloadError as e:
        logger.warning(f"Rejected payload: {e}")
        raise

    claims["exp"] = expiry_timestamp()

    try:
        token = jwt.encode(claims, key, algorithm=ALGORITHM, headers=headers)
    except (JWSError, JWTError) as e:
        logger.warning(f"Signing failed: {e}")
        raise SigningError(f"Failed to sign token: {e}") from e

    logger.info(f"Issued token with claims {sorted(claims)} expiring at {claims['exp']}")
    return token
