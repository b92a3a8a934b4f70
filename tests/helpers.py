import base64
import json


def decode_segment(segment: str) -> bytes:
    """Base64url-decode a token segment, restoring the stripped padding."""
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def decode_claims(token: str) -> dict:
    return json.loads(decode_segment(token.split(".")[1]))
