"""
Function-runner boundary for the token issuer.

A runner invokes `main` with a record of named inputs and takes the
return value as the function's result:

    main({"secret_key": "key123", "payload": "{}"})
"""

from pydantic import BaseModel
from typing import Any, Mapping
import os

from jwt_issuer.jwt_utils import issue

ECHO_DISABLED_VALUES = {"0", "false", "no", "off"}


class IssueRequest(BaseModel):
    secret_key: str
    payload: str


def echo_enabled() -> bool:
    value = os.environ.get("JWT_ECHO_TOKEN", "1")
    return value.strip().lower() not in ECHO_DISABLED_VALUES


def main(inputs: Mapping[str, Any]) -> str:
    """
    Issue a token from a `{secret_key, payload}` input record.

    The token is also written to stdout unless JWT_ECHO_TOKEN disables it.
    Callers should rely on the return value.

    Raises:
        pydantic.ValidationError: If a field is missing or not a string
        TokenIssueError: Any issuance failure, see jwt_issuer.errors
    """
    request = IssueRequest.model_validate(inputs)
    token = issue(request.secret_key, request.payload)
    if echo_enabled():
        print(token)
    return token
