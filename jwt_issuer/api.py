from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from mangum import Mangum
import logging

from jwt_issuer.errors import KeyDerivationError, MalformedPayloadError, SigningError
from jwt_issuer.function import IssueRequest
from jwt_issuer.jwt_utils import issue

logger = logging.getLogger("api_logger")
logger.setLevel(logging.INFO)

app = FastAPI(title="JWT Issuer")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Missing/malformed request bodies are reported as 400, not 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "There is missing field(s) in the request or it is formed improperly."}
    )


@app.exception_handler(MalformedPayloadError)
async def malformed_payload_handler(request: Request, exc: MalformedPayloadError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"The payload is malformed: {exc}"}
    )


@app.exception_handler(KeyDerivationError)
async def key_derivation_handler(request: Request, exc: KeyDerivationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "The secret key cannot be used as HMAC key material."}
    )


@app.exception_handler(SigningError)
async def signing_error_handler(request: Request, exc: SigningError):
    logger.error(f"Token signing failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The token could not be signed."}
    )


@app.get("/health")
def health():
    return {"status": "Service reachable."}


@app.post("/token")
def create_token(body: IssueRequest) -> str:
    """
    Issue a signed HS256 token for the JSON claims in `payload`.
    Returns the compact token as a JSON string.
    """
    return issue(body.secret_key, body.payload)


# AWS Lambda entry point
handler = Mangum(app)
