from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from docseal.core import EncryptionPolicy
from docseal.models.requests import RequestDocument, SignatureResponse
from docseal.routers.dependencies import Engine
from docseal.shared import Logger
from docseal.shared.http import request_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter()

# The original clients send bodies with GET, newer ones use POST
METHODS = ["GET", "POST"]


@router.get("/", response_class=PlainTextResponse)
def greet():
    return "Bonjour! No need to look at this page. Go encrypt some things."


@router.api_route("/encrypt", methods=METHODS)
def encrypt(
    document: RequestDocument,
    engine: Engine,
    policy: EncryptionPolicy | None = None,
):
    """
    Encrypt the document with the configured policy, or the one given in
    the ``policy`` query parameter:
    - selective: entries whose key is in the field selection, at any depth
    - depth_1: every first-level value of a top-level map
    """
    with request_error_handler():
        encrypted = engine.encrypt(document, policy)

    logger.info("Document encrypted.")
    return JSONResponse(content=encrypted)


@router.api_route("/decrypt", methods=METHODS)
def decrypt(document: RequestDocument, engine: Engine):
    with request_error_handler():
        decrypted = engine.decrypt(document)

    logger.info("Document decrypted.")
    return JSONResponse(content=decrypted)


@router.api_route("/sign", methods=METHODS, response_model=SignatureResponse)
def sign(document: RequestDocument, engine: Engine):
    with request_error_handler():
        signature = engine.sign(document)

    logger.info("Document signed.")
    return SignatureResponse(signature=signature)


@router.api_route("/verify", methods=METHODS, status_code=204)
def verify(envelope: RequestDocument, engine: Engine):
    """
    Verify a {data, signature} envelope. Encrypted fields of data are
    decrypted first, so the signature is checked against the plaintext.
    """
    with request_error_handler():
        valid = engine.verify(envelope)

    if not valid:
        raise HTTPException(status_code=400, detail="invalid signature")

    return Response(status_code=204)
