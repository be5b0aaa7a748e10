from fastapi import APIRouter, Response

from docseal.models.requests import RequestDocument
from docseal.routers.dependencies import Engine
from docseal.shared import Logger
from docseal.shared.http import request_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.api_route("/config", methods=["GET", "POST"], status_code=204)
def config(document: RequestDocument, engine: Engine):
    """
    input: {"fieldsToEncrypt": ["name", ...]}
    replaces the field selection used by selective encryption
    """
    with request_error_handler():
        engine.configure(document)

    return Response(status_code=204)


@router.get("/config/fields")
def current_fields(engine: Engine) -> dict[str, list[str]]:
    return {"fieldsToEncrypt": list(engine.selector.fields)}
