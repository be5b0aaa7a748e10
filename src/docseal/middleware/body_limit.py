from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from docseal.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()
config: Config = load_config()


class BodySizeLimit(BaseHTTPMiddleware):
    """Body size middleware for FastApi endpoints
    Rejects requests whose declared Content-Length exceeds the limit,
    before the body is read.
    """

    def __init__(
        self,
        app,
        dispatch=None,
        max_body_size=config.network.max_body_size,
    ):
        super().__init__(app, dispatch)

        self.__max_body_size = max_body_size

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        content_length = request.headers.get("content-length", "")

        if content_length.isdigit() and int(content_length) > self.__max_body_size:
            logger.warning(
                "Rejected %s %s: body of %s bytes exceeds %d",
                request.method,
                request.url.path,
                content_length,
                self.__max_body_size,
            )
            return JSONResponse(
                status_code=413, content={"detail": "Payload too large."}
            )

        return await call_next(request)
