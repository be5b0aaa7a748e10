from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request

from docseal.core.document import Document, parse
from docseal.core.errors import MalformedInput
from docseal.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()
config: Config = load_config()

type UnwrapHandler[T] = Callable[[Request], Awaitable[T]]


class DocumentBody:
    """Reads a raw request body as a JSON document.

    Bodies are parsed by hand rather than through a pydantic model so that
    any JSON value is accepted and parse errors keep their line and column.
    """

    @classmethod
    def unwrap(
        cls, max_body_size: int = config.network.max_body_size
    ) -> UnwrapHandler[Document]:
        async def unwrap_handler(request: Request) -> Document:
            body = await request.body()
            # Chunked bodies carry no Content-Length for the middleware to check
            if len(body) > max_body_size:
                logger.warning(
                    "Rejected body of %d bytes, limit is %d", len(body), max_body_size
                )
                raise HTTPException(status_code=413, detail="Payload too large.")

            try:
                document = parse(body)
            except MalformedInput as e:
                logger.warning("Failed to parse request body: %s", e)
                raise HTTPException(status_code=400, detail=str(e)) from e

            logger.debug("Request body parsed successfully.")
            return document

        return unwrap_handler


# Any rather than Document: FastAPI must not try to build a model from the alias
RequestDocument = Annotated[Any, Depends(DocumentBody.unwrap())]
