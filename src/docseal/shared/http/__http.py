from contextlib import contextmanager

from fastapi import HTTPException

from docseal.core.errors import DocumentError
from docseal.shared import Logger

__all__ = ["request_error_handler"]

logger = Logger(__name__).get_logger()


@contextmanager
def request_error_handler(stacklevel=1):
    """Translate engine exceptions into HTTP errors.

    Engine errors are the caller's fault and become 400 with the engine's
    message. Anything else is a server fault and becomes 500.
    """
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except DocumentError as e:
        logger.warning("Rejected request: %s", e, **kw)
        raise HTTPException(status_code=400, detail=str(e)) from e

    except Exception as e:
        logger.error("Failed to process request: %s", e, **kw)
        raise HTTPException(status_code=500, detail=str(e)) from e
