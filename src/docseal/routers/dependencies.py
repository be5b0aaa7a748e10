from typing import Annotated

from fastapi import Depends, Request

from docseal.core import DocumentEngine


def get_engine(request: Request) -> DocumentEngine:
    return request.app.state.engine


Engine = Annotated[DocumentEngine, Depends(get_engine)]
