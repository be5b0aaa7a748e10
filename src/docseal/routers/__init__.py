from .documents import router as documents_router
from .fields import router as fields_router

_routers = [documents_router, fields_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
