from .body_limit import BodySizeLimit

__all__ = ["BodySizeLimit"]
