from .exceptions import ConfigValidationError, InternalError, SurfcastError
from .logger import setup_logger
from .request import Request, Response, ResponseErrorData

__all__ = [
    "setup_logger",
    "SurfcastError",
    "ConfigValidationError",
    "InternalError",
    "Request",
    "Response",
    "ResponseErrorData",
]
