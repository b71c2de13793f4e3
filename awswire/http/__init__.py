from .request import Request
from .response import Response, ResponseStream

__all__ = [
    "Request",
    "Response",
    "ResponseStream",
]
