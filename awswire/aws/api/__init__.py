from .core import (
    CodecError,
    CommonServiceException,
    HttpRequest,
    HttpResponse,
    InvalidArgument,
    MalformedResponse,
    SerializationError,
    ServiceException,
    ServiceRequest,
    ServiceResponse,
)

__all__ = [
    "CodecError",
    "CommonServiceException",
    "HttpRequest",
    "HttpResponse",
    "InvalidArgument",
    "MalformedResponse",
    "SerializationError",
    "ServiceException",
    "ServiceRequest",
    "ServiceResponse",
]
