from typing import Any, Optional, TypedDict

from awswire.http import Request, Response

# the sans-IO messages the codec produces and consumes
HttpRequest = Request
HttpResponse = Response


class ServiceRequest(TypedDict):
    pass


ServiceResponse = Any


class CodecError(Exception):
    """
    Super class of all errors raised while marshalling a request or unmarshalling a response.
    """

    pass


class InvalidArgument(CodecError, ValueError):
    """
    Error which indicates that the object passed to the codec is missing, incomplete, or violates the constraints of
    the operation's input shape.
    """

    pass


class SerializationError(CodecError):
    """
    Error which indicates that a (valid) request object could not be encoded into a wire request.
    """

    pass


class MalformedResponse(CodecError):
    """
    Error which indicates that the body of a response is not valid JSON / XML, is truncated, or does not match the
    structure of the operation's output shape.
    """

    pass


class ServiceException(Exception):
    """
    An exception that indicates that a service returned an error response.
    The generated subclasses carry the error code, the sender fault, and the HTTP status code of the modeled error
    shape as class attributes. Additional members of the error shape are set as instance attributes.
    """

    code: str = "ServiceException"
    status_code: int = 400
    sender_fault: bool = False
    message: str
    request_id: Optional[str] = None

    def __init__(self, *args, **kwargs):
        super(ServiceException, self).__init__(*args)

        if len(args) >= 1:
            self.message = args[0]
        else:
            self.message = ""
        for key, value in kwargs.items():
            setattr(self, key, value)


class CommonServiceException(ServiceException):
    """
    An exception for service errors which are not modeled in the service's specification (i.e. the error code does
    not correspond to a generated exception class).
    In the AWS API references, this kind of errors are usually referred to as "Common Errors", f.e.:
    https://docs.aws.amazon.com/AWSSimpleQueueService/latest/APIReference/CommonErrors.html
    """

    def __init__(self, code: str, message: str, status_code: int = 400, sender_fault: bool = False):
        self.code = code
        self.status_code = status_code
        self.sender_fault = sender_fault
        super().__init__(message)
