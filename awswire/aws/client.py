"""Utils to marshall AWS requests and unmarshall AWS responses as a client."""
import importlib
import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Type

from botocore.model import OperationModel

from awswire import config
from awswire.aws.api import (
    CommonServiceException,
    HttpRequest,
    HttpResponse,
    ServiceException,
    ServiceRequest,
    ServiceResponse,
)
from awswire.aws.protocol.parser import ResponseParser, create_parser
from awswire.aws.protocol.serializer import RequestSerializer, create_serializer
from awswire.aws.protocol.validate import validate_request
from awswire.aws.spec import get_operation_model, get_service_model
from awswire.aws.tracing import log_marshalled_request, log_parsed_response

LOG = logging.getLogger(__name__)


@lru_cache()
def get_serializer(service: str) -> RequestSerializer:
    return create_serializer(get_service_model(service))


@lru_cache()
def get_parser(service: str) -> ResponseParser:
    return create_parser(get_service_model(service))


def marshall_request(
    service: str, operation: str, params: Optional[ServiceRequest]
) -> HttpRequest:
    """
    Serializes the given request parameters of an operation into an HTTP request.

    :param service: the name of the service, f.e. ``kms``
    :param operation: the name of the operation, f.e. ``Decrypt``
    :param params: the request object
    :return: the sans-IO HTTP request
    :raises InvalidArgument: if the service or operation is unknown, or the parameters are invalid
    :raises SerializationError: if the parameters cannot be encoded
    """
    operation_model = get_operation_model(service, operation)

    if config.VALIDATE_REQUESTS and params is not None and operation_model.input_shape is not None:
        validate_request(operation_model, params).raise_first()

    request = get_serializer(service).serialize_to_request(params, operation_model)
    log_marshalled_request(service, operation_model, params, request)
    return request


def parse_response(
    service: str,
    operation: OperationModel,
    response: HttpResponse,
    include_response_metadata: bool = False,
) -> Dict[str, Any]:
    """
    Parses an HTTP Response object into a dict as it is returned by botocore (error responses contain an ``Error``
    entry and are not raised).

    :param service: the name of the service
    :param operation: the operation of the original request
    :param response: the HTTP response object containing the response of the operation
    :param include_response_metadata: True if the ResponseMetadata (typical for boto response dicts) should be included
    :return: a parsed dictionary
    """
    parsed = get_parser(service).parse(response, operation, include_response_metadata)
    log_parsed_response(service, operation, response, parsed)
    return parsed


def unmarshall_response(
    service: str,
    operation: str,
    response: HttpResponse,
    include_response_metadata: bool = False,
) -> ServiceResponse:
    """
    Parses the HTTP response of an operation into the result object of the operation.

    :param service: the name of the service, f.e. ``s3``
    :param operation: the name of the operation, f.e. ``ListObjects``
    :param response: the HTTP response
    :param include_response_metadata: True if the ResponseMetadata should be included in the result
    :return: the parsed result
    :raises ServiceException: if the response is an error response
    :raises MalformedResponse: if the response does not match the operation's output shape
    """
    operation_model = get_operation_model(service, operation)
    parsed = parse_response(service, operation_model, response, include_response_metadata)
    raise_service_exception(response, parsed, service)
    return parsed


def parse_error(response: HttpResponse, operation: OperationModel) -> Optional[ServiceException]:
    """
    Turns an error response of the given operation into a ServiceException.

    :return: the exception, or None if the response is not an error response
    """
    service = operation.service_model.service_name
    parsed = parse_response(service, operation, response, include_response_metadata=True)
    return parse_service_exception(response, parsed, service)


def _get_exception_class(service: str, code: str) -> Optional[Type[ServiceException]]:
    service_model = get_service_model(service)
    error_shape = None
    for shape in service_model.error_shapes:
        if shape.metadata.get("error", {}).get("code", shape.name) == code:
            error_shape = shape
            break
    if error_shape is None:
        return None

    module_name = "awswire.aws.api.%s" % service.replace("-", "_")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError:
        LOG.debug("no generated api module %s for service %s", module_name, service)
        return None
    exception_class = getattr(module, error_shape.name, None)
    if isinstance(exception_class, type) and issubclass(exception_class, ServiceException):
        return exception_class
    return None


def parse_service_exception(
    response: HttpResponse, parsed_response: Dict, service: str = None
) -> Optional[ServiceException]:
    """
    Creates a ServiceException from a parsed response (one that botocore would return).
    If the error code corresponds to a modeled error of the service, the generated exception class of the service is
    used, otherwise a CommonServiceException is created.
    It does not automatically raise the exception (see #raise_service_exception).

    :param response: Un-parsed response
    :param parsed_response: Parsed response
    :param service: the name of the service which returned the response
    :return: ServiceException or None (if it's not an error response)
    """
    if "Error" not in parsed_response:
        return None
    error = parsed_response["Error"]
    code = error.get("Code", f"'{response.status_code}'")
    message = error.get("Message", "")
    sender_fault = error.get("Type") == "Sender"

    exception_class = _get_exception_class(service, code) if service else None
    if exception_class:
        service_exception = exception_class(message)
        service_exception.status_code = response.status_code
        service_exception.sender_fault = sender_fault or exception_class.sender_fault
    else:
        service_exception = CommonServiceException(
            code=code,
            status_code=response.status_code,
            message=message,
            sender_fault=sender_fault,
        )

    if request_id := parsed_response.get("ResponseMetadata", {}).get("RequestId"):
        service_exception.request_id = request_id

    # Add all additional fields in the parsed response as members of the exception
    for key, value in parsed_response.items():
        if key.lower() not in ["code", "message", "type", "error", "responsemetadata"] and not hasattr(
            service_exception, key
        ):
            setattr(service_exception, key, value)
    return service_exception


def raise_service_exception(
    response: HttpResponse, parsed_response: Dict, service: str = None
) -> None:
    """
    Creates and raises a ServiceException from a parsed response (one that botocore would return).
    :param response: Un-parsed response
    :param parsed_response: Parsed response
    :param service: the name of the service which returned the response
    :raise ServiceException: If the response is an error response
    :return: None if the response is not an error response
    """
    if service_exception := parse_service_exception(response, parsed_response, service):
        raise service_exception
