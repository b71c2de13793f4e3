"""Trace logging of marshalled requests and parsed responses."""
import logging
from functools import lru_cache
from typing import Any, Optional, Type

from botocore.model import OperationModel

from awswire.http import Request, Response
from awswire.http.request import get_full_raw_path
from awswire.logging.format import TraceLoggingFormatter
from awswire.logging.setup import create_default_handler

LOG = logging.getLogger(__name__)

REQUEST_LOGGER_NAME = "awswire.request"
RESPONSE_LOGGER_NAME = "awswire.response"


# make sure loggers are prepared after the logging config is loaded
def _prepare_logger(logger: logging.Logger, formatter: Type[logging.Formatter]) -> logging.Logger:
    if logger.isEnabledFor(logging.DEBUG) and not logger.handlers:
        logger.propagate = False
        handler = create_default_handler(logger.level)
        handler.setFormatter(formatter())
        logger.addHandler(handler)
    return logger


@lru_cache()
def request_logger() -> logging.Logger:
    return _prepare_logger(logging.getLogger(REQUEST_LOGGER_NAME), formatter=TraceLoggingFormatter)


@lru_cache()
def response_logger() -> logging.Logger:
    return _prepare_logger(logging.getLogger(RESPONSE_LOGGER_NAME), formatter=TraceLoggingFormatter)


def _shape_name(operation: OperationModel, output: bool) -> Optional[str]:
    shape = operation.output_shape if output else operation.input_shape
    return shape.name if shape else None


def log_marshalled_request(service: str, operation: OperationModel, params: Any, request: Request):
    logger = request_logger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "%s.%s => %s %s",
        service,
        operation.name,
        request.method,
        get_full_raw_path(request),
        extra={
            "operation": f"{service}.{operation.name}",
            "input_type": _shape_name(operation, output=False) or "Request",
            "input": params,
            "output_type": "Request",
            "output": request.get_data(),
        },
    )


def log_parsed_response(service: str, operation: OperationModel, response: Response, parsed: Any):
    logger = response_logger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if "Error" in parsed:
        output_type = parsed["Error"].get("Code")
    else:
        output_type = _shape_name(operation, output=True) or "Response"
    logger.debug(
        "%s.%s <= %d",
        service,
        operation.name,
        response.status_code,
        extra={
            "operation": f"{service}.{operation.name}",
            "input_type": "Response",
            "input": dict(response.headers),
            "output_type": output_type,
            "output": parsed,
        },
    )
