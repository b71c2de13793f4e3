import logging

import pytest

from awswire.aws import tracing
from awswire.aws.api import HttpResponse
from awswire.aws.client import marshall_request, unmarshall_response
from awswire.aws.spec import get_operation_model
from awswire.aws.tracing import (
    REQUEST_LOGGER_NAME,
    RESPONSE_LOGGER_NAME,
    _prepare_logger,
    log_parsed_response,
)
from awswire.logging.format import AddFormattedAttributes, TraceLoggingFormatter


@pytest.fixture
def trace_logger():
    logger = logging.getLogger("awswire.test.tracing")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = True


def test_prepare_logger_adds_trace_handler(trace_logger):
    trace_logger.setLevel(logging.DEBUG)

    _prepare_logger(trace_logger, TraceLoggingFormatter)

    assert not trace_logger.propagate
    assert len(trace_logger.handlers) == 1
    assert isinstance(trace_logger.handlers[0].formatter, TraceLoggingFormatter)

    # preparing the logger twice does not add another handler
    _prepare_logger(trace_logger, TraceLoggingFormatter)
    assert len(trace_logger.handlers) == 1


def test_prepare_logger_ignores_disabled_logger(trace_logger):
    trace_logger.setLevel(logging.INFO)

    _prepare_logger(trace_logger, TraceLoggingFormatter)

    assert trace_logger.propagate
    assert not trace_logger.handlers


def test_trace_formatter_shortens_large_payloads():
    record = logging.LogRecord(
        "awswire.request", logging.DEBUG, __file__, 1, "kms.Encrypt => POST /", None, None
    )
    record.operation = "kms.Encrypt"
    record.input_type = "EncryptRequest"
    record.input = {"KeyId": "alias/test", "Plaintext": b"x" * 2048}
    record.output_type = "Request"
    record.output = b"{}"
    AddFormattedAttributes().filter(record)

    message = TraceLoggingFormatter().format(record)

    assert "kms.Encrypt; EncryptRequest(" in message
    assert "'Plaintext': 'Bytes(2.05KB)'" in message
    assert "'KeyId': 'alias/test'" in message
    # the record itself keeps the original values
    assert record.input["Plaintext"] == b"x" * 2048


def test_log_parsed_response_skipped_without_debug(caplog):
    caplog.set_level(logging.INFO, logger="awswire.response")
    operation = get_operation_model("kms", "Decrypt")

    log_parsed_response("kms", operation, HttpResponse(b"{}", status=200), {})

    assert not caplog.records


@pytest.fixture
def trace_records(monkeypatch, caplog):
    """Routes the request and response trace loggers into caplog at DEBUG level."""
    for name in (REQUEST_LOGGER_NAME, RESPONSE_LOGGER_NAME):
        logger = logging.getLogger(name)
        monkeypatch.setattr(logger, "propagate", True)
        caplog.set_level(logging.DEBUG, logger=name)
    monkeypatch.setattr(tracing, "request_logger", lambda: logging.getLogger(REQUEST_LOGGER_NAME))
    monkeypatch.setattr(tracing, "response_logger", lambda: logging.getLogger(RESPONSE_LOGGER_NAME))
    return caplog


def test_log_marshalled_request(trace_records):
    request = marshall_request("iot", "DescribeThing", {"thingName": "my thing"})

    records = [r for r in trace_records.records if r.name == REQUEST_LOGGER_NAME]
    assert len(records) == 1
    record = records[0]
    assert record.getMessage().startswith("iot.DescribeThing => GET /things/my")
    assert record.operation == "iot.DescribeThing"
    assert record.input_type == "DescribeThingRequest"
    assert record.input == {"thingName": "my thing"}
    assert record.output_type == "Request"
    assert record.output == request.get_data()


def test_log_parsed_response(trace_records):
    response = HttpResponse(b'{"KeyId": "key-1"}', status=200, headers={"x-amzn-RequestId": "request-1"})

    unmarshall_response("kms", "Decrypt", response)

    records = [r for r in trace_records.records if r.name == RESPONSE_LOGGER_NAME]
    assert len(records) == 1
    record = records[0]
    assert record.getMessage() == "kms.Decrypt <= 200"
    assert record.input_type == "Response"
    assert record.input["x-amzn-RequestId"] == "request-1"
    assert record.output_type == "DecryptResponse"
    assert record.output == {"KeyId": "key-1"}


def test_log_parsed_error_response(trace_records):
    operation = get_operation_model("kms", "Decrypt")
    parsed = {"Error": {"Code": "NotFoundException", "Message": "key not found"}}

    log_parsed_response("kms", operation, HttpResponse(b"", status=400), parsed)

    (record,) = [r for r in trace_records.records if r.name == RESPONSE_LOGGER_NAME]
    assert record.output_type == "NotFoundException"
    assert record.output is parsed
