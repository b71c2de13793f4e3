import logging

import pytest

from awswire import config
from awswire.logging import setup
from awswire.logging.format import AddFormattedAttributes, DefaultFormatter


@pytest.fixture
def configured_levels(monkeypatch):
    levels = []
    monkeypatch.setattr(setup, "setup_logging", levels.append)

    names = [*setup.default_log_levels, *setup.trace_log_levels, *setup.trace_internal_log_levels]
    original = {name: logging.getLogger(name).level for name in names}
    yield levels
    for name, level in original.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_from_config(monkeypatch, configured_levels):
    monkeypatch.setattr(config, "AWSWIRE_LOG", "warn")
    logging.getLogger("awswire.request").setLevel(logging.WARNING)

    setup.setup_logging_from_config()

    assert configured_levels == [logging.WARNING]
    assert logging.getLogger("awswire.request").level == logging.WARNING


def test_trace_logging(monkeypatch, configured_levels):
    monkeypatch.setattr(config, "AWSWIRE_LOG", "trace")
    logging.getLogger("botocore").setLevel(logging.ERROR)

    setup.setup_logging_from_config()

    assert configured_levels == [logging.DEBUG]
    for name in setup.trace_log_levels:
        assert logging.getLogger(name).level == logging.DEBUG
    assert logging.getLogger("botocore").level == logging.ERROR


def test_trace_internal_logging(monkeypatch, configured_levels):
    monkeypatch.setattr(config, "AWSWIRE_LOG", "trace-internal")

    setup.setup_logging_from_config()

    assert configured_levels == [logging.DEBUG]
    assert logging.getLogger("botocore").level == logging.DEBUG
    assert logging.getLogger("awswire.aws.spec").level == logging.DEBUG


def test_create_default_handler():
    handler = setup.create_default_handler(logging.INFO)

    assert handler.level == logging.INFO
    assert isinstance(handler.formatter, DefaultFormatter)
    assert any(isinstance(f, AddFormattedAttributes) for f in handler.filters)
