import pytest

from awswire import config


@pytest.fixture(autouse=True)
def enable_request_validation(monkeypatch):
    """
    Automatically enables the request parameter validation for all unit tests, independent of the environment.
    """
    monkeypatch.setattr(config, "VALIDATE_REQUESTS", True)
