"""Utilities to inspect AWS IoT data endpoints (``<prefix>.iot.<region>.amazonaws.com[:port]``)."""
from functools import lru_cache
from typing import NamedTuple, Optional, Set

from botocore.session import Session

from awswire.aws.api import InvalidArgument

BAD_ENDPOINT_FORMAT = "Bad endpoint format.  Expected XXXXXX.iot.[region].amazonaws.com."


@lru_cache()
def get_valid_regions() -> Set[str]:
    """Returns the regions of all partitions in which botocore knows an IoT endpoint."""
    session = Session()
    valid_regions = set()
    for partition in session.get_available_partitions():
        valid_regions.update(session.get_available_regions("iot", partition))
    return valid_regions


class IotEndpoint(NamedTuple):
    """
    The parts of an AWS IoT data endpoint. The prefix is the account specific endpoint prefix (f.e. ``abc123`` or
    ``abc123-ats``).
    """

    prefix: str
    region: str
    port: Optional[int] = None

    @property
    def host(self) -> str:
        return f"{self.prefix}.iot.{self.region}.amazonaws.com"

    def __str__(self):
        return f"{self.host}:{self.port}" if self.port is not None else self.host

    @classmethod
    def parse(cls, endpoint: str) -> "IotEndpoint":
        """
        Parses an endpoint of the form ``<prefix>.iot.<region>.amazonaws.com``, optionally followed by ``:<port>``.
        The fixed tokens (``iot``, ``amazonaws``, ``com``) are matched case-insensitively.

        :param endpoint: the endpoint string to parse
        :return: an IotEndpoint instance
        :raises InvalidArgument: if the endpoint does not have the expected format, or the region is unknown
        """
        if not endpoint:
            raise InvalidArgument(BAD_ENDPOINT_FORMAT)

        host, _, port = endpoint.partition(":")
        if port and not port.isdigit():
            raise InvalidArgument(BAD_ENDPOINT_FORMAT)

        tokens = host.split(".")
        if len(tokens) != 5:
            raise InvalidArgument(BAD_ENDPOINT_FORMAT)

        prefix, service, region, domain, tld = tokens
        if service.lower() != "iot" or domain.lower() != "amazonaws" or tld.lower() != "com":
            raise InvalidArgument(BAD_ENDPOINT_FORMAT)
        if not prefix or not region:
            raise InvalidArgument(BAD_ENDPOINT_FORMAT)
        if region not in get_valid_regions():
            raise InvalidArgument(f"Unknown region: {region}")

        return cls(prefix, region, int(port) if port else None)


def get_region_from_endpoint(endpoint: str) -> str:
    """Returns the region of the given IoT endpoint, f.e. ``us-east-1`` for ``abc123.iot.us-east-1.amazonaws.com``."""
    return IotEndpoint.parse(endpoint).region


def get_account_prefix_from_endpoint(endpoint: str) -> str:
    """Returns the account prefix of the given IoT endpoint, f.e. ``abc123`` for ``abc123.iot.us-east-1.amazonaws.com``."""
    return IotEndpoint.parse(endpoint).prefix


def is_valid_endpoint(endpoint: str) -> bool:
    try:
        IotEndpoint.parse(endpoint)
        return True
    except InvalidArgument:
        return False
