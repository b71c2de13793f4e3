import json
import os
import sys
from typing import Dict, Optional, Tuple

import click

from awswire import __version__, config
from awswire.aws.scaffold import scaffold

from .console import console


def _setup_cli_logging(debug: bool):
    from awswire.logging.setup import setup_logging_from_config

    if debug:
        config.DEBUG = True
        os.environ["DEBUG"] = "1"

    setup_logging_from_config()


def _json_default(value):
    if isinstance(value, bytes):
        from awswire.utils.strings import to_str

        return to_str(value, errors="replace")
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if hasattr(value, "read"):
        return _json_default(value.read())
    return str(value)


def _parse_headers(headers: Tuple[str, ...]) -> Dict[str, str]:
    result = {}
    for header in headers:
        key, separator, value = header.partition(":")
        if not separator or not key.strip():
            raise click.BadParameter(f"invalid header {header}, expected KEY:VALUE", param_hint="--header")
        result[key.strip()] = value.strip()
    return result


@click.group(name="awswire", help="Marshall AWS requests and unmarshall AWS responses")
@click.version_option(version=__version__, message="%(version)s")
@click.option("--debug", is_flag=True, help="Enable CLI debugging mode")
@click.option("--profile", type=str, help="Set the configuration profile")
def awswire(debug, profile):
    if profile:
        os.environ["CONFIG_PROFILE"] = profile
        config.LOADED_PROFILES = config.load_environment(profile)
        # the profile may set the log level
        config.AWSWIRE_LOG = config.eval_log_type("AWSWIRE_LOG")
    _setup_cli_logging(debug)


@awswire.command(name="marshall", help="Print the wire request of an operation")
@click.argument("service")
@click.argument("operation")
@click.argument("params", required=False, default="{}")
def cmd_marshall(service: str, operation: str, params: str):
    """
    PARAMS is the JSON encoded request object of the operation (defaults to an empty object).
    """
    from awswire.aws.api import CodecError
    from awswire.aws.client import marshall_request
    from awswire.http.request import get_full_raw_path

    try:
        parameters = json.loads(params)
    except ValueError as e:
        raise click.BadParameter(f"request parameters are not valid JSON: {e}", param_hint="PARAMS")

    try:
        request = marshall_request(service, operation, parameters)
    except CodecError as e:
        raise click.ClickException(str(e))

    console.print(f"{request.method} {get_full_raw_path(request)}", highlight=False)
    for key, value in request.headers.items():
        console.print(f"{key}: {value}", highlight=False)
    data = request.get_data()
    if data:
        console.line()
        click.echo(data)


@awswire.command(name="unmarshall", help="Print the parsed result of an operation response")
@click.argument("service")
@click.argument("operation")
@click.argument("body_file", type=click.File("rb"))
@click.option("--status", type=int, default=200, show_default=True, help="HTTP status code of the response")
@click.option("--header", "headers", multiple=True, help="Response header as KEY:VALUE (repeatable)")
@click.option("--metadata", is_flag=True, help="Include the ResponseMetadata in the result")
def cmd_unmarshall(
    service: str,
    operation: str,
    body_file,
    status: int,
    headers: Tuple[str, ...],
    metadata: bool,
):
    from awswire.aws.api import CodecError, ServiceException
    from awswire.aws.client import unmarshall_response
    from awswire.http import Response

    response = Response(body_file.read(), status=status, headers=_parse_headers(headers))

    try:
        result = unmarshall_response(service, operation, response, include_response_metadata=metadata)
    except ServiceException as e:
        console.print(
            f"[red]:heavy_multiplication_x:[/red] {e.code} ({e.status_code}): {e.message}",
            highlight=False,
        )
        sys.exit(1)
    except CodecError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(result, indent=2, default=_json_default))


@awswire.command(name="iot-endpoint", help="Print the region and account prefix of an IoT data endpoint")
@click.argument("endpoint")
def cmd_iot_endpoint(endpoint: str):
    from awswire.aws.api import InvalidArgument
    from awswire.utils.aws.iot import IotEndpoint

    try:
        parsed = IotEndpoint.parse(endpoint)
    except InvalidArgument as e:
        raise click.ClickException(str(e))

    console.print(f"region={parsed.region}", highlight=False)
    console.print(f"prefix={parsed.prefix}", highlight=False)
    if parsed.port is not None:
        console.print(f"port={parsed.port}", highlight=False)


@awswire.command(name="services", help="List the available services and their protocols")
@click.option("--format", type=click.Choice(["table", "plain"]), default="table")
def cmd_services(format: Optional[str]):
    from awswire.aws.spec import list_services

    services = sorted(list_services(), key=lambda service: service.service_name)

    if format == "plain":
        for service in services:
            console.print(f"{service.service_name}={service.protocol}", highlight=False)
        return

    from rich.table import Table

    grid = Table(show_header=True)
    grid.add_column("Service")
    grid.add_column("Protocol")
    grid.add_column("API version")
    grid.add_column("Operations", justify="right")

    for service in services:
        grid.add_row(
            service.service_name,
            service.protocol,
            service.api_version,
            str(len(service.operation_names)),
        )

    console.print(grid)


awswire.add_command(scaffold)


def main():
    # indicate to the environment we are starting from the CLI
    os.environ["AWSWIRE_CLI"] = "1"
    awswire()


if __name__ == "__main__":
    main()
