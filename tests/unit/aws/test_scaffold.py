import importlib
from types import ModuleType

import pytest
from click.testing import CliRunner

from awswire.aws.api import ServiceException
from awswire.aws.scaffold import (
    ServiceTypes,
    generate,
    get_dependencies,
    get_error_attributes,
    to_module_name,
    to_valid_python_name,
    upgrade,
)
from awswire.aws.spec import load_service

SERVICES = ["cognito-sync", "iot", "kms", "pinpoint", "s3"]


def _generate(service: str) -> str:
    runner = CliRunner()
    result = runner.invoke(generate, [service, "--print"])
    assert result.exit_code == 0
    return result.output


def _exec(service: str, code: str) -> ModuleType:
    compiled = compile(code, "<string>", "exec")
    module = ModuleType(service)
    exec(compiled, module.__dict__)
    return module


@pytest.mark.parametrize("service", SERVICES)
def test_generated_code_compiles(service, caplog):
    # Deactivate logging on CLI (https://github.com/pallets/click/issues/824#issuecomment-562581313)
    caplog.set_level(100000)

    # Make sure the code is compilable and importable
    # (f.e. pinpoint contains types with double underscores in its service spec, which would result in an import error)
    _exec(service, _generate(service))


@pytest.mark.parametrize("service", SERVICES)
def test_generated_exceptions_match_api_module(service, caplog):
    caplog.set_level(100000)
    generated = _exec(service, _generate(service))
    api = importlib.import_module(f"awswire.aws.api.{to_module_name(service)}")

    exceptions = {
        name: value
        for name, value in vars(generated).items()
        if isinstance(value, type) and issubclass(value, ServiceException) and value is not ServiceException
    }
    assert exceptions

    for name, generated_class in exceptions.items():
        api_class = getattr(api, name)
        assert api_class.code == generated_class.code
        assert api_class.sender_fault == generated_class.sender_fault
        assert api_class.status_code == generated_class.status_code


def test_generated_exception_declaration(caplog):
    caplog.set_level(100000)
    code = _generate("cognito-sync")

    assert (
        "class InternalErrorException(ServiceException):\n"
        '    code: str = "InternalError"\n'
        "    sender_fault: bool = False\n"
        "    status_code: int = 500\n"
    ) in code


def test_generated_streaming_members_come_first(caplog):
    caplog.set_level(100000)
    code = _generate("s3")

    assert "class GetObjectOutput(TypedDict, total=False):\n    Body: Optional[Union[Body, IO[Body], Iterable[Body]]]\n" in code
    assert "class PutObjectRequest(ServiceRequest):\n    Body: Optional[IO[Body]]\n" in code


def test_generate_unknown_service(caplog):
    caplog.set_level(100000)
    runner = CliRunner()
    result = runner.invoke(generate, ["not-a-service", "--print"])

    assert result.exit_code != 0


def test_generate_saves_module(tmp_path, caplog):
    caplog.set_level(100000)
    runner = CliRunner()
    result = runner.invoke(generate, ["cognito-sync", "--save", "--path", str(tmp_path)])

    assert result.exit_code == 0
    assert (tmp_path / "cognito_sync" / "__init__.py").read_text().startswith("from datetime import datetime")


@pytest.mark.parametrize(
    "spec_name, python_name",
    [
        ("__string", "_string"),
        ("MapOfListOf__string", "MapOfListOf__string"),
        ("class", "class_"),
        ("type", "type_"),
        ("2fa", "i_2fa"),
        ("af-south-1", "af_south_1"),
        ("EU", "EU"),
    ],
)
def test_to_valid_python_name(spec_name, python_name):
    assert to_valid_python_name(spec_name) == python_name


def test_to_module_name():
    assert to_module_name("cognito-sync") == "cognito_sync"
    assert to_module_name("lambda") == "lambda_"
    assert to_module_name("kms") == "kms"


@pytest.mark.parametrize(
    "service, shape_name, expected",
    [
        # flagged as a server fault, without a senderFault in the error trait
        ("iot", "InternalFailureException", ("InternalFailureException", False, 500)),
        ("iot", "ServiceUnavailableException", ("ServiceUnavailableException", False, 503)),
        ("iot", "ResourceNotFoundException", ("ResourceNotFoundException", True, 404)),
        # no error trait at all
        ("kms", "KMSInternalException", ("KMSInternalException", False, 400)),
        ("kms", "NotFoundException", ("NotFoundException", True, 400)),
        # custom code and explicit senderFault
        ("cognito-sync", "NotAuthorizedException", ("NotAuthorizedError", True, 403)),
    ],
)
def test_get_error_attributes(service, shape_name, expected):
    shape = load_service(service).shape_for(shape_name)
    assert tuple(get_error_attributes(shape)) == expected


def test_api_module_server_faults():
    from awswire.aws.api.iot import InternalFailureException, ServiceUnavailableException

    assert not InternalFailureException.sender_fault
    assert not ServiceUnavailableException.sender_fault


def test_declaration_order_declares_dependencies_first():
    service_types = ServiceTypes(load_service("pinpoint"))
    order = [name for name, _ in service_types.declaration_order()]

    assert len(order) == len(set(order)) == len(service_types.shapes)
    position = {name: index for index, name in enumerate(order)}
    for name, quoted in service_types.declaration_order():
        if quoted:
            continue
        for dependency in get_dependencies(service_types.shapes[name]):
            assert position[dependency] < position[name], f"{dependency} declared after {name}"


def test_upgrade_regenerates_existing_modules(tmp_path, caplog):
    caplog.set_level(100000)
    (tmp_path / "kms").mkdir()
    (tmp_path / "cognito_sync").mkdir()
    (tmp_path / "not_a_service").mkdir()
    (tmp_path / "__pycache__").mkdir()

    runner = CliRunner()
    result = runner.invoke(upgrade, ["--path", str(tmp_path)])

    assert result.exit_code == 0
    assert "unknown service not-a-service! skipping..." in result.output
    assert "class NotFoundException(ServiceException):" in (tmp_path / "kms" / "__init__.py").read_text()
    assert (tmp_path / "cognito_sync" / "__init__.py").exists()
    assert not (tmp_path / "not_a_service" / "__init__.py").exists()
    assert not (tmp_path / "__pycache__" / "__init__.py").exists()
