"""
Generates the typed declarations of a service (``awswire/aws/api/<module>/__init__.py``) from its service model.
Requests become ``ServiceRequest`` classes, errors become ``ServiceException`` subclasses, all other structures are
declared as ``TypedDict`` classes.
"""
import io
import keyword
import re
from pathlib import Path
from typing import IO, Dict, Iterator, List, NamedTuple, Set, Tuple

import click
from botocore.exceptions import UnknownServiceError
from botocore.model import (
    ListShape,
    MapShape,
    OperationModel,
    ServiceModel,
    Shape,
    StringShape,
    StructureShape,
)

from awswire.aws.spec import load_service

# Some minification packages might treat "type" as a keyword, some specs define shapes called like the type "Optional"
KEYWORDS = list(keyword.kwlist) + ["type", "Optional", "Union"]
is_keyword = KEYWORDS.__contains__

MODULE_HEADER = """from datetime import datetime
from typing import IO, Dict, Iterable, List, Optional, TypedDict, Union

from awswire.aws.api import ServiceException, ServiceRequest

"""

# shapes which are declared as plain aliases of python types (strings are handled separately because of enums)
SCALAR_TYPES = {
    "integer": "int",
    "long": "int",
    "float": "float",
    "double": "float",
    "boolean": "bool",
    "blob": "bytes",
    "timestamp": "datetime",
}


def to_valid_python_name(spec_name: str) -> str:
    sanitized = re.sub(r"[^0-9a-zA-Z_]+", "_", spec_name)

    if sanitized[0].isnumeric():
        sanitized = "i_" + sanitized

    if is_keyword(sanitized):
        sanitized += "_"

    if sanitized.startswith("__"):
        # pinpoint defines shapes like "__string", which would be mangled inside of classes
        sanitized = sanitized[1:]

    return sanitized


def to_module_name(service_name: str) -> str:
    module_name = service_name.replace("-", "_")
    # handle service names which are reserved keywords in python (f.e. lambda)
    if is_keyword(module_name):
        module_name += "_"
    return module_name


def is_error_shape(shape: Shape) -> bool:
    return bool(shape.metadata.get("error") or shape.metadata.get("exception"))


class ErrorAttributes(NamedTuple):
    code: str
    sender_fault: bool
    status_code: int


def get_error_attributes(shape: StructureShape) -> ErrorAttributes:
    """
    Determines the class attributes of the exception declared for an error shape. An explicit ``senderFault`` of the
    error trait wins, otherwise every error which is not flagged as a server ``fault`` is the sender's fault.

    :param shape: the error shape
    :return: code, sender fault, and HTTP status code of the error
    """
    error = shape.metadata.get("error", {})
    # the fault flag is not part of the metadata botocore exposes for a shape
    server_fault = shape._shape_model.get("fault", False)
    return ErrorAttributes(
        code=error.get("code", shape.name),
        sender_fault=error.get("senderFault", not server_fault),
        status_code=error.get("httpStatusCode", 400),
    )


def get_dependencies(shape: Shape) -> List[str]:
    if isinstance(shape, StructureShape):
        return [to_valid_python_name(member.name) for member in shape.members.values()]
    if isinstance(shape, ListShape):
        return [to_valid_python_name(shape.member.name)]
    if isinstance(shape, MapShape):
        return [to_valid_python_name(shape.key.name), to_valid_python_name(shape.value.name)]
    return []


def get_rank(shape: Shape) -> int:
    """
    Declarations are written in groups: first all non-enum primitives, then enums, then exceptions, then all other
    types (each of which after the types it depends on).
    """
    if shape.type_name in ("integer", "long", "boolean", "float", "double", "string"):
        return 1 if isinstance(shape, StringShape) and shape.enum else 0
    if is_error_shape(shape):
        return 2
    return 3


class ServiceTypes:
    """
    Writes the declarations of all shapes of a service model into a python module.
    """

    service: ServiceModel
    shapes: Dict[str, Shape]
    requests: Dict[str, OperationModel]
    responses: Dict[str, OperationModel]

    def __init__(self, service: ServiceModel):
        self.service = service
        self.shapes = {}
        for shape_name in service.shape_names:
            self.shapes[to_valid_python_name(shape_name)] = service.shape_for(shape_name)

        # index the operations by the names of their input and output shapes
        self.requests = {}
        self.responses = {}
        for operation_name in service.operation_names:
            operation = service.operation_model(operation_name)
            if operation.input_shape is not None:
                self.requests.setdefault(to_valid_python_name(operation.input_shape.name), operation)
            if operation.output_shape is not None:
                self.responses.setdefault(to_valid_python_name(operation.output_shape.name), operation)

    def write(self, output: IO[str]):
        output.write(MODULE_HEADER)
        for name, quoted in self.declaration_order():
            self.write_declaration(output, name, quoted)

    def declaration_order(self) -> Iterator[Tuple[str, bool]]:
        """
        Yields the names of the shapes in the order in which they need to be declared, together with a flag whether
        the references to other types have to be quoted (to break out of circular dependencies).
        """
        declared: Set[str] = set()
        visited: Set[str] = set()
        stack = sorted(self.shapes, key=lambda shape_name: get_rank(self.shapes[shape_name]))
        stack.reverse()

        while stack:
            name = stack.pop()
            if name in declared:
                continue

            pending = [dep for dep in get_dependencies(self.shapes[name]) if dep not in declared]
            if pending and name not in visited:
                stack.append(name)
                stack.extend(pending)
                visited.add(name)
                continue

            declared.add(name)
            yield name, bool(pending)

    def write_declaration(self, output: IO[str], name: str, quoted: bool = False):
        shape = self.shapes[name]

        def ref(referenced: Shape) -> str:
            type_name = to_valid_python_name(referenced.name)
            return f'"{type_name}"' if quoted else type_name

        if isinstance(shape, StructureShape):
            self._write_structure(output, name, shape, ref)
        elif isinstance(shape, ListShape):
            output.write(f"{name} = List[{ref(shape.member)}]")
        elif isinstance(shape, MapShape):
            output.write(f"{name} = Dict[{ref(shape.key)}, {ref(shape.value)}]")
        elif isinstance(shape, StringShape) and shape.enum:
            output.write(f"class {name}(str):\n")
            for value in shape.enum:
                output.write(f'    {to_valid_python_name(value)} = "{value}"\n')
        elif shape.type_name == "string":
            output.write(f"{name} = str")
        elif shape.type_name in SCALAR_TYPES:
            # blobs which are streamed are declared on the request / result, not on the shape
            output.write(f"{name} = {SCALAR_TYPES[shape.type_name]}")
        else:
            output.write(f"# unknown shape type for {name}: {shape.type_name}")

        output.write("\n")

    def _write_structure(self, output: IO[str], name: str, shape: StructureShape, ref):
        members = dict(shape.members)
        required = set(shape.required_members)

        def annotation(member_name: str, type_name: str) -> str:
            return type_name if member_name in required else f"Optional[{type_name}]"

        if is_error_shape(shape):
            attributes = get_error_attributes(shape)
            output.write(f"class {name}(ServiceException):\n")
            output.write(f'    code: str = "{attributes.code}"\n')
            output.write(f"    sender_fault: bool = {attributes.sender_fault}\n")
            output.write(f"    status_code: int = {attributes.status_code}\n")
            # message and code are already carried by every ServiceException
            members = {k: v for k, v in members.items() if k.lower() not in ("message", "code")}
        elif any(map(is_keyword, members)):
            # members named like keywords can only be declared with the functional TypedDict syntax
            output.write(f'{name} = TypedDict("{name}", {{\n')
            for member_name, member_shape in members.items():
                output.write(f'    "{member_name}": {annotation(member_name, ref(member_shape))},\n')
            output.write("}, total=False)")
            return
        else:
            base = "ServiceRequest" if name in self.requests else "TypedDict, total=False"
            output.write(f"class {name}({base}):\n")
            if not members:
                output.write("    pass\n")

        # a streamed payload is declared first, as a file-like object (or an iterable for results)
        request = self.requests.get(name)
        if request is not None and request.has_streaming_input:
            member_name = request.input_shape.serialization["payload"]
            blob = ref(request.get_streaming_input())
            output.write(f"    {member_name}: {annotation(member_name, f'IO[{blob}]')}\n")
            del members[member_name]
        response = self.responses.get(name)
        if response is not None and response.has_streaming_output:
            member_name = response.output_shape.serialization["payload"]
            blob = ref(response.get_streaming_output())
            streamed = f"Union[{blob}, IO[{blob}], Iterable[{blob}]]"
            output.write(f"    {member_name}: {annotation(member_name, streamed)}\n")
            del members[member_name]

        for member_name, member_shape in members.items():
            output.write(f"    {member_name}: {annotation(member_name, ref(member_shape))}\n")


def generate_code(service_name: str) -> str:
    output = io.StringIO()
    ServiceTypes(load_service(service_name)).write(output)
    return output.getvalue()


def write_api_module(service_name: str, code: str, base_path: str) -> Path:
    directory = Path(base_path, to_module_name(service_name))
    if not directory.exists():
        click.echo(f"creating directory {directory}")
        directory.mkdir()

    module = directory / "__init__.py"
    click.echo(f"writing to file {module}")
    module.write_text(code)
    return module


@click.group()
def scaffold():
    """Generate the typed request, result, and exception declarations of a service."""
    pass


@scaffold.command(name="generate")
@click.argument("service", type=str)
@click.option(
    "--save/--print",
    default=False,
    help="whether or not to save the result into the api directory",
)
@click.option("--path", default="./awswire/aws/api", help="the path where the api should be saved")
def generate(service: str, save: bool, path: str):
    """
    Generate the types for a given AWS service.

    SERVICE is the service to generate the types for (e.g., kms, or cognito-sync)
    """
    try:
        code = generate_code(service)
    except UnknownServiceError:
        raise click.ClickException(f"unknown service {service}")

    if save:
        write_api_module(service, code, path)
        click.echo("done!")
    else:
        click.echo(code)


@scaffold.command()
@click.option(
    "--path",
    default="./awswire/aws/api",
    help="the path in which to upgrade the service APIs",
)
def upgrade(path: str):
    """
    Regenerate all API modules which exist in the api directory.
    """
    for directory in sorted(Path(path).iterdir()):
        if not directory.is_dir() or directory.name.startswith("__"):
            continue
        service = directory.name.rstrip("_").replace("_", "-")
        try:
            code = generate_code(service)
        except UnknownServiceError:
            click.echo(f"unknown service {service}! skipping...")
            continue
        write_api_module(service, code, path)

    click.echo("done!")


if __name__ == "__main__":
    scaffold()
