"""
Validation of request parameters against the input shape of an operation. The checks themselves are done by
``botocore.validate``, every error it reports is turned into an ``InvalidArgument`` exception which carries the
botocore error.
"""
from typing import Any, Dict, List, NamedTuple, Type

from botocore.model import OperationModel, Shape
from botocore.validate import ParamValidator as BotocoreParamValidator
from botocore.validate import ValidationErrors as BotocoreValidationErrors
from botocore.validate import type_check

from awswire.aws.api import InvalidArgument, ServiceRequest


class Error(NamedTuple):
    """An error as reported by ``botocore.validate``: the reason, the path of the parameter, and error details."""

    reason: str
    name: str
    attributes: Dict[str, Any]


class ParameterValidationError(InvalidArgument):
    error: Error

    def __init__(self, error: Error) -> None:
        self.error = error
        super().__init__(BotocoreValidationErrors()._format_error(error))

    @property
    def reason(self) -> str:
        return self.error.reason

    @property
    def message(self) -> str:
        return self.args[0]


class MissingRequiredField(ParameterValidationError):
    @property
    def required_name(self) -> str:
        return self.error.attributes["required_name"]


class UnknownField(ParameterValidationError):
    @property
    def unknown_param(self) -> str:
        return self.error.attributes["unknown_param"]


class InvalidType(ParameterValidationError):
    pass


class InvalidRange(ParameterValidationError):
    pass


class InvalidLength(ParameterValidationError):
    pass


# the botocore error reasons which can occur for the shapes of the supported services
ERROR_TYPES: Dict[str, Type[ParameterValidationError]] = {
    "missing required field": MissingRequiredField,
    "unknown field": UnknownField,
    "invalid type": InvalidType,
    "invalid range": InvalidRange,
    "invalid length": InvalidLength,
}


class ValidationErrors(BotocoreValidationErrors):
    """Collects the errors of a request both as botocore errors and as exceptions."""

    def __init__(self, shape: Shape, params: Dict[str, Any]):
        super().__init__()
        self.shape = shape
        self.params = params
        self.exceptions: List[ParameterValidationError] = []

    def report(self, name, reason, **kwargs):
        error = Error(reason, name, kwargs)
        self._errors.append(error)
        self.exceptions.append(ERROR_TYPES.get(reason, ParameterValidationError)(error))

    def raise_first(self):
        if self.exceptions:
            raise self.exceptions[0]


class ParamValidator(BotocoreParamValidator):
    def validate(self, params: Dict[str, Any], shape: Shape) -> ValidationErrors:
        errors = ValidationErrors(shape, params)
        self._validate(params, shape, errors, name="")
        return errors

    @type_check(valid_types=(dict,))
    def _validate_structure(self, params, shape, errors, name):
        # members set to None count as unset (a required one is missing), the request itself is not modified
        params = {key: value for key, value in params.items() if value is not None}
        super()._validate_structure(params, shape, errors, name)


def validate_request(operation: OperationModel, request: ServiceRequest) -> ValidationErrors:
    """
    Validates the parameters of a request against the input shape of the operation. All errors are collected,
    ``raise_first`` of the result raises the first of them.

    :param operation: the operation
    :param request: the request parameters
    :return: the collected errors
    """
    return ParamValidator().validate(request, operation.input_shape)
