"""
Response parsers for the different AWS service protocols.

The module contains classes that take an HTTP response of a service, and
given an operation model, parse the HTTP response according to the
specified output shape (or the modeled error shape in case of an error
response).

It can be seen as the counterpart to the ``serializer`` module in this
package (which serializes the request before it is sent to the
service). It has a lot of similarities with the ``parsers`` module in
``botocore``, but works directly on werkzeug's ``Response`` objects and
is strict about the structure of the response document.

The different protocols have many similarities. The class hierarchy is
designed such that the parsers share as much logic as possible.
The class hierarchy looks as follows:
::
                           ┌──────────────┐
                           │ResponseParser│
                           └──────────────┘
                               ▲        ▲
                 ┌─────────────┘        └─────────────┐
      ┌──────────┴───────────┐             ┌──────────┴───────────┐
      │BaseRestResponseParser│             │BaseJSONResponseParser│
      └──────────────────────┘             └──────────────────────┘
          ▲               ▲                    ▲             ▲
┌─────────┴───────────┐ ┌─┴────────────────────┴─┐ ┌─────────┴──────────┐
│RestXMLResponseParser│ │ RestJSONResponseParser │ │ JSONResponseParser │
└─────────────────────┘ └────────────────────────┘ └────────────────────┘
          ▲
┌─────────┴──────────┐
│  S3ResponseParser  │
└────────────────────┘
::

The classes are structured as follows:

* The ``ResponseParser`` contains all the basic logic for the parsing
  which is shared among all different protocols (scalar decoding, the
  response metadata, and the assembly of error responses).
* The ``BaseRestResponseParser`` contains the logic for the REST
  protocol specifics (i.e. members bound to headers or the status code,
  and payload members).
* The ``BaseJSONResponseParser`` contains the logic for the JSON body
  parsing.
* The ``RestJSONResponseParser`` inherits the ReST specific logic from
  the ``BaseRestResponseParser`` and the JSON body parsing from the
  ``BaseJSONResponseParser``.
* The ``S3ResponseParser`` handles the peculiarities of S3 (errors
  returned with a 200 status code, and the location constraint).

The result of the parser methods is a dictionary which mirrors the output
shape of the operation. Members which are not contained in the response
are omitted. For error responses, the dictionary has the same layout as
the ones created by botocore: an ``Error`` entry (``Code``, ``Message``,
and optionally ``Type``), the ``ResponseMetadata``, and the additional
members of the modeled error shape.
"""
import abc
import base64
import datetime
import functools
import json
import logging
import re
from abc import ABC
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Iterable, Optional, Union
from xml.etree import ElementTree as ETree

import dateutil.parser
from botocore.model import (
    ListShape,
    MapShape,
    OperationModel,
    ServiceModel,
    Shape,
    StructureShape,
)
from botocore.utils import is_json_value_header
from dateutil.tz import tzutc
from werkzeug.http import HTTP_STATUS_CODES

from awswire import config
from awswire.aws.api import CodecError, HttpResponse, InvalidArgument, MalformedResponse
from awswire.constants import (
    HEADER_AMZ_ID_2,
    HEADER_AMZ_REQUEST_ID,
    HEADER_AMZN_ERROR_TYPE,
    HEADER_AMZN_REQUEST_ID,
)
from awswire.http.response import ResponseStream

LOG = logging.getLogger(__name__)


def _text_content(func):
    """
    This decorator hides the difference between an XML node with text or a plain string.
    It's used to ensure that scalar processing operates only on text strings, which
    allows the same scalar handlers to be used for XML nodes from the body and HTTP headers.

    :param func: function which should be wrapped
    :return: wrapper function which can be called with a node or a string, where the
             wrapped function is always called with a string
    """

    def _get_text_content(
        self,
        response: HttpResponse,
        shape: Shape,
        node_or_string: Union[ETree.Element, str],
    ):
        if hasattr(node_or_string, "text"):
            text = node_or_string.text
            if text is None:
                # If an XML node is empty <foo></foo>, we want to parse that as an empty string,
                # not as a null/None value.
                text = ""
        else:
            text = node_or_string
        return func(self, response, shape, text)

    return _get_text_content


class ResponseParserError(MalformedResponse):
    """
    Error which is thrown if the response parsing fails.
    Super class of all exceptions raised by the parser.
    """

    pass


class UnknownParserError(ResponseParserError):
    """
    Error which indicates that the raised exception of the parser could be caused by invalid data or by any other
    (unknown) issue. Errors like this should be reported and indicate an issue in the parser itself.
    """

    pass


class ProtocolParserError(ResponseParserError):
    """
    Error which indicates that the given data is not compliant with the service's specification and cannot be parsed.
    """

    pass


def _handle_exceptions(func):
    """
    Decorator which handles the exceptions raised by the parser. It ensures that all exceptions raised by the public
    methods of the parser are instances of CodecError.
    :param func: to wrap in order to add the exception handling
    :return: wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CodecError:
            raise
        except Exception as e:
            raise UnknownParserError(
                "An unknown error occurred when trying to parse the response."
            ) from e

    return wrapper


class ResponseParser(abc.ABC):
    """
    The response parser is responsible for parsing the HTTP response of a service.
    It is the base class for all parsers and therefore contains the basic logic which is used among all of them.
    """

    service: ServiceModel
    DEFAULT_ENCODING = "utf-8"
    # The default timestamp format is ISO8601, but this can be overwritten by subclasses.
    TIMESTAMP_FORMAT = "iso8601"
    # The default timestamp format for header fields
    HEADER_TIMESTAMP_FORMAT = "rfc822"

    def __init__(self, service: ServiceModel) -> None:
        super().__init__()
        self.service = service

    @_handle_exceptions
    def parse(
        self,
        response: HttpResponse,
        operation: OperationModel,
        include_response_metadata: bool = False,
    ) -> Dict[str, Any]:
        """
        Parses the given response of the given operation.

        :param response: the HTTP response of the service
        :param operation: the operation model of the request which was answered with the response
        :param include_response_metadata: true if the ``ResponseMetadata`` should be added to successful results
        :return: the parsed result. In case of an error response, the dictionary contains the ``Error`` entry.
        :raises: MalformedResponse (either a ProtocolParserError or an UnknownParserError)
        """
        if self._is_error_response(response, operation):
            return self._do_error_parse(response, operation)

        parsed = self._do_parse(response, operation)
        if include_response_metadata:
            parsed["ResponseMetadata"] = self._parse_response_metadata(response)
        return parsed

    def _is_error_response(self, response: HttpResponse, operation: OperationModel) -> bool:
        return response.status_code >= 300

    @abc.abstractmethod
    def _do_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        raise NotImplementedError

    @abc.abstractmethod
    def _do_error_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        raise NotImplementedError

    def _parse_shape(self, response: HttpResponse, shape: Shape, node: Any) -> Any:
        """
        Main parsing method which dynamically calls the parsing function for the specific shape.

        :param response: the complete HttpResponse
        :param shape: of the node
        :param node: the single part of the HTTP response to parse
        :return: result of the parsing operation, the type depends on the shape
        """
        if shape is None or node is None:
            return None

        fn_name = "_parse_%s" % shape.type_name
        handler = getattr(self, fn_name, self._noop_parser)
        try:
            return handler(response, shape, node)
        except (TypeError, ValueError, AttributeError) as e:
            raise ProtocolParserError(
                f"Invalid type when parsing {shape.name}: '{node}' cannot be parsed to {shape.type_name}."
            ) from e

    # The parsing functions for primitive types, lists, and timestamps are shared among subclasses.

    def _parse_list(self, response: HttpResponse, shape: ListShape, node: list) -> list:
        parsed = []
        member_shape = shape.member
        for item in node:
            parsed.append(self._parse_shape(response, member_shape, item))
        return parsed

    @_text_content
    def _parse_integer(self, _, __, node: str) -> int:
        return int(node)

    @_text_content
    def _parse_float(self, _, __, node: str) -> float:
        return float(node)

    @_text_content
    def _parse_blob(self, _, __, node: str) -> bytes:
        return base64.b64decode(node)

    @_text_content
    def _parse_timestamp(self, _, shape: Shape, node: str) -> datetime.datetime:
        timestamp_format = shape.serialization.get("timestampFormat")
        return self._convert_str_to_timestamp(node, timestamp_format)

    @_text_content
    def _parse_boolean(self, _, __, node: str) -> bool:
        return self._parse_boolean_text(node)

    @_text_content
    def _noop_parser(self, _, __, node: Any):
        return node

    _parse_character = _parse_string = _noop_parser
    _parse_double = _parse_float
    _parse_long = _parse_integer

    @staticmethod
    def _parse_boolean_text(value: str) -> bool:
        value = value.lower()
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError("cannot parse boolean value %s" % value)

    def _convert_str_to_timestamp(self, value: str, timestamp_format=None):
        if timestamp_format is None:
            timestamp_format = self.TIMESTAMP_FORMAT
        timestamp_format = timestamp_format.lower()
        converter = getattr(self, "_timestamp_%s" % timestamp_format)
        return self._as_utc(converter(value))

    @staticmethod
    def _as_utc(value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=tzutc())
        return value.astimezone(tzutc())

    @staticmethod
    def _timestamp_iso8601(date_string: str) -> datetime.datetime:
        return dateutil.parser.isoparse(date_string)

    @staticmethod
    def _timestamp_unixtimestamp(timestamp_string: str) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(float(timestamp_string), tz=tzutc())

    @staticmethod
    def _timestamp_rfc822(datetime_string: str) -> datetime.datetime:
        return parsedate_to_datetime(datetime_string)

    def _parse_header_value(self, shape: Shape, value: str) -> Any:
        """
        Parses the value of a header, which is always text (independent of the protocol of the body).
        """
        try:
            if shape.type_name == "list":
                return [self._parse_header_value(shape.member, item.strip()) for item in value.split(",")]
            if shape.type_name in ("integer", "long"):
                return int(value)
            if shape.type_name in ("float", "double"):
                return float(value)
            if shape.type_name == "boolean":
                return self._parse_boolean_text(value)
            if shape.type_name == "timestamp":
                return self._convert_str_to_timestamp(
                    value, shape.serialization.get("timestampFormat", self.HEADER_TIMESTAMP_FORMAT)
                )
            if shape.type_name == "blob":
                return base64.b64decode(value)
            if is_json_value_header(shape):
                return json.loads(base64.b64decode(value).decode(self.DEFAULT_ENCODING))
            return value
        except (TypeError, ValueError) as e:
            raise ProtocolParserError(
                f"Invalid header value for {shape.name}: '{value}' cannot be parsed to {shape.type_name}."
            ) from e

    @staticmethod
    def _parse_header_map(shape: Shape, headers) -> dict:
        # Note that headers are case insensitive, so we .lower() all header names and header prefixes.
        parsed = {}
        prefix = shape.serialization.get("name", "").lower()
        for header_name, header_value in headers.items():
            if header_name.lower().startswith(prefix):
                # The key name inserted into the parsed hash strips off the prefix.
                name = header_name[len(prefix) :]
                parsed[name] = header_value
        return parsed

    @staticmethod
    def _parse_response_metadata(response: HttpResponse) -> dict:
        metadata = {}
        headers = response.headers
        if HEADER_AMZN_REQUEST_ID in headers:
            metadata["RequestId"] = headers[HEADER_AMZN_REQUEST_ID]
        elif HEADER_AMZ_REQUEST_ID in headers:
            metadata["RequestId"] = headers[HEADER_AMZ_REQUEST_ID]
        if HEADER_AMZ_ID_2 in headers:
            metadata["HostId"] = headers[HEADER_AMZ_ID_2]
        metadata["HTTPStatusCode"] = response.status_code
        metadata["HTTPHeaders"] = {key.lower(): value for key, value in headers.items()}
        return metadata

    def _build_error(
        self,
        response: HttpResponse,
        code: Optional[str],
        message: Optional[str],
        error_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not code:
            # the error cannot be determined from the body, the status code is all we have
            code = str(response.status_code)
            message = message or HTTP_STATUS_CODES.get(response.status_code, "")
        error = {"Code": code, "Message": message or ""}
        if error_type:
            error["Type"] = error_type
        return {"Error": error, "ResponseMetadata": self._parse_response_metadata(response)}

    def _find_error_shape(self, operation: OperationModel, code: str) -> Optional[StructureShape]:
        """
        Looks up the modeled error shape for the given error code. The operation's errors have precedence over the
        other errors of the service.
        """
        for shape in list(operation.error_shapes) + list(self.service.error_shapes):
            if shape.metadata.get("error", {}).get("code", shape.name) == code:
                return shape
        if code in self.service.shape_names:
            shape = self.service.shape_for(code)
            if shape.metadata.get("exception"):
                return shape
        return None

    @staticmethod
    def _normalize_error_code(code: Optional[str]) -> Optional[str]:
        # codes like "ResourceNotFoundException:http://internal.amazon.com/..." or "aws.protocoltests#Error"
        if not code:
            return code
        code = code.split(":")[0]
        if "#" in code:
            code = code.rsplit("#", 1)[1]
        return code


class BaseRestResponseParser(ResponseParser, ABC):
    """
    The ``BaseRestResponseParser`` is the base class for all "resty" AWS service protocols.
    The operation's members can be bound to the status code, to headers, or to the body (either the whole output shape
    or a single payload member).
    """

    def _do_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        final_parsed = {}
        shape = operation.output_shape
        if shape is None:
            return final_parsed
        self._parse_non_payload_attrs(response, shape, final_parsed)
        self._parse_payload(response, shape, final_parsed)
        return final_parsed

    def _parse_non_payload_attrs(
        self, response: HttpResponse, shape: StructureShape, final_parsed: dict
    ) -> None:
        for name, member_shape in shape.members.items():
            location = member_shape.serialization.get("location")
            if location is None:
                continue
            elif location == "statusCode":
                final_parsed[name] = response.status_code
            elif location == "headers":
                if headers := self._parse_header_map(member_shape, response.headers):
                    final_parsed[name] = headers
            elif location == "header":
                header_name = member_shape.serialization.get("name", name)
                if header_name in response.headers:
                    final_parsed[name] = self._parse_header_value(
                        member_shape, response.headers[header_name]
                    )
            else:
                raise UnknownParserError("Unknown shape location '%s'." % location)

    def _parse_payload(
        self, response: HttpResponse, shape: StructureShape, final_parsed: dict
    ) -> None:
        payload_member_name = shape.serialization.get("payload")
        if payload_member_name is None:
            # the body is the (non-location) members of the output shape
            original_parsed = self._initial_body_parse(response)
            if original_parsed is not None:
                final_parsed.update(self._parse_shape(response, shape, original_parsed) or {})
            return

        body_shape = shape.members[payload_member_name]
        if body_shape.type_name == "blob" and body_shape.serialization.get("streaming"):
            # the body is handed over unread
            final_parsed[payload_member_name] = ResponseStream(response)
        elif body_shape.type_name in ("blob", "string"):
            body = response.get_data()
            if body:
                final_parsed[payload_member_name] = (
                    body if body_shape.type_name == "blob" else body.decode(self.DEFAULT_ENCODING)
                )
        else:
            original_parsed = self._initial_body_parse(response)
            value = self._parse_shape(response, body_shape, original_parsed)
            if value is not None:
                final_parsed[payload_member_name] = value

    @abc.abstractmethod
    def _initial_body_parse(self, response: HttpResponse) -> Any:
        """
        This method executes the initial parsing of the body (XML, JSON).
        The parsed body will afterwards still be walked through and the nodes will be converted to the appropriate
        types, but this method does the first round of parsing.

        :param response: of which the body should be parsed
        :return: depending on the actual implementation, or None if the body is empty
        """
        pass


class RestXMLResponseParser(BaseRestResponseParser):
    """
    The ``RestXMLResponseParser`` is responsible for parsing responses of services which use the ``rest-xml``
    protocol. The responses of these services encode the majority of their members as XML in the response body.
    """

    def __init__(self, service_model: ServiceModel):
        super(RestXMLResponseParser, self).__init__(service_model)
        self._namespace_re = re.compile("{.*}")

    def _initial_body_parse(self, response: HttpResponse) -> Optional[ETree.Element]:
        return self._parse_xml_chunks_to_dom(response.iter_encoded())

    def _do_error_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        root = None
        body = response.get_data()
        if body:
            try:
                root = self._parse_xml_chunks_to_dom([body])
            except ProtocolParserError:
                LOG.debug("Error response body of %s is not valid XML", operation.name)

        error_node = None
        request_id = None
        if root is not None:
            tag = self._node_tag(root)
            if tag == "ErrorResponse":
                # <ErrorResponse><Error>...</Error><RequestId>...</RequestId></ErrorResponse>
                root_dict = self._build_name_to_xml_node(root)
                error_node = root_dict.get("Error")
                request_id = self._node_text(root_dict.get("RequestId"))
            elif tag == "Error":
                # S3 puts the error details (and the request id) directly into the root node
                error_node = root

        if error_node is None:
            return self._build_error(response, None, None)

        error_dict = self._build_name_to_xml_node(error_node)
        code = self._normalize_error_code(self._node_text(error_dict.get("Code")))
        parsed = self._build_error(
            response,
            code,
            self._node_text(error_dict.get("Message")),
            self._node_text(error_dict.get("Type")),
        )
        request_id = request_id or self._node_text(error_dict.get("RequestId"))
        if request_id:
            parsed["ResponseMetadata"].setdefault("RequestId", request_id)

        if code and (error_shape := self._find_error_shape(operation, code)):
            modeled = self._parse_shape(response, error_shape, error_node) or {}
            for key, value in modeled.items():
                parsed.setdefault(key, value)
        return parsed

    def _parse_structure(
        self,
        response: HttpResponse,
        shape: StructureShape,
        node: ETree.Element,
    ) -> dict:
        parsed = {}
        xml_dict = self._build_name_to_xml_node(node)
        for member_name, member_shape in shape.members.items():
            if "location" in member_shape.serialization:
                # these members are bound to the response's metadata (like headers)
                continue
            xml_name = self._member_key_name(member_shape, member_name)
            member_node = xml_dict.get(xml_name)
            if member_node is not None:
                parsed[member_name] = self._parse_shape(response, member_shape, member_node)
            elif member_shape.serialization.get("xmlAttribute"):
                attributes = {}
                location_name = member_shape.serialization["name"]
                for key, value in node.attrib.items():
                    new_key = self._namespace_re.sub(location_name.split(":")[0] + ":", key)
                    attributes[new_key] = value
                if location_name in attributes:
                    parsed[member_name] = attributes[location_name]
        return parsed

    def _parse_map(self, response: HttpResponse, shape: MapShape, node: Any) -> dict:
        parsed = {}
        key_shape = shape.key
        value_shape = shape.value
        key_location_name = key_shape.serialization.get("name", "key")
        value_location_name = value_shape.serialization.get("name", "value")
        if shape.serialization.get("flattened") and not isinstance(node, list):
            node = [node]
        for keyval_node in node:
            key_name = val_name = None
            for single_pair in keyval_node:
                # Within each <entry> there's a <key> and a <value>
                tag_name = self._node_tag(single_pair)
                if tag_name == key_location_name:
                    key_name = self._parse_shape(response, key_shape, single_pair)
                elif tag_name == value_location_name:
                    val_name = self._parse_shape(response, value_shape, single_pair)
                else:
                    raise ProtocolParserError("Unknown tag: %s" % tag_name)
            parsed[key_name] = val_name
        return parsed

    def _parse_list(self, response: HttpResponse, shape: ListShape, node: Any) -> list:
        # When we use _build_name_to_xml_node, repeated elements are aggregated
        # into a list. However, we can't tell the difference between a scalar
        # value and a single element flattened list. So before calling the
        # real _parse_list, we know that "node" should actually be a list if
        # it's flattened, and if it's not, then we make it a one element list.
        if shape.serialization.get("flattened") and not isinstance(node, list):
            node = [node]
        return super(RestXMLResponseParser, self)._parse_list(response, shape, node)

    def _node_tag(self, node: ETree.Element) -> str:
        return self._namespace_re.sub("", node.tag)

    @staticmethod
    def _node_text(node: Optional[ETree.Element]) -> Optional[str]:
        if node is None or isinstance(node, list):
            return None
        return node.text or ""

    @staticmethod
    def _member_key_name(shape: Shape, member_name: str) -> str:
        # This method is needed because we have to special case flattened list
        # with a serialization name.  If this is the case we use the
        # locationName from the list's member shape as the key name for the
        # surrounding structure.
        if isinstance(shape, ListShape) and shape.serialization.get("flattened"):
            list_member_serialized_name = shape.member.serialization.get("name")
            if list_member_serialized_name is not None:
                return list_member_serialized_name
        serialized_name = shape.serialization.get("name")
        if serialized_name is not None:
            return serialized_name
        return member_name

    @staticmethod
    def _parse_xml_chunks_to_dom(chunks: Iterable[bytes]) -> Optional[ETree.Element]:
        """
        Feeds the given chunks into an incremental XML parser.

        :return: the root element, or None if there was no content at all
        """
        parser = ETree.XMLParser(target=ETree.TreeBuilder())
        received = False
        try:
            for chunk in chunks:
                if chunk:
                    received = True
                    parser.feed(chunk)
            if not received:
                return None
            return parser.close()
        except ETree.ParseError as e:
            raise ProtocolParserError("Unable to parse response (%s), invalid XML received." % e) from e

    def _build_name_to_xml_node(self, parent_node: Union[list, ETree.Element]) -> dict:
        # If the parent node is actually a list. We should not be trying
        # to serialize it to a dictionary. Instead, return the first element
        # in the list.
        if isinstance(parent_node, list):
            return self._build_name_to_xml_node(parent_node[0])
        xml_dict = {}
        for item in parent_node:
            key = self._node_tag(item)
            if key in xml_dict:
                # If the key already exists, the most natural
                # way to handle this is to aggregate repeated
                # keys into a single list.
                # <foo>1</foo><foo>2</foo> -> {'foo': [Node(1), Node(2)]}
                if isinstance(xml_dict[key], list):
                    xml_dict[key].append(item)
                else:
                    # Convert from a scalar to a list.
                    xml_dict[key] = [xml_dict[key], item]
            else:
                xml_dict[key] = item
        return xml_dict


class BaseJSONResponseParser(ResponseParser, ABC):
    """
    The ``BaseJSONResponseParser`` is the base class for all JSON-based AWS service protocols.
    This base-class handles parsing the payload / body as JSON. The JSON types have to match the kinds of the shapes.
    """

    TIMESTAMP_FORMAT = "unixtimestamp"

    def _parse_structure(
        self,
        response: HttpResponse,
        shape: StructureShape,
        value: Any,
    ) -> Optional[dict]:
        if shape.is_document_type:
            return value
        if not isinstance(value, dict):
            raise ProtocolParserError(
                f"Invalid type when parsing {shape.name}: expected an object, got {type(value).__name__}."
            )
        final_parsed = {}
        for member_name, member_shape in shape.members.items():
            if "location" in member_shape.serialization:
                continue
            json_name = member_shape.serialization.get("name", member_name)
            parsed = self._parse_shape(response, member_shape, value.get(json_name))
            if parsed is not None:
                final_parsed[member_name] = parsed
        return final_parsed

    def _parse_map(self, response: HttpResponse, shape: MapShape, value: Any) -> dict:
        if not isinstance(value, dict):
            raise ProtocolParserError(
                f"Invalid type when parsing {shape.name}: expected an object, got {type(value).__name__}."
            )
        parsed = {}
        key_shape = shape.key
        value_shape = shape.value
        for key, entry in value.items():
            actual_key = self._parse_shape(response, key_shape, key)
            actual_value = self._parse_shape(response, value_shape, entry)
            parsed[actual_key] = actual_value
        return parsed

    def _parse_list(self, response: HttpResponse, shape: ListShape, node: Any) -> list:
        if not isinstance(node, list):
            raise ProtocolParserError(
                f"Invalid type when parsing {shape.name}: expected an array, got {type(node).__name__}."
            )
        return super()._parse_list(response, shape, node)

    def _parse_integer(self, _, shape: Shape, node: Any) -> int:
        if isinstance(node, bool) or not isinstance(node, int):
            raise ValueError(f"{shape.name} expects an integer")
        return node

    def _parse_float(self, _, shape: Shape, node: Any) -> float:
        if isinstance(node, str) and node in ("NaN", "Infinity", "-Infinity"):
            return float(node)
        if isinstance(node, bool) or not isinstance(node, (int, float)):
            raise ValueError(f"{shape.name} expects a number")
        return float(node)

    def _parse_boolean(self, _, shape: Shape, node: Any) -> bool:
        if not isinstance(node, bool):
            raise ValueError(f"{shape.name} expects a boolean")
        return node

    def _parse_string(self, _, shape: Shape, node: Any) -> str:
        if not isinstance(node, str):
            raise ValueError(f"{shape.name} expects a string")
        return node

    def _parse_blob(self, _, shape: Shape, node: Any) -> bytes:
        if not isinstance(node, str):
            raise ValueError(f"{shape.name} expects a base64 encoded string")
        return base64.b64decode(node)

    def _parse_timestamp(self, _, shape: Shape, node: Any) -> datetime.datetime:
        if isinstance(node, bool):
            raise ValueError(f"{shape.name} expects a timestamp")
        if isinstance(node, (int, float)):
            return datetime.datetime.fromtimestamp(node, tz=tzutc())
        if not isinstance(node, str):
            raise ValueError(f"{shape.name} expects a timestamp")
        try:
            # epoch seconds are sometimes sent as strings
            return datetime.datetime.fromtimestamp(float(node), tz=tzutc())
        except ValueError:
            return self._as_utc(self._timestamp_iso8601(node))

    _parse_character = _parse_string
    _parse_double = _parse_float
    _parse_long = _parse_integer

    def _parse_body_as_json(self, response: HttpResponse) -> Any:
        body_contents = response.get_data()
        if not body_contents:
            return {}
        try:
            parsed = json.loads(body_contents.decode(self.DEFAULT_ENCODING))
        except ValueError as e:
            raise ProtocolParserError("HTTP body could not be parsed as JSON.") from e
        if parsed is None:
            raise ProtocolParserError("HTTP body is a JSON null instead of a document.")
        return parsed

    def _do_error_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        try:
            body = self._parse_body_as_json(response)
        except ProtocolParserError:
            LOG.debug("Error response body of %s is not valid JSON", operation.name)
            body = {}
        if not isinstance(body, dict):
            body = {}

        code = response.headers.get(HEADER_AMZN_ERROR_TYPE) or body.get("__type") or body.get("code")
        code = self._normalize_error_code(code)
        message = body.get("message") or body.get("Message") or body.get("errorMessage")
        parsed = self._build_error(response, code, message)

        if code and (error_shape := self._find_error_shape(operation, code)):
            modeled = self._parse_shape(response, error_shape, body) or {}
            for key, value in modeled.items():
                parsed.setdefault(key, value)
        return parsed


class JSONResponseParser(BaseJSONResponseParser):
    """
    The ``JSONResponseParser`` is responsible for parsing responses of services which use the ``json`` protocol.
    The whole output shape is encoded as a JSON document in the response body.
    """

    def _do_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        shape = operation.output_shape
        if shape is None:
            return {}
        return self._parse_shape(response, shape, self._parse_body_as_json(response))


class RestJSONResponseParser(BaseRestResponseParser, BaseJSONResponseParser):
    """
    The ``RestJSONResponseParser`` is responsible for parsing responses of services which use the ``rest-json``
    protocol. The responses of these services encode the majority of their members as JSON in the response body.
    """

    def _initial_body_parse(self, response: HttpResponse) -> Any:
        if not response.get_data():
            return None
        return self._parse_body_as_json(response)


class S3ResponseParser(RestXMLResponseParser):
    """
    Parser for the S3 responses, which deviate from the ``rest-xml`` protocol in a few places.
    """

    # operations which can return an error document with a 200 status code
    ERRORS_WITH_SUCCESS_STATUS = ("CompleteMultipartUpload", "CopyObject", "UploadPartCopy")

    def _is_error_response(self, response: HttpResponse, operation: OperationModel) -> bool:
        if super()._is_error_response(response, operation):
            return True
        if operation.name not in self.ERRORS_WITH_SUCCESS_STATUS:
            return False
        try:
            root = self._parse_xml_chunks_to_dom([response.get_data()])
        except ProtocolParserError:
            return False
        return root is not None and self._node_tag(root) == "Error"

    def _do_parse(self, response: HttpResponse, operation: OperationModel) -> Dict[str, Any]:
        if operation.name == "GetBucketLocation":
            # the location constraint is the text of the root node, buckets in the classic region have none
            root = self._initial_body_parse(response)
            location = root.text if root is not None else None
            return {"LocationConstraint": location or config.S3_DEFAULT_BUCKET_LOCATION}
        return super()._do_parse(response, operation)


def create_parser(service: ServiceModel) -> ResponseParser:
    """
    Creates the right parser for the given service model.

    :param service: to create the parser for
    :return: ResponseParser which can handle the protocol of the service
    :raises InvalidArgument: if the protocol of the service is not supported
    """
    # Some services show subtle differences in their response layout, even though their specification states they
    # implement the same protocol. The service-specific parsers have precedence over the protocol-specific ones.
    service_specific_parsers = {
        "s3": S3ResponseParser,
    }
    protocol_specific_parsers = {
        "json": JSONResponseParser,
        "rest-json": RestJSONResponseParser,
        "rest-xml": RestXMLResponseParser,
    }

    # Try to select a service-specific parser implementation
    if service.service_name in service_specific_parsers:
        return service_specific_parsers[service.service_name](service)
    if service.protocol not in protocol_specific_parsers:
        raise InvalidArgument(
            f"Protocol {service.protocol} of service {service.service_name} is not supported"
        )
    # Otherwise, pick the protocol-specific parser for the protocol of the service
    return protocol_specific_parsers[service.protocol](service)
