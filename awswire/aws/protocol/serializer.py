"""
Request serializers (marshallers) for the different AWS service protocols.

The module contains classes that take a request dict, and given an
operation model, serialize the HTTP request according to the specified
input shape.

It can be seen as the counterpart to the ``parser`` module of this package
(which parses the HTTP responses to these requests). It has a lot of
similarities with the ``serialize`` module in ``botocore``, but its result is
a sans-IO ``awswire.http.Request`` which can be inspected or handed to any HTTP
client.

The different protocols have many similarities. The class hierarchy is
designed such that the serializers share as much logic as possible.
The class hierarchy looks as follows:
::
                                    ┌──────────────────┐
                                    │RequestSerializer │
                                    └──────────────────┘
                                       ▲     ▲      ▲
                 ┌─────────────────────┘     │      └──────────────────┐
    ┌────────────┴───────────┐ ┌─────────────┴───────────┐ ┌───────────┴─────────┐
    │BaseXMLRequestSerializer│ │BaseRestRequestSerializer│ │JSONRequestSerializer│
    └────────────────────────┘ └─────────────────────────┘ └─────────────────────┘
                         ▲      ▲                 ▲             ▲
             ┌───────────┴──────┴─────┐ ┌─────────┴─────────────┴─┐
             │RestXMLRequestSerializer│ │RestJSONRequestSerializer│
             └────────────────────────┘ └─────────────────────────┘
::

The ``RequestSerializer`` contains the logic that is used among all the
different protocols (``json``, ``rest-json``, and ``rest-xml``).
The protocols relate to each other in the following ways:

* The ``json`` and the ``rest-json`` protocols both have JSON bodies in their
  requests which are serialized the same way.
* The ``rest-json`` and ``rest-xml`` protocols serialize some members in the
  URI path, the query string, and the HTTP headers.
* The ``json`` protocol always sends a ``POST`` to ``/`` and selects the
  operation with the ``X-Amz-Target`` header.

The serializer classes in this module correspond directly to the different
protocols. ``#create_serializer`` shows the explicit mapping between the
classes and the protocols.
"""
import abc
import base64
import functools
import json
import logging
import re
from abc import ABC
from datetime import datetime
from email.utils import formatdate
from typing import Any, List, Optional, Tuple, Union
from urllib.parse import unquote
from xml.etree import ElementTree as ETree

from botocore.model import ListShape, MapShape, OperationModel, ServiceModel, Shape, StructureShape
from botocore.serialize import ISO8601, ISO8601_MICRO
from botocore.utils import (
    calculate_md5,
    is_json_value_header,
    parse_to_aware_datetime,
    percent_encode,
    percent_encode_sequence,
)
from dateutil.tz import tzutc
from werkzeug.datastructures import Headers

from awswire.aws.api import CodecError, HttpRequest, InvalidArgument, SerializationError
from awswire.constants import (
    APPLICATION_AMZ_JSON_1_0,
    APPLICATION_OCTET_STREAM,
    APPLICATION_XML,
    HEADER_AMZ_TARGET,
    HEADER_CONTENT_MD5,
    HEADER_CONTENT_TYPE,
)

LOG = logging.getLogger(__name__)

URI_LABEL_REGEX = re.compile(r"{(.*?)}")


class RequestSerializerError(SerializationError):
    """
    Error which is thrown if the request serialization fails.
    Super class of all exceptions raised by the serializer.
    """

    pass


class UnknownSerializerError(RequestSerializerError):
    """
    Error which indicates that the raised exception of the serializer could be caused by invalid data or by any other
    (unknown) issue. Errors like this should be reported and indicate an issue in the serializer itself.
    """

    pass


class ProtocolSerializerError(RequestSerializerError):
    """
    Error which indicates that the given data is not compliant with the service's specification and cannot be
    serialized.
    """

    pass


def _handle_exceptions(func):
    """
    Decorator which handles the exceptions raised by the serializer. It ensures that all exceptions raised by the public
    methods of the serializer are instances of CodecError.
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
            raise UnknownSerializerError(
                "An unknown error occurred when trying to serialize the request."
            ) from e

    return wrapper


class RequestSerializer(abc.ABC):
    """
    The request serializer is responsible for the serialization of a request dict to an actual HTTP request (which
    can then be sent to the service by any HTTP client).
    It is the base class of all serializers and therefore contains the basic logic which is used among all of them.

    The protocol implementations work on an intermediate dict with the keys ``method``, ``url_path``,
    ``query_string``, ``headers``, and ``body``, which is converted to an ``HttpRequest`` at the very end.
    """

    DEFAULT_ENCODING = "utf-8"
    # The default timestamp format is ISO8601, but this can be overwritten by subclasses.
    TIMESTAMP_FORMAT = "iso8601"

    @_handle_exceptions
    def serialize_to_request(self, parameters: dict, operation_model: OperationModel) -> HttpRequest:
        """
        Takes a request dict and serializes it to an actual HttpRequest.

        :param parameters: the request parameters to serialize (the members of the operation's input shape)
        :param operation_model: specification of the service & operation containing information about the shape of the
                                service's input / request
        :return: HttpRequest which can be sent to the service
        :raises: InvalidArgument if the parameters are missing or a URI label has no value, or a
                 RequestSerializerError (either a ProtocolSerializerError or an UnknownSerializerError)
        """
        shape = operation_model.input_shape
        if parameters is None:
            shape_name = shape.name if shape is not None else operation_model.name
            raise InvalidArgument(f"Invalid argument passed to marshall({shape_name})")

        serialized = self._create_default_request(operation_model)
        shape_members = shape.members if shape is not None else {}
        self._serialize_request(parameters, serialized, shape, shape_members, operation_model)
        self._prepare_additional_traits_in_request(serialized, operation_model)
        return self._create_http_request(serialized)

    def _serialize_request(
        self,
        parameters: dict,
        serialized: dict,
        shape: Optional[Shape],
        shape_members: dict,
        operation_model: OperationModel,
    ) -> None:
        raise NotImplementedError

    def _serialize_body_params(self, params: dict, shape: Shape) -> bytes:
        """
        Actually serializes the given params for the given shape to the bytes which are transmitted in the body of the
        request.
        :param params: to serialize
        :param shape: to know how to serialize the params
        :return: bytes containing the serialized body
        """
        raise NotImplementedError

    def _serialize_empty_body(self) -> bytes:
        return b""

    def _create_default_request(self, operation_model: OperationModel) -> dict:
        """
        Creates a boilerplate request dict to be used by subclasses as starting points.

        :param operation_model: to extract the HTTP method and the request URI
        :return: boilerplate request dict
        """
        return {
            "method": operation_model.http.get("method", "POST"),
            "url_path": operation_model.http.get("requestUri", "/"),
            "query_string": "",
            "headers": Headers(),
            "body": b"",
        }

    def _create_http_request(self, serialized: dict) -> HttpRequest:
        raw_path = serialized["url_path"]
        body = serialized["body"]
        headers = serialized["headers"]
        if isinstance(body, bytes) and body and "Content-Length" not in headers:
            headers["Content-Length"] = str(len(body))
        return HttpRequest(
            method=serialized["method"],
            path=unquote(raw_path),
            headers=headers,
            body=body,
            query_string=serialized["query_string"],
            raw_path=raw_path,
        )

    def _prepare_additional_traits_in_request(self, serialized: dict, operation_model: OperationModel):
        """Applies additional traits on the serialized request for a given model or protocol."""
        if operation_model.http_checksum_required:
            self._add_md5_header(serialized)

    def _add_md5_header(self, serialized: dict):
        """Add a Content-MD5 header if not yet there. Adapted from botocore.utils"""
        headers = serialized["headers"]
        body = serialized["body"]
        if isinstance(body, bytes) and HEADER_CONTENT_MD5 not in headers:
            headers[HEADER_CONTENT_MD5] = calculate_md5(body)

    # Some extra utility methods subclasses can use.

    @staticmethod
    def _timestamp_iso8601(value: datetime) -> str:
        if value.microsecond > 0:
            timestamp_format = ISO8601_MICRO
        else:
            timestamp_format = ISO8601
        return value.strftime(timestamp_format)

    @staticmethod
    def _timestamp_unixtimestamp(value: datetime) -> Union[int, float]:
        timestamp = value.timestamp()
        return int(timestamp) if timestamp.is_integer() else timestamp

    def _timestamp_rfc822(self, value: datetime) -> str:
        return formatdate(value.timestamp(), usegmt=True)

    def _convert_timestamp_to_str(
        self, value: Union[int, str, datetime], timestamp_format=None
    ) -> Union[str, int, float]:
        if timestamp_format is None:
            timestamp_format = self.TIMESTAMP_FORMAT
        timestamp_format = timestamp_format.lower()
        datetime_obj = parse_to_aware_datetime(value).astimezone(tzutc())
        converter = getattr(self, "_timestamp_%s" % timestamp_format)
        return converter(datetime_obj)

    @staticmethod
    def _get_serialized_name(shape: Shape, default_name: str) -> str:
        """
        Returns the serialized name for the shape if it exists.
        Otherwise it will return the passed in default_name.
        """
        return shape.serialization.get("name", default_name)

    def _get_base64(self, value: Union[str, bytes]):
        """
        Returns the base64-encoded version of value, handling
        both strings and bytes. The returned value is a string
        via the default encoding.
        """
        if isinstance(value, str):
            value = value.encode(self.DEFAULT_ENCODING)
        return base64.b64encode(value).strip().decode(self.DEFAULT_ENCODING)

    def _encode_payload(self, body: Any) -> Any:
        if isinstance(body, str):
            return body.encode(self.DEFAULT_ENCODING)
        if isinstance(body, bytearray):
            return bytes(body)
        return body


class BaseXMLRequestSerializer(RequestSerializer):
    """
    The BaseXMLRequestSerializer performs the basic logic for the XML request serialization.
    It is used by the RestXMLRequestSerializer for structure payloads.
    """

    def _serialize_body_params(self, params: dict, shape: Shape) -> bytes:
        root = self._serialize_body_params_to_xml(params, shape)
        return self._xml_to_string(root)

    def _serialize_body_params_to_xml(self, params: dict, shape: Shape) -> ETree.Element:
        root_name = shape.serialization.get("name", shape.name)
        pseudo_root = ETree.Element("")
        self._serialize(shape, params, pseudo_root, root_name)
        return list(pseudo_root)[0]

    def _serialize(self, shape: Shape, params: Any, xmlnode: ETree.Element, name: str) -> None:
        """This method dynamically invokes the correct `_serialize_type_*` method for each shape type."""
        try:
            method = getattr(self, "_serialize_type_%s" % shape.type_name, self._default_serialize)
            method(xmlnode, params, shape, name)
        except (TypeError, ValueError, AttributeError) as e:
            raise ProtocolSerializerError(
                f"Unable to marshall request to XML: {shape.name} member {name} cannot be serialized as "
                f"{shape.type_name} ({e})"
            ) from e

    def _serialize_type_structure(
        self, xmlnode: ETree.Element, params: dict, shape: StructureShape, name: str
    ) -> None:
        structure_node = ETree.SubElement(xmlnode, name)

        if "xmlNamespace" in shape.serialization:
            namespace_metadata = shape.serialization["xmlNamespace"]
            attribute_name = "xmlns"
            if namespace_metadata.get("prefix"):
                attribute_name += ":%s" % namespace_metadata["prefix"]
            structure_node.attrib[attribute_name] = namespace_metadata["uri"]
        for key, value in params.items():
            if value is None:
                # Don't serialize any param whose value is None.
                continue
            try:
                member_shape = shape.members[key]
            except KeyError:
                LOG.warning(
                    "Request object %s contains a member which is not specified: %s",
                    shape.name,
                    key,
                )
                continue
            member_name = member_shape.serialization.get("name", key)
            # We need to special case member shapes that are marked as an xmlAttribute.
            # Rather than serializing into an XML child node, we instead serialize the shape to
            # an XML attribute of the *current* node.
            if member_shape.serialization.get("xmlAttribute"):
                # xmlAttributes must have a serialization name.
                xml_attribute_name = member_shape.serialization["name"]
                structure_node.attrib[xml_attribute_name] = str(value)
                continue
            self._serialize(member_shape, value, structure_node, member_name)

    def _serialize_type_list(
        self, xmlnode: ETree.Element, params: list, shape: ListShape, name: str
    ) -> None:
        member_shape = shape.member
        if shape.serialization.get("flattened"):
            # If the list is flattened, either take the member's "name" or the name of the usual name for the parent
            # element for the children.
            element_name = self._get_serialized_name(member_shape, name)
            list_node = xmlnode
        else:
            element_name = self._get_serialized_name(member_shape, "member")
            list_node = ETree.SubElement(xmlnode, name)
        for item in params:
            # Don't serialize any item which is None
            if item is not None:
                self._serialize(member_shape, item, list_node, element_name)

    def _serialize_type_map(
        self, xmlnode: ETree.Element, params: dict, shape: MapShape, name: str
    ) -> None:
        """
        Given the ``name`` of MyMap, an input of {"key1": "val1", "key2": "val2"}, and the ``flattened: False``
        we serialize this as:
          <MyMap>
            <entry>
              <key>key1</key>
              <value>val1</value>
            </entry>
            <entry>
              <key>key2</key>
              <value>val2</value>
            </entry>
          </MyMap>
        If it is flattened, it is serialized as follows:
          <MyMap>
            <key>key1</key>
            <value>val1</value>
          </MyMap>
          <MyMap>
            <key>key2</key>
            <value>val2</value>
          </MyMap>
        """
        if shape.serialization.get("flattened"):
            entries_node = xmlnode
            entry_node_name = name
        else:
            entries_node = ETree.SubElement(xmlnode, name)
            entry_node_name = "entry"

        for key, value in params.items():
            if value is None:
                continue
            entry_node = ETree.SubElement(entries_node, entry_node_name)
            key_name = self._get_serialized_name(shape.key, default_name="key")
            val_name = self._get_serialized_name(shape.value, default_name="value")
            self._serialize(shape.key, key, entry_node, key_name)
            self._serialize(shape.value, value, entry_node, val_name)

    @staticmethod
    def _serialize_type_boolean(xmlnode: ETree.Element, params: bool, _, name: str) -> None:
        """
        For scalar types, the 'params' attr is actually just a scalar value representing the data
        we need to serialize as a boolean. It will either be 'true' or 'false'
        """
        node = ETree.SubElement(xmlnode, name)
        node.text = "true" if params else "false"

    def _serialize_type_blob(
        self, xmlnode: ETree.Element, params: Union[str, bytes], _, name: str
    ) -> None:
        node = ETree.SubElement(xmlnode, name)
        node.text = self._get_base64(params)

    def _serialize_type_timestamp(
        self, xmlnode: ETree.Element, params: Union[str, datetime], shape: Shape, name: str
    ) -> None:
        node = ETree.SubElement(xmlnode, name)
        node.text = str(
            self._convert_timestamp_to_str(params, shape.serialization.get("timestampFormat"))
        )

    def _default_serialize(self, xmlnode: ETree.Element, params: str, _, name: str) -> None:
        node = ETree.SubElement(xmlnode, name)
        node.text = str(params)

    def _xml_to_string(self, root: ETree.Element) -> bytes:
        """Generates the byte representation of the given XML element (without an XML declaration)."""
        return ETree.tostring(element=root, encoding=self.DEFAULT_ENCODING, xml_declaration=False)


class BaseRestRequestSerializer(RequestSerializer, ABC):
    """
    The BaseRestRequestSerializer performs the basic logic for the ReST request serialization.
    It distributes the members of the request onto the URI path, the query string, the headers, and the body.
    """

    HEADER_TIMESTAMP_FORMAT = "rfc822"
    QUERY_STRING_TIMESTAMP_FORMAT = "iso8601"

    def _serialize_request(
        self,
        parameters: dict,
        serialized: dict,
        shape: Optional[Shape],
        shape_members: dict,
        operation_model: OperationModel,
    ) -> None:
        partitioned = {
            "uri_path_kwargs": {},
            "query_string_kwargs": [],
            "body_kwargs": {},
            "headers": Headers(),
        }
        for param_name in parameters:
            if param_name not in shape_members:
                LOG.warning(
                    "Request object %s contains a member which is not specified: %s",
                    shape.name if shape is not None else operation_model.name,
                    param_name,
                )
        # members are serialized in the order of the shape, not in the order of the given dict
        for param_name, member_shape in shape_members.items():
            param_value = parameters.get(param_name)
            if param_value is None:
                continue
            self._partition_parameter(partitioned, param_name, param_value, member_shape)

        serialized["url_path"], static_query = self._render_uri_template(
            operation_model.http["requestUri"], partitioned["uri_path_kwargs"]
        )
        serialized["query_string"] = self._render_query_string(
            static_query, partitioned["query_string_kwargs"]
        )
        serialized["headers"].extend(partitioned["headers"])
        self._serialize_payload(partitioned, parameters, serialized, shape, shape_members)
        self._serialize_content_type(serialized, shape, shape_members)

    def _partition_parameter(self, partitioned: dict, param_name: str, param_value: Any, member_shape: Shape):
        location = member_shape.serialization.get("location")
        key_name = member_shape.serialization.get("name", param_name)
        if location == "uri":
            partitioned["uri_path_kwargs"][key_name] = param_value
        elif location == "querystring":
            self._serialize_query_param(partitioned["query_string_kwargs"], key_name, param_value, member_shape)
        elif location == "header":
            partitioned["headers"][key_name] = self._serialize_header_value(member_shape, param_value)
        elif location == "headers":
            # the value is a map, every entry is sent as a header with the location name as prefix
            self._serialize_header_map(key_name, partitioned["headers"], param_value)
        else:
            partitioned["body_kwargs"][param_name] = param_value

    @staticmethod
    def _render_uri_template(uri_template: str, params: dict) -> Tuple[str, str]:
        """
        Substitutes the labels in the path of the given request URI, f.e. ``/{Bucket}/{Key+}?uploads``.
        Greedy labels (``{Key+}``) keep their ``/``.

        :return: tuple of the encoded path, and the static query string part of the request URI
        :raises InvalidArgument: if there is no value for a label
        """
        path, _, static_query = uri_template.partition("?")
        encoded_params = {}
        for template_param in URI_LABEL_REGEX.findall(path):
            if template_param.endswith("+"):
                name = template_param[:-1]
                safe = "/~"
            else:
                name = template_param
                safe = ""
            value = params.get(name)
            if value is None or value == "":
                raise InvalidArgument(f"The URI label {name} requires a non-empty value")
            encoded_params[template_param] = percent_encode(value, safe=safe)
        return path.format(**encoded_params), static_query

    @staticmethod
    def _render_query_string(static_query: str, params: List[Tuple[str, str]]) -> str:
        """Static query parts of the request URI come first, the serialized members follow in member order."""
        parts = []
        if static_query:
            parts.append(static_query)
        if params:
            parts.append(percent_encode_sequence(params))
        return "&".join(parts)

    def _serialize_query_param(self, query_params: list, name: str, value: Any, shape: Shape):
        if shape.type_name == "list":
            for item in value:
                if item is not None:
                    query_params.append((name, self._serialize_query_value(shape.member, item)))
        elif shape.type_name == "map":
            for key, item in value.items():
                if item is None:
                    continue
                if shape.value.type_name == "list":
                    for list_item in item:
                        query_params.append((key, self._serialize_query_value(shape.value.member, list_item)))
                else:
                    query_params.append((key, self._serialize_query_value(shape.value, item)))
        else:
            query_params.append((name, self._serialize_query_value(shape, value)))

    def _serialize_query_value(self, shape: Shape, value: Any) -> str:
        if shape.type_name == "timestamp":
            timestamp_format = shape.serialization.get("timestampFormat", self.QUERY_STRING_TIMESTAMP_FORMAT)
            return str(self._convert_timestamp_to_str(value, timestamp_format))
        elif shape.type_name == "boolean":
            return "true" if value else "false"
        return str(value)

    def _serialize_header_map(self, prefix: str, headers: Headers, params: dict) -> None:
        """Serializes the header map for the location trait "headers"."""
        for key, val in params.items():
            if val is not None:
                headers[prefix + key] = str(val)

    def _serialize_header_value(self, shape: Shape, value: Any) -> str:
        """Serializes a value for the location trait "header"."""
        if shape.type_name == "timestamp":
            timestamp_format = shape.serialization.get("timestampFormat", self.HEADER_TIMESTAMP_FORMAT)
            return str(self._convert_timestamp_to_str(value, timestamp_format))
        elif shape.type_name == "list":
            converted_value = [
                self._serialize_header_value(shape.member, v) for v in value if v is not None
            ]
            return ",".join(converted_value)
        elif shape.type_name == "boolean":
            return "true" if value else "false"
        elif is_json_value_header(shape):
            # Serialize with no spaces after separators to save space in
            # the header.
            return self._get_base64(json.dumps(value, separators=(",", ":")))
        return str(value)

    def _serialize_payload(
        self,
        partitioned: dict,
        parameters: dict,
        serialized: dict,
        shape: Optional[Shape],
        shape_members: dict,
    ) -> None:
        """
        Serializes the body of the request.

        :param partitioned: the members of the request, partitioned by their location
        :param parameters: the user input params
        :param serialized: the intermediate request dict, the body is set in place
        :param shape: describes the input shape (can be None for operations without input)
        :param shape_members: the members of the input struct shape
        """
        if shape is None:
            return

        payload_member = shape.serialization.get("payload")
        if self._has_streaming_payload(payload_member, shape_members):
            # If it's streaming, then the body is just the value of the payload.
            body_payload = parameters.get(payload_member)
            if body_payload is not None:
                serialized["body"] = self._encode_payload(body_payload)
        elif payload_member is not None:
            # If there's a payload member, we serialize that member to the body.
            body_params = parameters.get(payload_member)
            if body_params is not None:
                serialized["body"] = self._serialize_body_params(body_params, shape_members[payload_member])
            else:
                serialized["body"] = self._serialize_empty_body()
        elif partitioned["body_kwargs"]:
            serialized["body"] = self._serialize_body_params(partitioned["body_kwargs"], shape)
        elif self._has_body_members(shape_members):
            serialized["body"] = self._serialize_empty_body()

    @staticmethod
    def _has_body_members(shape_members: dict) -> bool:
        return any(not member.serialization.get("location") for member in shape_members.values())

    @staticmethod
    def _has_streaming_payload(payload: Optional[str], shape_members: dict) -> bool:
        """Determine if payload is streaming (a blob or string)."""
        return payload is not None and shape_members[payload].type_name in ["blob", "string"]

    def _serialize_content_type(self, serialized: dict, shape: Optional[Shape], shape_members: dict):
        """
        Sets the Content-Type of the body. Raw (blob / string) payloads are sent as octet-stream unless the request
        explicitly sets a content type. Structured bodies are handled by the protocol specific subclasses.
        """
        payload = shape.serialization.get("payload") if shape is not None else None
        if self._has_streaming_payload(payload, shape_members):
            if serialized["body"] and HEADER_CONTENT_TYPE not in serialized["headers"]:
                serialized["headers"][HEADER_CONTENT_TYPE] = APPLICATION_OCTET_STREAM
            return
        self._serialize_structured_content_type(serialized)

    def _serialize_structured_content_type(self, serialized: dict):
        pass


class JSONRequestSerializer(RequestSerializer):
    """
    The ``JSONRequestSerializer`` is responsible for the serialization of requests to services with the ``json``
    protocol. It implements the JSON body serialization, which is also used by the ``RestJSONRequestSerializer``.
    """

    TIMESTAMP_FORMAT = "unixtimestamp"

    def _serialize_request(
        self,
        parameters: dict,
        serialized: dict,
        shape: Optional[Shape],
        shape_members: dict,
        operation_model: OperationModel,
    ) -> None:
        metadata = operation_model.metadata
        target = "%s.%s" % (metadata["targetPrefix"], operation_model.name)
        json_version = metadata.get("jsonVersion", "1.0")
        serialized["headers"][HEADER_AMZ_TARGET] = target
        serialized["headers"][HEADER_CONTENT_TYPE] = "application/x-amz-json-%s" % json_version
        serialized["body"] = self._serialize_body_params(parameters, shape)

    def _serialize_body_params(self, params: dict, shape: Optional[Shape]) -> bytes:
        body = {}
        if shape is not None:
            self._serialize(body, params, shape)
        try:
            return json.dumps(body).encode(self.DEFAULT_ENCODING)
        except (TypeError, ValueError) as e:
            raise ProtocolSerializerError(f"Unable to marshall request to JSON: {e}") from e

    def _serialize_empty_body(self) -> bytes:
        return b"{}"

    def _serialize(self, body: dict, value: Any, shape, key: Optional[str] = None):
        """This method dynamically invokes the correct `_serialize_type_*` method for each shape type."""
        try:
            method = getattr(self, "_serialize_type_%s" % shape.type_name, self._default_serialize)
            method(body, value, shape, key)
        except (TypeError, ValueError, AttributeError) as e:
            raise ProtocolSerializerError(
                f"Unable to marshall request to JSON: {shape.name} member {key} cannot be serialized as "
                f"{shape.type_name} ({e})"
            ) from e

    def _serialize_type_structure(self, body: dict, value: dict, shape: StructureShape, key: str):
        if shape.is_document_type:
            body[key] = value
        else:
            if key is not None:
                # If a key is provided, this is a result of a recursive
                # call so we need to add a new child dict as the value
                # of the passed in serialized dict.  We'll then add
                # all the structure members as key/vals in the new serialized
                # dictionary we just created.
                new_serialized = {}
                body[key] = new_serialized
                body = new_serialized
            members = shape.members
            for member_key, member_value in value.items():
                if member_value is None:
                    continue
                try:
                    member_shape = members[member_key]
                except KeyError:
                    LOG.warning(
                        "Request object %s contains a member which is not specified: %s",
                        shape.name,
                        member_key,
                    )
                    continue
                if "name" in member_shape.serialization:
                    member_key = member_shape.serialization["name"]
                self._serialize(body, member_value, member_shape, member_key)

    def _serialize_type_map(self, body: dict, value: dict, shape: MapShape, key: str):
        map_obj = {}
        body[key] = map_obj
        for sub_key, sub_value in value.items():
            if sub_value is not None:
                self._serialize(map_obj, sub_value, shape.value, sub_key)

    def _serialize_type_list(self, body: dict, value: list, shape: ListShape, key: str):
        list_obj = []
        body[key] = list_obj
        for list_item in value:
            if list_item is not None:
                wrapper = {}
                # The JSON list serialization is the only case where we aren't
                # setting a key on a dict.  We handle this by using
                # a __current__ key on a wrapper dict to serialize each
                # list item before appending it to the serialized list.
                self._serialize(wrapper, list_item, shape.member, "__current__")
                list_obj.append(wrapper["__current__"])

    def _default_serialize(self, body: dict, value: Any, _, key: str):
        body[key] = value

    def _serialize_type_timestamp(self, body: dict, value: Any, shape: Shape, key: str):
        body[key] = self._convert_timestamp_to_str(value, shape.serialization.get("timestampFormat"))

    def _serialize_type_blob(self, body: dict, value: Union[str, bytes], _, key: str):
        body[key] = self._get_base64(value)


class RestXMLRequestSerializer(BaseRestRequestSerializer, BaseXMLRequestSerializer):
    """
    The ``RestXMLRequestSerializer`` is responsible for the serialization of requests to services with the
    ``rest-xml`` protocol.
    It combines the ``BaseRestRequestSerializer`` (for the ReST specific logic) with the ``BaseXMLRequestSerializer``
    (for the XML body serialization).
    """

    def _serialize_structured_content_type(self, serialized: dict):
        if serialized["body"] and HEADER_CONTENT_TYPE not in serialized["headers"]:
            serialized["headers"][HEADER_CONTENT_TYPE] = APPLICATION_XML


class RestJSONRequestSerializer(BaseRestRequestSerializer, JSONRequestSerializer):
    """
    The ``RestJSONRequestSerializer`` is responsible for the serialization of requests to services with the
    ``rest-json`` protocol.
    It combines the ``BaseRestRequestSerializer`` (for the ReST specific logic) with the ``JSONRequestSerializer``
    (for the JSON body serialization).
    """

    def _serialize_structured_content_type(self, serialized: dict):
        """Structured (and empty) rest-json bodies are always declared as AWS JSON 1.0."""
        if HEADER_CONTENT_TYPE not in serialized["headers"]:
            serialized["headers"][HEADER_CONTENT_TYPE] = APPLICATION_AMZ_JSON_1_0


def create_serializer(service: ServiceModel) -> RequestSerializer:
    """
    Creates the right serializer for the given service model.

    :param service: to create the serializer for
    :return: RequestSerializer which can handle the protocol of the service
    :raises InvalidArgument: if the protocol of the service is not supported
    """
    protocol_specific_serializers = {
        "json": JSONRequestSerializer,
        "rest-json": RestJSONRequestSerializer,
        "rest-xml": RestXMLRequestSerializer,
    }

    serializer_class = protocol_specific_serializers.get(service.protocol)
    if serializer_class is None:
        raise InvalidArgument(
            f"The protocol {service.protocol} of service {service.service_name} is not supported"
        )
    return serializer_class()
