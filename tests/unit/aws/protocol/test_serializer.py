import base64
import hashlib
import json
from datetime import datetime, timezone

import pytest
from botocore.model import ServiceModel

from awswire.aws.api import HttpRequest, InvalidArgument
from awswire.aws.protocol.serializer import (
    JSONRequestSerializer,
    ProtocolSerializerError,
    RestJSONRequestSerializer,
    RestXMLRequestSerializer,
    create_serializer,
)
from awswire.aws.spec import get_operation_model, get_service_model
from awswire.http.request import get_raw_path


def _serialize(service: str, operation: str, params: dict) -> HttpRequest:
    serializer = create_serializer(get_service_model(service))
    return serializer.serialize_to_request(params, get_operation_model(service, operation))


def test_create_serializer_for_protocols():
    assert isinstance(create_serializer(get_service_model("kms")), JSONRequestSerializer)
    assert isinstance(create_serializer(get_service_model("iot")), RestJSONRequestSerializer)
    assert isinstance(create_serializer(get_service_model("s3")), RestXMLRequestSerializer)


def test_create_serializer_for_unsupported_protocol():
    service = ServiceModel(
        {"metadata": {"protocol": "ec2", "apiVersion": "2016-11-15"}, "operations": {}, "shapes": {}},
        "ec2",
    )
    with pytest.raises(InvalidArgument):
        create_serializer(service)


def test_serialize_none_request():
    with pytest.raises(InvalidArgument) as e:
        _serialize("kms", "Decrypt", None)

    assert str(e.value) == "Invalid argument passed to marshall(DecryptRequest)"


class TestJSONSerializer:
    def test_decrypt(self):
        request = _serialize("kms", "Decrypt", {"CiphertextBlob": b"\x01\x02\x03"})

        assert request.method == "POST"
        assert request.path == "/"
        assert request.headers["X-Amz-Target"] == "TrentService.Decrypt"
        assert request.headers["Content-Type"] == "application/x-amz-json-1.1"
        assert request.get_data() == b'{"CiphertextBlob": "AQID"}'
        assert request.headers["Content-Length"] == str(len(request.get_data()))

    def test_none_members_are_not_serialized(self):
        request = _serialize(
            "kms",
            "Encrypt",
            {
                "KeyId": "alias/test",
                "Plaintext": b"hello",
                "EncryptionContext": {"purpose": "test", "ignored": None},
                "GrantTokens": ["token-1", None, "token-2"],
                "EncryptionAlgorithm": None,
            },
        )

        assert json.loads(request.get_data()) == {
            "KeyId": "alias/test",
            "Plaintext": base64.b64encode(b"hello").decode("utf-8"),
            "EncryptionContext": {"purpose": "test"},
            "GrantTokens": ["token-1", "token-2"],
        }

    def test_empty_request(self):
        request = _serialize("kms", "ListKeys", {})

        assert request.headers["X-Amz-Target"] == "TrentService.ListKeys"
        assert request.get_data() == b"{}"

    def test_unknown_member_is_ignored(self, caplog):
        request = _serialize("kms", "ListKeys", {"Limit": 10, "Foo": "bar"})

        assert json.loads(request.get_data()) == {"Limit": 10}
        assert "Foo" in caplog.text

    def test_value_which_cannot_be_encoded(self):
        with pytest.raises(ProtocolSerializerError):
            _serialize("kms", "ListKeys", {"Limit": object()})


class TestRestJSONSerializer:
    def test_uri_and_body_members(self):
        request = _serialize(
            "iot",
            "CreateThing",
            {
                "thingName": "my-thing",
                "thingTypeName": "sensor",
                "attributePayload": {"attributes": {"color": "red"}, "merge": True},
            },
        )

        assert request.method == "POST"
        assert request.path == "/things/my-thing"
        assert request.headers["Content-Type"] == "application/x-amz-json-1.0"
        assert json.loads(request.get_data()) == {
            "thingTypeName": "sensor",
            "attributePayload": {"attributes": {"color": "red"}, "merge": True},
        }

    def test_uri_labels_are_percent_encoded(self):
        request = _serialize("iot", "DescribeThing", {"thingName": "my thing/1"})

        assert get_raw_path(request) == "/things/my%20thing%2F1"
        assert request.path == "/things/my thing/1"

    def test_missing_uri_label(self):
        with pytest.raises(InvalidArgument):
            _serialize("iot", "DescribeThing", {})

        with pytest.raises(InvalidArgument):
            _serialize("iot", "DescribeThing", {"thingName": ""})

    def test_query_string_members(self):
        request = _serialize(
            "iot",
            "ListThings",
            {"usePrefixAttributeValue": True, "attributeName": "color", "maxResults": 10},
        )

        assert request.method == "GET"
        # members are serialized in the order of the shape
        assert request.query_string == b"maxResults=10&attributeName=color&usePrefixAttributeValue=true"
        assert request.get_data() == b""

    def test_operation_without_body_members(self):
        request = _serialize("iot", "DeleteThing", {"thingName": "my-thing", "expectedVersion": 3})

        assert request.method == "DELETE"
        assert request.query_string == b"expectedVersion=3"
        assert request.get_data() == b""

    def test_headers_and_timestamps(self):
        request = _serialize(
            "cognito-sync",
            "UpdateRecords",
            {
                "IdentityPoolId": "us-east-1:pool",
                "IdentityId": "us-east-1:identity",
                "DatasetName": "settings",
                "SyncSessionToken": "session",
                "ClientContext": "context",
                "RecordPatches": [
                    {
                        "Op": "replace",
                        "Key": "theme",
                        "Value": "dark",
                        "SyncCount": 1,
                        "DeviceLastModifiedDate": datetime(2020, 1, 1, tzinfo=timezone.utc),
                    }
                ],
            },
        )

        assert (
            get_raw_path(request)
            == "/identitypools/us-east-1%3Apool/identities/us-east-1%3Aidentity/datasets/settings"
        )
        assert request.headers["x-amz-Client-Context"] == "context"
        assert json.loads(request.get_data()) == {
            "RecordPatches": [
                {
                    "Op": "replace",
                    "Key": "theme",
                    "Value": "dark",
                    "SyncCount": 1,
                    "DeviceLastModifiedDate": 1577836800,
                }
            ],
            "SyncSessionToken": "session",
        }

    def test_structure_payload(self):
        request = _serialize(
            "pinpoint",
            "UpdateEndpoint",
            {
                "ApplicationId": "app-1",
                "EndpointId": "endpoint-1",
                "EndpointRequest": {
                    "Address": "user@example.com",
                    "ChannelType": "EMAIL",
                    "Attributes": {"interests": ["music", "sports"]},
                    "Metrics": {"score": 1.5},
                    "Location": {"City": "Vienna", "Latitude": 48.2},
                },
            },
        )

        assert request.method == "PUT"
        assert request.path == "/v1/apps/app-1/endpoints/endpoint-1"
        assert json.loads(request.get_data()) == {
            "Address": "user@example.com",
            "ChannelType": "EMAIL",
            "Attributes": {"interests": ["music", "sports"]},
            "Metrics": {"score": 1.5},
            "Location": {"City": "Vienna", "Latitude": 48.2},
        }

    def test_missing_structure_payload(self):
        request = _serialize("pinpoint", "CreateCampaign", {"ApplicationId": "app-1"})

        assert request.path == "/v1/apps/app-1/campaigns"
        assert request.get_data() == b"{}"


class TestRestXMLSerializer:
    def test_streaming_payload_with_headers(self):
        request = _serialize(
            "s3",
            "PutObject",
            {
                "Bucket": "my-bucket",
                "Key": "some/dir/my file.txt",
                "Body": b"hello",
                "ContentType": "text/plain",
                "Expires": datetime(2020, 1, 1, tzinfo=timezone.utc),
                "Metadata": {"owner": "awswire"},
                "StorageClass": "STANDARD_IA",
            },
        )

        assert request.method == "PUT"
        # greedy labels keep their slashes
        assert get_raw_path(request) == "/my-bucket/some/dir/my%20file.txt"
        assert request.get_data() == b"hello"
        assert request.headers["Content-Type"] == "text/plain"
        assert request.headers["Content-Length"] == "5"
        assert request.headers["Expires"] == "Wed, 01 Jan 2020 00:00:00 GMT"
        assert request.headers["x-amz-meta-owner"] == "awswire"
        assert request.headers["x-amz-storage-class"] == "STANDARD_IA"

    def test_raw_payload_defaults_to_octet_stream(self):
        request = _serialize(
            "s3", "UploadPart", {"Bucket": "b", "Key": "k", "PartNumber": 2, "UploadId": "u-1", "Body": "data"}
        )

        assert request.headers["Content-Type"] == "application/octet-stream"
        assert request.query_string == b"partNumber=2&uploadId=u-1"
        assert request.get_data() == b"data"

    def test_xml_payload_with_checksum(self):
        request = _serialize(
            "s3",
            "PutBucketTagging",
            {"Bucket": "my-bucket", "Tagging": {"TagSet": [{"Key": "env", "Value": "test"}]}},
        )
        body = request.get_data()

        assert request.path == "/my-bucket"
        assert request.query_string == b"tagging"
        assert request.headers["Content-Type"] == "application/xml"
        assert body == (
            b'<Tagging xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b"<TagSet><Tag><Key>env</Key><Value>test</Value></Tag></TagSet>"
            b"</Tagging>"
        )
        assert request.headers["Content-MD5"] == base64.b64encode(hashlib.md5(body).digest()).decode("utf-8")

    def test_flattened_list_and_boolean(self):
        request = _serialize(
            "s3",
            "DeleteObjects",
            {
                "Bucket": "my-bucket",
                "Delete": {
                    "Objects": [{"Key": "a"}, {"Key": "b", "VersionId": "v1"}],
                    "Quiet": True,
                },
            },
        )

        assert request.method == "POST"
        assert request.query_string == b"delete"
        assert request.get_data() == (
            b'<Delete xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b"<Object><Key>a</Key></Object>"
            b"<Object><Key>b</Key><VersionId>v1</VersionId></Object>"
            b"<Quiet>true</Quiet>"
            b"</Delete>"
        )

    def test_static_query_string_comes_first(self):
        request = _serialize(
            "s3",
            "ListObjectsV2",
            {"Bucket": "my-bucket", "Prefix": "logs/2020", "FetchOwner": True, "MaxKeys": 10},
        )

        assert request.method == "GET"
        assert request.path == "/my-bucket"
        assert request.query_string == b"list-type=2&max-keys=10&prefix=logs%2F2020&fetch-owner=true"
        assert request.get_data() == b""

    def test_timestamp_header(self):
        request = _serialize(
            "s3",
            "GetObject",
            {
                "Bucket": "my-bucket",
                "Key": "my-key",
                "IfModifiedSince": datetime(2021, 6, 1, 12, 30, tzinfo=timezone.utc),
                "Range": "bytes=0-9",
            },
        )

        assert request.headers["If-Modified-Since"] == "Tue, 01 Jun 2021 12:30:00 GMT"
        assert request.headers["Range"] == "bytes=0-9"
