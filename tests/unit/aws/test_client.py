import json
from datetime import datetime

import pytest
from dateutil.tz import tzutc

from awswire import config
from awswire.aws.api import (
    CommonServiceException,
    InvalidArgument,
    MalformedResponse,
    ServiceException,
)
from awswire.aws.api.cognito_sync import ResourceNotFoundException
from awswire.aws.api.iot import ResourceAlreadyExistsException
from awswire.aws.api.kms import KMSInternalException, NotFoundException
from awswire.aws.api.s3 import NoSuchBucket
from awswire.aws.client import (
    marshall_request,
    parse_error,
    parse_service_exception,
    unmarshall_response,
)
from awswire.aws.protocol.validate import MissingRequiredField
from awswire.aws.spec import get_operation_model
from awswire.http import Response, ResponseStream


def test_parse_service_exception():
    response = Response(status=400)
    parsed_response = {
        "Error": {
            "Code": "InvalidSubnetID.NotFound",
            "Message": "The subnet ID 'vpc-test' does not exist",
        }
    }
    exception = parse_service_exception(response, parsed_response)
    assert exception
    assert isinstance(exception, CommonServiceException)
    assert exception.code == "InvalidSubnetID.NotFound"
    assert exception.message == "The subnet ID 'vpc-test' does not exist"
    assert exception.status_code == 400
    assert not exception.sender_fault
    # Ensure that the parsed exception does not have the "Error" field from the botocore response dict
    assert not hasattr(exception, "Error")
    assert not hasattr(exception, "error")


def test_parse_service_exception_for_success_response():
    assert parse_service_exception(Response(), {"Keys": []}, "kms") is None


def test_parse_service_exception_with_modeled_error():
    response = Response(status=400)
    parsed_response = {
        "Error": {"Code": "NotFoundException", "Message": "Key not found"},
        "message": "Key not found",
        "ResponseMetadata": {"RequestId": "request-1", "HTTPStatusCode": 400},
    }

    exception = parse_service_exception(response, parsed_response, "kms")

    assert type(exception) is NotFoundException
    assert exception.code == "NotFoundException"
    assert exception.message == "Key not found"
    assert exception.sender_fault
    assert exception.request_id == "request-1"
    assert not hasattr(exception, "ResponseMetadata")


def test_parse_service_exception_with_server_fault():
    response = Response(status=500)
    parsed_response = {"Error": {"Code": "KMSInternalException", "Message": "internal"}}

    exception = parse_service_exception(response, parsed_response, "kms")

    assert isinstance(exception, KMSInternalException)
    assert not exception.sender_fault
    assert exception.status_code == 500


def test_parse_service_exception_with_custom_error_code():
    response = Response(status=404)
    parsed_response = {"Error": {"Code": "ResourceNotFound", "Message": "dataset not found"}}

    exception = parse_service_exception(response, parsed_response, "cognito-sync")

    assert isinstance(exception, ResourceNotFoundException)
    assert exception.code == "ResourceNotFound"


class TestMarshallRequest:
    def test_marshall_request(self):
        request = marshall_request("kms", "Decrypt", {"CiphertextBlob": b"\x01\x02\x03"})

        assert request.headers["X-Amz-Target"] == "TrentService.Decrypt"
        assert request.get_data() == b'{"CiphertextBlob": "AQID"}'

    def test_invalid_parameters(self):
        with pytest.raises(MissingRequiredField):
            marshall_request("kms", "Decrypt", {})

    def test_validation_can_be_disabled(self, monkeypatch):
        monkeypatch.setattr(config, "VALIDATE_REQUESTS", False)

        request = marshall_request("kms", "Decrypt", {})

        assert request.get_data() == b"{}"

    def test_none_request(self):
        with pytest.raises(InvalidArgument):
            marshall_request("kms", "Decrypt", None)

    def test_unknown_service_and_operation(self):
        with pytest.raises(InvalidArgument):
            marshall_request("unknown-service", "Decrypt", {})

        with pytest.raises(InvalidArgument):
            marshall_request("kms", "UnknownOperation", {})


class TestUnmarshallResponse:
    def test_unmarshall_response(self):
        response = Response(json.dumps({"thingName": "my-thing", "thingId": "id-1"}))

        assert unmarshall_response("iot", "CreateThing", response) == {
            "thingName": "my-thing",
            "thingId": "id-1",
        }

    def test_error_response_is_raised(self):
        response = Response(
            json.dumps({"message": "exists", "resourceId": "id-1", "resourceArn": "arn:thing"}),
            status=409,
            headers={
                "X-Amzn-Errortype": "ResourceAlreadyExistsException",
                "x-amzn-RequestId": "request-1",
            },
        )

        with pytest.raises(ResourceAlreadyExistsException) as e:
            unmarshall_response("iot", "CreateThing", response)

        assert e.value.message == "exists"
        assert e.value.status_code == 409
        assert e.value.resourceId == "id-1"
        assert e.value.resourceArn == "arn:thing"
        assert e.value.request_id == "request-1"

    def test_unmodeled_error_is_raised_as_common_exception(self):
        response = Response(
            json.dumps({"__type": "ThrottlingException", "message": "Rate exceeded"}), status=400
        )

        with pytest.raises(ServiceException) as e:
            unmarshall_response("kms", "ListKeys", response)

        assert type(e.value) is CommonServiceException
        assert e.value.code == "ThrottlingException"

    def test_unknown_fields_are_ignored(self):
        response = Response(json.dumps({"thingName": "my-thing", "somethingNew": {"a": 1}}))
        assert unmarshall_response("iot", "CreateThing", response) == {"thingName": "my-thing"}

        body = "<VersioningConfiguration><Status>Enabled</Status><Unknown>x</Unknown></VersioningConfiguration>"
        response = Response(body)
        assert unmarshall_response("s3", "GetBucketVersioning", response) == {"Status": "Enabled"}

    def test_marshalled_values_unmarshall_to_equal_values(self):
        request = marshall_request(
            "kms", "Encrypt", {"KeyId": "alias/test", "Plaintext": b"\x00secret\xff"}
        )
        body = json.loads(request.get_data())

        # present the marshalled values as the response of the operation
        response = Response(json.dumps({"KeyId": body["KeyId"], "CiphertextBlob": body["Plaintext"]}))

        assert unmarshall_response("kms", "Encrypt", response) == {
            "KeyId": "alias/test",
            "CiphertextBlob": b"\x00secret\xff",
        }

    def test_malformed_response(self):
        with pytest.raises(MalformedResponse):
            unmarshall_response("kms", "ListKeys", Response(b"{"))

    def test_null_body_is_malformed(self):
        with pytest.raises(MalformedResponse):
            unmarshall_response("kms", "Decrypt", Response(b"null"))

        with pytest.raises(MalformedResponse):
            unmarshall_response("iot", "DescribeThing", Response(b"null"))

    def test_parse_error(self):
        body = "<Error><Code>NoSuchBucket</Code><Message>The specified bucket does not exist</Message><BucketName>my-bucket</BucketName></Error>"
        response = Response(body, status=404, headers={"x-amz-request-id": "request-1"})

        exception = parse_error(response, get_operation_model("s3", "ListObjects"))

        assert isinstance(exception, NoSuchBucket)
        assert exception.BucketName == "my-bucket"
        assert exception.status_code == 404
        assert exception.request_id == "request-1"


class TestMarshalledValuesUnmarshallToEqualValues:
    def test_nested_structures_maps_and_lists(self):
        endpoint = {
            "Address": "user@example.com",
            "Attributes": {"interests": ["music", "sports"], "tier": ["gold"]},
            "ChannelType": "EMAIL",
            "Demographic": {"Locale": "de_AT", "Timezone": "Europe/Vienna"},
            "Location": {"City": "Vienna", "Latitude": 48.2, "Longitude": 16.37},
            "Metrics": {"score": 1.5, "visits": 3.0},
            "User": {"UserAttributes": {"plan": ["pro"]}, "UserId": "user-1"},
        }
        request = marshall_request(
            "pinpoint",
            "UpdateEndpoint",
            {"ApplicationId": "app-1", "EndpointId": "endpoint-1", "EndpointRequest": endpoint},
        )

        response = Response(request.get_data())
        parsed = unmarshall_response("pinpoint", "GetEndpoint", response)

        assert parsed == {"EndpointResponse": endpoint}

    def test_xml_payload(self):
        tagging = {"TagSet": [{"Key": "env", "Value": "test"}, {"Key": "team", "Value": "a & b"}]}
        request = marshall_request("s3", "PutBucketTagging", {"Bucket": "my-bucket", "Tagging": tagging})

        response = Response(request.get_data())

        assert unmarshall_response("s3", "GetBucketTagging", response) == tagging

    def test_timestamps(self):
        patch = {
            "Op": "replace",
            "Key": "theme",
            "Value": "dark",
            "SyncCount": 1,
            "DeviceLastModifiedDate": datetime(2020, 1, 1, 12, 30, 0, 500000, tzinfo=tzutc()),
        }
        request = marshall_request(
            "cognito-sync",
            "UpdateRecords",
            {
                "IdentityPoolId": "us-east-1:pool-1",
                "IdentityId": "us-east-1:identity-1",
                "DatasetName": "settings",
                "SyncSessionToken": "token-1",
                "RecordPatches": [patch],
            },
        )
        marshalled_patch = json.loads(request.get_data())["RecordPatches"][0]
        marshalled_patch.pop("Op")

        response = Response(json.dumps({"Records": [marshalled_patch]}))
        parsed = unmarshall_response("cognito-sync", "UpdateRecords", response)

        record = parsed["Records"][0]
        assert record["DeviceLastModifiedDate"] == patch["DeviceLastModifiedDate"]
        assert record == {k: v for k, v in patch.items() if k != "Op"}


class TestResponseStream:
    def test_read(self):
        response = Response(b"foobar")

        with ResponseStream(response) as stream:
            assert stream.read(3) == b"foo"
            assert stream.read(3) == b"bar"

    def test_read_with_generator_response(self):
        def _gen():
            yield b"foo"
            yield b"bar"

        response = Response(_gen())

        with ResponseStream(response) as stream:
            assert stream.read(2) == b"fo"
            # currently the response stream will not buffer across the next line
            assert stream.read(4) == b"o"
            assert stream.read(4) == b"bar"

    def test_as_iterator(self):
        def _gen():
            yield b"foo"
            yield b"bar"

        response = Response(_gen())

        with ResponseStream(response) as stream:
            assert next(stream) == b"foo"
            assert next(stream) == b"bar"
            with pytest.raises(StopIteration):
                next(stream)
