import json

import pytest
from botocore.model import ServiceModel, StringShape

from awswire import config
from awswire.aws.api import InvalidArgument
from awswire.aws.spec import (
    CustomLoader,
    ServiceCatalog,
    get_operation_model,
    get_service_model,
    iterate_service_operations,
    list_services,
    load_spec_patches,
)


def test_patching_loaders():
    # first test that specs remain intact
    loader = CustomLoader({})
    description = loader.load_service_model("s3", "service-2")

    model = ServiceModel(description, "s3")

    shape = model.shape_for("NoSuchBucket")
    # by default, the s3 error shapes have no members, but AWS will actually return additional attributes
    assert not shape.members
    assert shape.metadata.get("exception")

    # now try it with a patch
    loader = CustomLoader(
        {
            "s3/2006-03-01/service-2": [
                {
                    "op": "add",
                    "path": "/shapes/NoSuchBucket/members/BucketName",
                    "value": {"shape": "BucketName"},
                },
                {
                    "op": "add",
                    "path": "/shapes/NoSuchBucket/error",
                    "value": {"httpStatusCode": 404},
                },
            ],
        }
    )
    description = loader.load_service_model("s3", "service-2", "2006-03-01")
    model = ServiceModel(description, "s3")

    shape = model.shape_for("NoSuchBucket")
    assert "BucketName" in shape.members
    assert isinstance(shape.members["BucketName"], StringShape)
    assert shape.metadata["error"]["httpStatusCode"] == 404
    assert shape.metadata.get("exception")


def test_builtin_patches_are_applied():
    model = get_service_model("s3")

    shape = model.shape_for("NoSuchKey")
    assert set(shape.members) == {"Key", "DeleteMarker", "VersionId"}
    assert shape.metadata["error"]["httpStatusCode"] == 404

    shape = model.shape_for("NoSuchUpload")
    assert "UploadId" in shape.members


def test_load_spec_patches_from_file(tmp_path, monkeypatch):
    patches = {"kms/2014-11-01/service-2": [{"op": "remove", "path": "/operations/Decrypt"}]}
    patch_file = tmp_path / "patches.json"
    patch_file.write_text(json.dumps(patches))

    monkeypatch.setattr(config, "SPEC_PATCHES_FILE", str(patch_file))
    assert load_spec_patches() == patches

    monkeypatch.setattr(config, "SPEC_PATCHES_FILE", str(tmp_path / "does-not-exist.json"))
    assert load_spec_patches() == {}


def test_patches_can_remove_operations():
    loader = CustomLoader(
        {"kms/2014-11-01/service-2": [{"op": "remove", "path": "/operations/Decrypt"}]}
    )
    model = ServiceModel(loader.load_service_model("kms", "service-2"), "kms")

    assert "Decrypt" not in model.operation_names
    assert "Encrypt" in model.operation_names


def test_list_services():
    names = {service.service_name for service in list_services()}
    assert {"cognito-sync", "iot", "kms", "pinpoint", "s3"} <= names


def test_get_service_model():
    model = get_service_model("cognito-sync")
    assert model.protocol == "rest-json"
    assert model.api_version == "2014-06-30"


def test_unknown_service_raises_invalid_argument():
    with pytest.raises(InvalidArgument) as e:
        get_service_model("not-a-service")
    e.match("Unknown service: not-a-service")


def test_unknown_operation_raises_invalid_argument():
    with pytest.raises(InvalidArgument) as e:
        get_operation_model("kms", "MakeCoffee")
    e.match("Unknown operation MakeCoffee for service kms")


def test_iterate_service_operations():
    operations = {(service.service_name, op.name) for service, op in iterate_service_operations()}

    assert ("kms", "Decrypt") in operations
    assert ("iot", "DescribeThing") in operations
    assert ("s3", "ListObjectsV2") in operations


class TestServiceCatalog:
    @pytest.fixture(scope="class")
    def catalog(self):
        return ServiceCatalog()

    def test_service_names(self, catalog):
        assert "pinpoint" in catalog.service_names

    def test_by_target_prefix(self, catalog):
        services = catalog.by_target_prefix("TrentService")
        assert [service.service_name for service in services] == ["kms"]
        assert catalog.by_target_prefix("DynamoDB_20120810") == []

    def test_by_signing_name(self, catalog):
        assert "iot" in [s.service_name for s in catalog.by_signing_name("execute-api")]
        assert "pinpoint" in [s.service_name for s in catalog.by_signing_name("mobiletargeting")]

    def test_by_operation(self, catalog):
        assert "s3" in [service.service_name for service in catalog.by_operation("GetObject")]
        assert catalog.by_operation("NotAnOperation") == []

    def test_endpoint_prefix_index(self, catalog):
        assert "cognito-sync" in catalog.endpoint_prefix_index

    def test_get(self, catalog):
        assert catalog.get("kms").protocol == "json"
