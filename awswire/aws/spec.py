import dataclasses
import json
import logging
import os
from collections import defaultdict
from functools import cached_property, lru_cache
from typing import Dict, Generator, List, Optional, Tuple

import jsonpatch
from botocore.exceptions import DataNotFoundError, UnknownServiceError
from botocore.loaders import Loader, instance_cache
from botocore.model import OperationModel, OperationNotFoundError, ServiceModel

from awswire import config
from awswire.aws.api import InvalidArgument

LOG = logging.getLogger(__name__)

ServiceName = str

spec_patches_json = os.path.join(os.path.dirname(__file__), "spec-patches.json")


def load_spec_patches() -> Dict[str, list]:
    """
    Loads the JSON patches which are applied to the service specs when they are loaded. The builtin patch file can be
    replaced by setting ``SPEC_PATCHES_FILE``.
    """
    patches_file = config.SPEC_PATCHES_FILE or spec_patches_json
    if not os.path.exists(patches_file):
        return {}
    with open(patches_file) as fd:
        return json.load(fd)


# Path for the service specs shipped with awswire
BUILTIN_DATA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class BuiltInDataLoaderMixin(Loader):
    def __init__(self, *args, **kwargs):
        # add the builtin data path to the extra_search_paths to ensure they are discovered by the loader
        kwargs.setdefault("include_default_search_paths", config.USE_BOTOCORE_SPECS)
        super().__init__(*args, extra_search_paths=[BUILTIN_DATA_PATH], **kwargs)


class PatchingLoader(Loader):
    """
    A custom botocore Loader that applies JSON patches from the given json patch file to the specs as they are loaded.
    """

    patches: Dict[str, list]

    def __init__(self, patches: Dict[str, list], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.patches = patches

    @instance_cache
    def load_data(self, name: str):
        result = super(PatchingLoader, self).load_data(name)

        if patches := self.patches.get(name):
            LOG.debug("applying %d spec patches to %s", len(patches), name)
            return jsonpatch.apply_patch(result, patches)

        return result


class CustomLoader(PatchingLoader, BuiltInDataLoaderMixin):
    # Class mixing the different loader features (patching, builtin data)
    pass


loader = CustomLoader(load_spec_patches())


def list_services(model_type="service-2") -> List[ServiceModel]:
    return [load_service(service) for service in loader.list_available_services(model_type)]


def load_service(service: ServiceName, version: str = None, model_type="service-2") -> ServiceModel:
    """
    For example: load_service("kms", "2014-11-01")
    """
    service_description = loader.load_service_model(service, model_type, version)
    return ServiceModel(service_description, service)


@lru_cache(maxsize=128)
def get_service_model(service: ServiceName) -> ServiceModel:
    """
    Returns the (latest) service model for the given service name.

    :param service: the service name, f.e. ``cognito-sync``
    :return: the service model
    :raises InvalidArgument: if there is no spec for the service
    """
    try:
        return load_service(service)
    except (UnknownServiceError, DataNotFoundError) as e:
        raise InvalidArgument(f"Unknown service: {service}") from e


def get_operation_model(service: ServiceName, operation: str) -> OperationModel:
    """
    Returns the operation model for the given service and operation name, f.e. ``("kms", "Decrypt")``.

    :raises InvalidArgument: if the service or the operation do not exist
    """
    service_model = get_service_model(service)
    try:
        return service_model.operation_model(operation)
    except OperationNotFoundError as e:
        raise InvalidArgument(f"Unknown operation {operation} for service {service}") from e


def iterate_service_operations() -> Generator[Tuple[ServiceModel, OperationModel], None, None]:
    """
    Returns one record per operation in the AWS service spec, where the first item is the service model the operation
    belongs to, and the second is the operation model.

    :return: an iterable
    """
    for service in list_services():
        for op_name in service.operation_names:
            yield service, service.operation_model(op_name)


@dataclasses.dataclass
class ServiceCatalogIndex:
    """
    The ServiceCatalogIndex enables fast lookups for common operations to determine a service from service indicators.
    """

    service_names: List[ServiceName]
    target_prefix_index: Dict[str, List[ServiceModel]]
    signing_name_index: Dict[str, List[ServiceModel]]
    operations_index: Dict[str, List[ServiceModel]]
    endpoint_prefix_index: Dict[str, List[ServiceModel]]


class LazyServiceCatalogIndex:
    """
    A ServiceCatalogIndex that builds indexes in-memory from the loaded service specs.
    """

    @cached_property
    def service_names(self) -> List[ServiceName]:
        return list(self._services.keys())

    @cached_property
    def target_prefix_index(self) -> Dict[str, List[ServiceModel]]:
        result = defaultdict(list)
        for service_models in self._services.values():
            for service_model in service_models:
                target_prefix = service_model.metadata.get("targetPrefix")
                if target_prefix:
                    result[target_prefix].append(service_model)
        return dict(result)

    @cached_property
    def signing_name_index(self) -> Dict[str, List[ServiceModel]]:
        result = defaultdict(list)
        for service_models in self._services.values():
            for service_model in service_models:
                result[service_model.signing_name].append(service_model)
        return dict(result)

    @cached_property
    def operations_index(self) -> Dict[str, List[ServiceModel]]:
        result = defaultdict(list)
        for service_models in self._services.values():
            for service_model in service_models:
                for operation in service_model.operation_names:
                    result[operation].append(service_model)
        return dict(result)

    @cached_property
    def endpoint_prefix_index(self) -> Dict[str, List[ServiceModel]]:
        result = defaultdict(list)
        for service_models in self._services.values():
            for service_model in service_models:
                result[service_model.endpoint_prefix].append(service_model)
        return dict(result)

    @cached_property
    def _services(self) -> Dict[ServiceName, List[ServiceModel]]:
        services = defaultdict(list)
        for service in list_services():
            services[service.service_name].append(service)
        return services


class ServiceCatalog:
    index: ServiceCatalogIndex

    def __init__(self, index: ServiceCatalogIndex = None):
        self.index = index or LazyServiceCatalogIndex()

    @lru_cache(maxsize=512)
    def get(self, name: ServiceName) -> Optional[ServiceModel]:
        return load_service(name)

    @property
    def service_names(self) -> List[ServiceName]:
        return self.index.service_names

    @property
    def target_prefix_index(self) -> Dict[str, List[ServiceModel]]:
        return self.index.target_prefix_index

    @property
    def signing_name_index(self) -> Dict[str, List[ServiceModel]]:
        return self.index.signing_name_index

    @property
    def operations_index(self) -> Dict[str, List[ServiceModel]]:
        return self.index.operations_index

    @property
    def endpoint_prefix_index(self) -> Dict[str, List[ServiceModel]]:
        return self.index.endpoint_prefix_index

    def by_target_prefix(self, target_prefix: str) -> List[ServiceModel]:
        return self.target_prefix_index.get(target_prefix, [])

    def by_signing_name(self, signing_name: str) -> List[ServiceModel]:
        return self.signing_name_index.get(signing_name, [])

    def by_operation(self, operation_name: str) -> List[ServiceModel]:
        return self.operations_index.get(operation_name, [])
