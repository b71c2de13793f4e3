from datetime import datetime
from typing import List, Optional, TypedDict

from awswire.aws.api import ServiceException, ServiceRequest

Boolean = bool
ClientContext = str
DatasetName = str
DeviceId = str
ExceptionMessage = str
IdentityId = str
IdentityPoolId = str
Integer = int
IntegerString = int
Long = int
PushToken = str
RecordKey = str
RecordValue = str
String = str
SyncSessionToken = str


class Operation(str):
    replace = "replace"
    remove = "remove"


class Platform(str):
    APNS = "APNS"
    APNS_SANDBOX = "APNS_SANDBOX"
    GCM = "GCM"
    ADM = "ADM"


class InternalErrorException(ServiceException):
    code: str = "InternalError"
    sender_fault: bool = False
    status_code: int = 500


class InvalidConfigurationException(ServiceException):
    code: str = "InvalidConfiguration"
    sender_fault: bool = True
    status_code: int = 400


class InvalidParameterException(ServiceException):
    code: str = "InvalidParameter"
    sender_fault: bool = True
    status_code: int = 400


class LimitExceededException(ServiceException):
    code: str = "LimitExceeded"
    sender_fault: bool = True
    status_code: int = 400


class NotAuthorizedException(ServiceException):
    code: str = "NotAuthorizedError"
    sender_fault: bool = True
    status_code: int = 403


class ResourceConflictException(ServiceException):
    code: str = "ResourceConflict"
    sender_fault: bool = True
    status_code: int = 409


class ResourceNotFoundException(ServiceException):
    code: str = "ResourceNotFound"
    sender_fault: bool = True
    status_code: int = 404


class TooManyRequestsException(ServiceException):
    code: str = "TooManyRequests"
    sender_fault: bool = True
    status_code: int = 429


Date = datetime


class Dataset(TypedDict, total=False):
    IdentityId: Optional[IdentityId]
    DatasetName: Optional[DatasetName]
    CreationDate: Optional[Date]
    LastModifiedDate: Optional[Date]
    LastModifiedBy: Optional[String]
    DataStorage: Optional[Long]
    NumRecords: Optional[Long]


class DescribeDatasetRequest(ServiceRequest):
    IdentityPoolId: IdentityPoolId
    IdentityId: IdentityId
    DatasetName: DatasetName


class DescribeDatasetResponse(TypedDict, total=False):
    Dataset: Optional[Dataset]


class ListRecordsRequest(ServiceRequest):
    IdentityPoolId: IdentityPoolId
    IdentityId: IdentityId
    DatasetName: DatasetName
    LastSyncCount: Optional[Long]
    NextToken: Optional[String]
    MaxResults: Optional[IntegerString]
    SyncSessionToken: Optional[SyncSessionToken]


MergedDatasetNameList = List[String]


class Record(TypedDict, total=False):
    Key: Optional[RecordKey]
    Value: Optional[RecordValue]
    SyncCount: Optional[Long]
    LastModifiedDate: Optional[Date]
    LastModifiedBy: Optional[String]
    DeviceLastModifiedDate: Optional[Date]


RecordList = List[Record]


class ListRecordsResponse(TypedDict, total=False):
    Records: Optional[RecordList]
    NextToken: Optional[String]
    Count: Optional[Integer]
    DatasetSyncCount: Optional[Long]
    LastModifiedBy: Optional[String]
    MergedDatasetNames: Optional[MergedDatasetNameList]
    DatasetExists: Optional[Boolean]
    DatasetDeletedAfterRequestedSyncCount: Optional[Boolean]
    SyncSessionToken: Optional[String]


class RecordPatch(TypedDict, total=False):
    Op: Operation
    Key: RecordKey
    Value: Optional[RecordValue]
    SyncCount: Long
    DeviceLastModifiedDate: Optional[Date]


RecordPatchList = List[RecordPatch]


class RegisterDeviceRequest(ServiceRequest):
    IdentityPoolId: IdentityPoolId
    IdentityId: IdentityId
    Platform: Platform
    Token: PushToken


class RegisterDeviceResponse(TypedDict, total=False):
    DeviceId: Optional[DeviceId]


class UpdateRecordsRequest(ServiceRequest):
    IdentityPoolId: IdentityPoolId
    IdentityId: IdentityId
    DatasetName: DatasetName
    DeviceId: Optional[DeviceId]
    RecordPatches: Optional[RecordPatchList]
    SyncSessionToken: SyncSessionToken
    ClientContext: Optional[ClientContext]


class UpdateRecordsResponse(TypedDict, total=False):
    Records: Optional[RecordList]
