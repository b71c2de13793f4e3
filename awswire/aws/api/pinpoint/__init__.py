from typing import Dict, List, Optional, TypedDict

from awswire.aws.api import ServiceException, ServiceRequest

_boolean = bool
_double = float
_integer = int
_string = str


class Action(str):
    OPEN_APP = "OPEN_APP"
    DEEP_LINK = "DEEP_LINK"
    URL = "URL"


class CampaignStatus(str):
    SCHEDULED = "SCHEDULED"
    EXECUTING = "EXECUTING"
    PENDING_NEXT_RUN = "PENDING_NEXT_RUN"
    COMPLETED = "COMPLETED"
    PAUSED = "PAUSED"
    DELETED = "DELETED"


class ChannelType(str):
    GCM = "GCM"
    APNS = "APNS"
    APNS_SANDBOX = "APNS_SANDBOX"
    ADM = "ADM"
    SMS = "SMS"
    EMAIL = "EMAIL"
    BAIDU = "BAIDU"
    CUSTOM = "CUSTOM"


class Frequency(str):
    ONCE = "ONCE"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class BadRequestException(ServiceException):
    code: str = "BadRequestException"
    sender_fault: bool = True
    status_code: int = 400
    RequestID: Optional[_string]


class ForbiddenException(ServiceException):
    code: str = "ForbiddenException"
    sender_fault: bool = True
    status_code: int = 403
    RequestID: Optional[_string]


class InternalServerErrorException(ServiceException):
    code: str = "InternalServerErrorException"
    sender_fault: bool = False
    status_code: int = 500
    RequestID: Optional[_string]


class MethodNotAllowedException(ServiceException):
    code: str = "MethodNotAllowedException"
    sender_fault: bool = True
    status_code: int = 405
    RequestID: Optional[_string]


class NotFoundException(ServiceException):
    code: str = "NotFoundException"
    sender_fault: bool = True
    status_code: int = 404
    RequestID: Optional[_string]


class TooManyRequestsException(ServiceException):
    code: str = "TooManyRequestsException"
    sender_fault: bool = True
    status_code: int = 429
    RequestID: Optional[_string]


class CampaignState(TypedDict, total=False):
    CampaignStatus: Optional[CampaignStatus]


class Schedule(TypedDict, total=False):
    EndTime: Optional[_string]
    Frequency: Optional[Frequency]
    IsLocalTime: Optional[_boolean]
    StartTime: _string
    Timezone: Optional[_string]


class Message(TypedDict, total=False):
    Action: Optional[Action]
    Body: Optional[_string]
    ImageIconUrl: Optional[_string]
    ImageSmallIconUrl: Optional[_string]
    ImageUrl: Optional[_string]
    JsonBody: Optional[_string]
    MediaUrl: Optional[_string]
    RawContent: Optional[_string]
    SilentPush: Optional[_boolean]
    TimeToLive: Optional[_integer]
    Title: Optional[_string]
    Url: Optional[_string]


class MessageConfiguration(TypedDict, total=False):
    APNSMessage: Optional[Message]
    DefaultMessage: Optional[Message]
    GCMMessage: Optional[Message]


class CampaignResponse(TypedDict, total=False):
    ApplicationId: _string
    Arn: _string
    CreationDate: _string
    Description: Optional[_string]
    HoldoutPercent: Optional[_integer]
    Id: _string
    IsPaused: Optional[_boolean]
    LastModifiedDate: _string
    MessageConfiguration: Optional[MessageConfiguration]
    Name: Optional[_string]
    Schedule: Optional[Schedule]
    SegmentId: _string
    SegmentVersion: _integer
    State: Optional[CampaignState]
    Version: Optional[_integer]


class WriteCampaignRequest(TypedDict, total=False):
    Description: Optional[_string]
    HoldoutPercent: Optional[_integer]
    IsPaused: Optional[_boolean]
    MessageConfiguration: Optional[MessageConfiguration]
    Name: Optional[_string]
    Schedule: Optional[Schedule]
    SegmentId: Optional[_string]
    SegmentVersion: Optional[_integer]
    TreatmentDescription: Optional[_string]
    TreatmentName: Optional[_string]


class CreateCampaignRequest(ServiceRequest):
    ApplicationId: _string
    WriteCampaignRequest: WriteCampaignRequest


class CreateCampaignResponse(TypedDict, total=False):
    CampaignResponse: CampaignResponse


ListOf__string = List[_string]
MapOfListOf__string = Dict[_string, ListOf__string]


class EndpointUser(TypedDict, total=False):
    UserAttributes: Optional[MapOfListOf__string]
    UserId: Optional[_string]


MapOf__double = Dict[_string, _double]


class EndpointLocation(TypedDict, total=False):
    City: Optional[_string]
    Country: Optional[_string]
    Latitude: Optional[_double]
    Longitude: Optional[_double]
    PostalCode: Optional[_string]
    Region: Optional[_string]


class EndpointDemographic(TypedDict, total=False):
    AppVersion: Optional[_string]
    Locale: Optional[_string]
    Make: Optional[_string]
    Model: Optional[_string]
    ModelVersion: Optional[_string]
    Platform: Optional[_string]
    PlatformVersion: Optional[_string]
    Timezone: Optional[_string]


class EndpointBatchItem(TypedDict, total=False):
    Address: Optional[_string]
    Attributes: Optional[MapOfListOf__string]
    ChannelType: Optional[ChannelType]
    Demographic: Optional[EndpointDemographic]
    EffectiveDate: Optional[_string]
    EndpointStatus: Optional[_string]
    Id: Optional[_string]
    Location: Optional[EndpointLocation]
    Metrics: Optional[MapOf__double]
    OptOut: Optional[_string]
    RequestId: Optional[_string]
    User: Optional[EndpointUser]


ListOfEndpointBatchItem = List[EndpointBatchItem]


class EndpointBatchRequest(TypedDict, total=False):
    Item: ListOfEndpointBatchItem


class EndpointRequest(TypedDict, total=False):
    Address: Optional[_string]
    Attributes: Optional[MapOfListOf__string]
    ChannelType: Optional[ChannelType]
    Demographic: Optional[EndpointDemographic]
    EffectiveDate: Optional[_string]
    EndpointStatus: Optional[_string]
    Location: Optional[EndpointLocation]
    Metrics: Optional[MapOf__double]
    OptOut: Optional[_string]
    RequestId: Optional[_string]
    User: Optional[EndpointUser]


class EndpointResponse(TypedDict, total=False):
    Address: Optional[_string]
    ApplicationId: Optional[_string]
    Attributes: Optional[MapOfListOf__string]
    ChannelType: Optional[ChannelType]
    CohortId: Optional[_string]
    CreationDate: Optional[_string]
    Demographic: Optional[EndpointDemographic]
    EffectiveDate: Optional[_string]
    EndpointStatus: Optional[_string]
    Id: Optional[_string]
    Location: Optional[EndpointLocation]
    Metrics: Optional[MapOf__double]
    OptOut: Optional[_string]
    RequestId: Optional[_string]
    User: Optional[EndpointUser]


class GetEndpointRequest(ServiceRequest):
    ApplicationId: _string
    EndpointId: _string


class GetEndpointResponse(TypedDict, total=False):
    EndpointResponse: EndpointResponse


class MessageBody(TypedDict, total=False):
    Message: Optional[_string]
    RequestID: Optional[_string]


class UpdateEndpointRequest(ServiceRequest):
    ApplicationId: _string
    EndpointId: _string
    EndpointRequest: EndpointRequest


class UpdateEndpointResponse(TypedDict, total=False):
    MessageBody: MessageBody


class UpdateEndpointsBatchRequest(ServiceRequest):
    ApplicationId: _string
    EndpointBatchRequest: EndpointBatchRequest


class UpdateEndpointsBatchResponse(TypedDict, total=False):
    MessageBody: MessageBody
