from typing import Dict, List, Optional, TypedDict

from awswire.aws.api import ServiceException, ServiceRequest

AttributeName = str
AttributeValue = str
BillingGroupName = str
ClientId = str
Flag = bool
NextToken = str
OptionalVersion = int
RegistryMaxResults = int
ThingArn = str
ThingId = str
ThingName = str
ThingTypeName = str
Version = int
errorMessage = str
resourceArn = str
resourceId = str
usePrefixAttributeValue = bool


class InternalFailureException(ServiceException):
    code: str = "InternalFailureException"
    sender_fault: bool = False
    status_code: int = 500


class InvalidRequestException(ServiceException):
    code: str = "InvalidRequestException"
    sender_fault: bool = True
    status_code: int = 400


class ResourceAlreadyExistsException(ServiceException):
    code: str = "ResourceAlreadyExistsException"
    sender_fault: bool = True
    status_code: int = 409
    resourceId: Optional[resourceId]
    resourceArn: Optional[resourceArn]


class ResourceNotFoundException(ServiceException):
    code: str = "ResourceNotFoundException"
    sender_fault: bool = True
    status_code: int = 404


class ServiceUnavailableException(ServiceException):
    code: str = "ServiceUnavailableException"
    sender_fault: bool = False
    status_code: int = 503


class ThrottlingException(ServiceException):
    code: str = "ThrottlingException"
    sender_fault: bool = True
    status_code: int = 400


class UnauthorizedException(ServiceException):
    code: str = "UnauthorizedException"
    sender_fault: bool = True
    status_code: int = 401


class VersionConflictException(ServiceException):
    code: str = "VersionConflictException"
    sender_fault: bool = True
    status_code: int = 409


Attributes = Dict[AttributeName, AttributeValue]


class AttributePayload(TypedDict, total=False):
    attributes: Optional[Attributes]
    merge: Optional[Flag]


class CreateThingRequest(ServiceRequest):
    thingName: ThingName
    thingTypeName: Optional[ThingTypeName]
    attributePayload: Optional[AttributePayload]
    billingGroupName: Optional[BillingGroupName]


class CreateThingResponse(TypedDict, total=False):
    thingName: Optional[ThingName]
    thingArn: Optional[ThingArn]
    thingId: Optional[ThingId]


class DeleteThingRequest(ServiceRequest):
    thingName: ThingName
    expectedVersion: Optional[OptionalVersion]


class DeleteThingResponse(TypedDict, total=False):
    pass


class DescribeThingRequest(ServiceRequest):
    thingName: ThingName


class DescribeThingResponse(TypedDict, total=False):
    defaultClientId: Optional[ClientId]
    thingName: Optional[ThingName]
    thingId: Optional[ThingId]
    thingArn: Optional[ThingArn]
    thingTypeName: Optional[ThingTypeName]
    attributes: Optional[Attributes]
    version: Optional[Version]
    billingGroupName: Optional[BillingGroupName]


class ListThingsRequest(ServiceRequest):
    nextToken: Optional[NextToken]
    maxResults: Optional[RegistryMaxResults]
    attributeName: Optional[AttributeName]
    attributeValue: Optional[AttributeValue]
    thingTypeName: Optional[ThingTypeName]
    usePrefixAttributeValue: Optional[usePrefixAttributeValue]


class ThingAttribute(TypedDict, total=False):
    thingName: Optional[ThingName]
    thingTypeName: Optional[ThingTypeName]
    thingArn: Optional[ThingArn]
    attributes: Optional[Attributes]
    version: Optional[Version]


ThingAttributeList = List[ThingAttribute]


class ListThingsResponse(TypedDict, total=False):
    things: Optional[ThingAttributeList]
    nextToken: Optional[NextToken]
