# content types
HEADER_CONTENT_TYPE = "Content-Type"
APPLICATION_AMZ_JSON_1_0 = "application/x-amz-json-1.0"
APPLICATION_XML = "application/xml"
APPLICATION_OCTET_STREAM = "application/octet-stream"

# headers used by the AWS protocols
HEADER_AMZ_TARGET = "X-Amz-Target"
HEADER_AMZN_ERROR_TYPE = "X-Amzn-Errortype"
HEADER_AMZN_REQUEST_ID = "x-amzn-RequestId"
HEADER_AMZ_REQUEST_ID = "x-amz-request-id"
HEADER_AMZ_ID_2 = "x-amz-id-2"
HEADER_CONTENT_MD5 = "Content-MD5"

# environment variable values considered as true / false
TRUE_STRINGS = ("1", "true")
FALSE_STRINGS = ("0", "false")

# log levels
LOG_LEVELS = ("trace-internal", "trace", "debug", "info", "warn", "error", "warning")
AWSWIRE_LOG_TRACE = "trace"
AWSWIRE_LOG_TRACE_INTERNAL = "trace-internal"
TRACE_LOG_LEVELS = [AWSWIRE_LOG_TRACE, AWSWIRE_LOG_TRACE_INTERNAL]

# location constraint reported by S3 for buckets in the classic region
S3_CLASSIC_REGION_LOCATION = "US"
