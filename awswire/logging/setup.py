import logging
import sys

from awswire import config, constants

from .format import AddFormattedAttributes, DefaultFormatter

# The log levels for modules are evaluated incrementally for logging granularity,
# from highest (DEBUG) to lowest (TRACE_INTERNAL). Hence, each module below should have
# higher level which serves as the default.

default_log_levels = {
    "botocore": logging.ERROR,
    "urllib3": logging.WARNING,
    "werkzeug": logging.WARNING,
    "awswire.aws.spec": logging.INFO,
    "awswire.aws.protocol.parser": logging.INFO,
    "awswire.aws.protocol.serializer": logging.INFO,
    "awswire.request": logging.WARNING,
    "awswire.response": logging.WARNING,
}

trace_log_levels = {
    "awswire.aws.protocol.parser": logging.DEBUG,
    "awswire.aws.protocol.serializer": logging.DEBUG,
    "awswire.request": logging.DEBUG,
    "awswire.response": logging.DEBUG,
}

trace_internal_log_levels = {
    "awswire.aws.spec": logging.DEBUG,
    "botocore": logging.DEBUG,
}


def get_log_level_from_config():
    # overriding the log level if AWSWIRE_LOG has been set
    if config.AWSWIRE_LOG:
        log_level = str(config.AWSWIRE_LOG).upper()
        if log_level.lower() in constants.TRACE_LOG_LEVELS:
            log_level = "DEBUG"
        elif log_level == "WARN":
            log_level = "WARNING"
        log_level = logging._nameToLevel[log_level]
        return log_level

    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging_from_config():
    log_level = get_log_level_from_config()
    setup_logging(log_level)

    if config.is_trace_logging_enabled():
        for name, level in trace_log_levels.items():
            logging.getLogger(name).setLevel(level)
    if config.AWSWIRE_LOG == constants.AWSWIRE_LOG_TRACE_INTERNAL:
        for name, level in trace_internal_log_levels.items():
            logging.getLogger(name).setLevel(level)


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(DefaultFormatter())
    log_handler.addFilter(AddFormattedAttributes())
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for awswire.

    :param log_level: the optional log level.
    """
    # set create a default handler for the root logger (basically logging.basicConfig but explicit)
    log_handler = create_default_handler(log_level)

    # replace any existing handlers
    logging.basicConfig(level=log_level, handlers=[log_handler])

    # set log levels of loggers
    logging.root.setLevel(log_level)
    logging.getLogger("awswire").setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)
