"""Formatters and filters for the log output of awswire."""
import copy
import logging
from functools import lru_cache
from typing import Any

from awswire.utils.strings import format_bytes

MAX_THREAD_NAME_LEN = 12
MAX_NAME_LEN = 26

LOG_FORMAT = f"%(asctime)s.%(msecs)03d %(aw_level)5s --- [%(aw_thread){MAX_THREAD_NAME_LEN}s] %(aw_name)-{MAX_NAME_LEN}s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# level names which do not fit into five characters
LEVEL_ABBREVIATIONS = {
    logging.CRITICAL: "FATAL",
    logging.WARNING: "WARN",
}


def compress_logger_name(name: str, length: int) -> str:
    """
    Shortens a logger name to the given length by abbreviating its leading parts to their first letter, f.e.
    ``my.very.long.logger.name`` with length 17 becomes ``m.v.l.logger.name``. Trailing parts are kept in full as long
    as they fit, if not even the last part fits it is cut.
    """
    if len(name) <= length:
        return name

    parts = name.split(".")
    # characters left once every part is abbreviated to one letter
    budget = length - (2 * len(parts) - 1)
    abbreviated = len(parts)
    while abbreviated and len(parts[abbreviated - 1]) - 1 <= budget:
        abbreviated -= 1
        budget -= len(parts[abbreviated]) - 1

    compressed = [part[0] for part in parts[:abbreviated]] + parts[abbreviated:]
    if abbreviated == len(parts) and budget > 0:
        compressed[-1] = parts[-1][: budget + 1]
    return ".".join(compressed)


_compress_logger_name = lru_cache(maxsize=256)(compress_logger_name)


class DefaultFormatter(logging.Formatter):
    def __init__(self, fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT):
        super().__init__(fmt=fmt, datefmt=datefmt)


class AddFormattedAttributes(logging.Filter):
    """
    Adds the fixed width attributes used by ``LOG_FORMAT`` to a record: ``aw_level`` (the level name abbreviated to
    five characters), ``aw_name`` (the compressed logger name), and ``aw_thread`` (the tail of the thread name).
    """

    def __init__(self, max_name_len: int = MAX_NAME_LEN, max_thread_len: int = MAX_THREAD_NAME_LEN):
        super().__init__()
        self.max_name_len = max_name_len
        self.max_thread_len = max_thread_len

    def filter(self, record):
        record.aw_level = LEVEL_ABBREVIATIONS.get(record.levelno, record.levelname)
        record.aw_name = _compress_logger_name(record.name, self.max_name_len)
        record.aw_thread = record.threadName[-self.max_thread_len :]
        return True


def shorten_binary_values(value: Any, threshold: int) -> Any:
    """Replaces all byte strings longer than the threshold in nested dicts and lists by their size."""
    if isinstance(value, bytes) and len(value) > threshold:
        return f"Bytes({format_bytes(len(value))})"
    if isinstance(value, dict):
        return {key: shorten_binary_values(item, threshold) for key, item in value.items()}
    if isinstance(value, list):
        return [shorten_binary_values(item, threshold) for item in value]
    return value


class TraceLoggingFormatter(logging.Formatter):
    """
    Formatter for the records of the request and response trace loggers. Each record carries the operation, the
    object passed to the codec (``input``), and the object the codec produced (``output``). Large binary values are
    only logged with their size.
    """

    trace_log_format = LOG_FORMAT + "; %(operation)s; %(input_type)s(%(input)s); %(output_type)s(%(output)s)"
    bytes_length_display_threshold = 512

    def __init__(self):
        super().__init__(fmt=self.trace_log_format, datefmt=LOG_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # other handlers of the record get the original values
        record = copy.copy(record)
        record.input = shorten_binary_values(record.input, self.bytes_length_display_threshold)
        record.output = shorten_binary_values(record.output, self.bytes_length_display_threshold)
        return super().format(record)
