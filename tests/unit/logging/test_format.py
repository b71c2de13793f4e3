import logging

from awswire.logging.format import (
    AddFormattedAttributes,
    DefaultFormatter,
    compress_logger_name,
    shorten_binary_values,
)


def test_compress_logger_name():
    assert compress_logger_name("log", 1) == "l"
    assert compress_logger_name("log", 2) == "lo"
    assert compress_logger_name("log", 3) == "log"
    assert compress_logger_name("log", 5) == "log"
    assert compress_logger_name("my.very.long.logger.name", 1) == "m.v.l.l.n"
    assert compress_logger_name("my.very.long.logger.name", 11) == "m.v.l.l.nam"
    assert compress_logger_name("my.very.long.logger.name", 12) == "m.v.l.l.name"
    assert compress_logger_name("my.very.long.logger.name", 16) == "m.v.l.l.name"
    assert compress_logger_name("my.very.long.logger.name", 17) == "m.v.l.logger.name"
    assert compress_logger_name("my.very.long.logger.name", 24) == "my.very.long.logger.name"


def test_add_formatted_attributes():
    record = logging.LogRecord(
        "awswire.aws.protocol.serializer", logging.WARNING, __file__, 1, "hello", None, None
    )
    record.threadName = "ThreadPoolExecutor-0_1"

    assert AddFormattedAttributes(max_name_len=20, max_thread_len=8).filter(record)

    assert record.aw_level == "WARN"
    assert record.aw_name == "a.a.p.serializer"
    assert record.aw_thread == "utor-0_1"

    message = DefaultFormatter().format(record)
    assert " WARN --- [    utor-0_1] a.a.p.serializer " in message
    assert message.endswith(": hello")


def test_shorten_binary_values():
    value = {
        "Body": b"x" * 600,
        "Small": b"abc",
        "Records": [{"Data": b"y" * 2048}, "text"],
    }

    assert shorten_binary_values(value, 512) == {
        "Body": "Bytes(600B)",
        "Small": b"abc",
        "Records": [{"Data": "Bytes(2.05KB)"}, "text"],
    }
    assert shorten_binary_values(b"z" * 1024, 512) == "Bytes(1.02KB)"
    assert shorten_binary_values(b"z" * 1024, 2048) == b"z" * 1024


def test_level_abbreviations():
    for level, name in [(logging.CRITICAL, "FATAL"), (logging.WARNING, "WARN"), (logging.INFO, "INFO")]:
        record = logging.LogRecord("awswire", level, __file__, 1, "hello", None, None)
        AddFormattedAttributes().filter(record)
        assert record.aw_level == name
