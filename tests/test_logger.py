import io

from dinorun.logger import get_logger


def test_logger_info_output():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf  # type: ignore
    logger.min_level = 0
    logger.info("Hello", "World")
    out = buf.getvalue()
    assert "INFO" in out and "test: Hello World" in out


def test_logger_filters_below_min_level():
    buf = io.StringIO()
    logger = get_logger("quiet")
    logger.stream = buf  # type: ignore
    logger.min_level = 30
    logger.debug("hidden")
    logger.info("hidden")
    logger.warn("shown")
    assert buf.getvalue().count("\n") == 1
    assert "WARN" in buf.getvalue()


def test_closed_stream_is_ignored():
    buf = io.StringIO()
    buf.close()
    logger = get_logger("closed")
    logger.stream = buf  # type: ignore
    logger.error("nobody listening")
