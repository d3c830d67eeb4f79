import logging
import os
import sys

from pythonjsonlogger import jsonlogger

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | None = None, stream=None):
    """
    Configures structured JSON logging for relay and client processes.

    Every record carries timestamp, level, logger name, message and the
    Datadog trace/span ids injected by ddtrace when tracing is active.
    Existing handlers on the root logger and the uvicorn loggers are
    replaced so all output shares one format on a single stream.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG". Defaults to the
            LOG_LEVEL environment variable; unknown names fall back to INFO.
        stream: Destination for log lines. Defaults to stdout; the terminal
            client passes stderr so logs stay out of its rendered UI.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(log_level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
