import io
import json
import logging

import pytest

from speech_common import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_logs_go_to_given_stream(restore_root_logger):
    stream = io.StringIO()

    setup_logging("INFO", stream=stream)
    logging.getLogger("capture_client.controller").info(
        "Transcription received", extra={"word_count": 3}
    )

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["message"] == "Transcription received"
    assert record["name"] == "capture_client.controller"
    assert record["word_count"] == 3


def test_debug_filtered_at_info_level(restore_root_logger):
    stream = io.StringIO()

    setup_logging("INFO", stream=stream)
    logging.getLogger("speech_common").debug("hidden")

    assert stream.getvalue() == ""
