import json
import logging

from defi_swap_config.logging_config import StructuredFormatter, get_logger

def test_structured_formatter_outputs_json():
    record = logging.LogRecord("swap", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    record.context = {"event_type": "missing_env_var", "name": "DAI_WHALE"}
    entry = json.loads(StructuredFormatter().format(record))
    assert entry["message"] == "hello world"
    assert entry["level"] == "INFO"
    assert entry["context"]["name"] == "DAI_WHALE"

def test_unknown_level_falls_back_to_warning():
    logger = get_logger("defi_swap_config.test_fallback", "LOUD")
    assert logger.level == logging.WARNING

def test_handler_added_once():
    first = get_logger("defi_swap_config.test_once", "DEBUG")
    second = get_logger("defi_swap_config.test_once", "INFO")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
