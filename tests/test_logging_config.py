"""
Tests for loguru logging setup.
"""

import io
import json
import logging

from loguru import logger

from adaptive_srs import create_default_engine
from adaptive_srs.core.logging_config import configure_logging

from conftest import NOW


def test_engine_logs_after_configuration(fresh_item):
    buffer = io.StringIO()
    handler_id = configure_logging(level="DEBUG", json_format=False, sink=buffer)
    try:
        create_default_engine().process_review(fresh_item, 4, NOW)
    finally:
        logger.remove(handler_id)
        logger.disable("adaptive_srs")
    assert "Reviewed 'test-letter'" in buffer.getvalue()


def test_json_format(fresh_item):
    buffer = io.StringIO()
    handler_id = configure_logging(level="DEBUG", json_format=True, sink=buffer)
    try:
        create_default_engine().get_daily_queue([fresh_item], now=NOW)
    finally:
        logger.remove(handler_id)
        logger.disable("adaptive_srs")
    records = [json.loads(line) for line in buffer.getvalue().splitlines() if line]
    assert any("Built daily queue" in r["record"]["message"] for r in records)


def test_stdlib_logging_is_forwarded():
    buffer = io.StringIO()
    handler_id = configure_logging(level="INFO", json_format=False, sink=buffer)
    try:
        logging.getLogger("host.app").warning("forwarded message")
    finally:
        logger.remove(handler_id)
        logger.disable("adaptive_srs")
    assert "forwarded message" in buffer.getvalue()
