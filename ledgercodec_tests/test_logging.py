import json
import logging

import pytest
import structlog

from ledgercodec.logging import LoggingOutput, setup_logging
from ledgercodec.utils.compare import natural_compare, to_sorted_set


@pytest.fixture
def json_logs():
    setup_logging(LoggingOutput.JSON, debug=True, extra_log_info={'peer': 'test'})
    yield
    setup_logging(LoggingOutput.NULL, debug=True)


def _structlog_handler() -> logging.Handler:
    handlers = [
        handler for handler in logging.getLogger().handlers
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    assert len(handlers) == 1
    return handlers[0]


def _events(caplog) -> list[dict]:
    return [record.msg for record in caplog.records if isinstance(record.msg, dict)]


def test_json_output(json_logs, caplog):
    structlog.get_logger('ledgercodec.test').info('hello', answer=42)
    [record] = [r for r in caplog.records if isinstance(r.msg, dict) and r.msg.get('event') == 'hello']
    line = json.loads(_structlog_handler().format(record))
    assert line['event'] == 'hello'
    assert line['answer'] == 42
    assert line['peer'] == 'test'
    assert line['level'] == 'info'


def test_duplicates_are_logged(json_logs, caplog):
    to_sorted_set([1, 1, 2], natural_compare)
    assert any(e.get('event') == 'duplicates collapsed' and e.get('dropped') == 1 for e in _events(caplog))


@pytest.mark.parametrize('output', list(LoggingOutput))
def test_setup_all_outputs(output):
    setup_logging(output)
    setup_logging(LoggingOutput.NULL, debug=True)
