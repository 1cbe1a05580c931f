"""Entry point tests — create_app wires logging from Settings.

Tests cover:
    - create_app installs a handler using settings.log_format
    - root level follows settings.log_level
    - returned service carries the given settings
"""

import logging

import pytest

from adcopy.config import Settings
from adcopy.infrastructure.observability import JSONFormatter
from adcopy.main import create_app
from adcopy.services.dki_editor import DKIEditorService


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


def _new_handlers(before: list[logging.Handler]) -> list[logging.Handler]:
    return [h for h in logging.root.handlers if h not in before]


def test_create_app_configures_json_logging(restore_root_logging):
    before = list(logging.root.handlers)
    settings = Settings(_env_file=None, log_level="debug", log_format="json")
    service = create_app(settings)

    assert isinstance(service, DKIEditorService)
    assert service.settings is settings
    assert logging.root.level == logging.DEBUG
    added = _new_handlers(before)
    assert len(added) == 1
    assert isinstance(added[0].formatter, JSONFormatter)


def test_create_app_text_format(restore_root_logging):
    before = list(logging.root.handlers)
    create_app(Settings(_env_file=None, log_level="WARNING", log_format="text"))

    assert logging.root.level == logging.WARNING
    added = _new_handlers(before)
    assert not isinstance(added[0].formatter, JSONFormatter)


def test_create_app_defaults_to_env_settings(restore_root_logging, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    service = create_app()
    assert service.settings.log_level == "ERROR"
    assert logging.root.level == logging.ERROR
