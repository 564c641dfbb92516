import logging

import pytest

from sf_browser.exporting.roster_csv import export_roster_csv
from sf_browser.logs.logging import EXPORT_LOGGER, enable_file_logging, get_logger
from sf_browser.ui.export_flows import export_csv_flow, export_excel_flow, export_image_flow


class Collector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def export_records():
    handler = Collector()
    EXPORT_LOGGER.addHandler(handler)
    yield handler.records
    EXPORT_LOGGER.removeHandler(handler)


@pytest.fixture
def root_logger():
    logger = logging.getLogger("sf_browser")
    before = list(logger.handlers)
    yield logger
    for handler in logger.handlers[:]:
        if handler not in before:
            logger.removeHandler(handler)
            handler.close()


def test_get_logger_prefixes_family():
    assert get_logger("widgets").name == "sf_browser.widgets"
    assert get_logger("sf_browser.export") is EXPORT_LOGGER
    assert EXPORT_LOGGER.name == "sf_browser.export"


def test_failed_flows_log_exception(tmp_path, store, export_records):
    missing = tmp_path / "no" / "such" / "dir"
    export_image_flow(store, "guild", lambda name: missing / "x.png")
    export_csv_flow(store, "guild", lambda name: missing / "x.csv")
    export_excel_flow(store, "guild", lambda name: missing / "x.xlsx")
    errors = [r for r in export_records if r.levelno == logging.ERROR]
    assert len(errors) == 3
    for record in errors:
        assert record.name == "sf_browser.export"
        assert record.exc_info is not None
        assert issubclass(record.exc_info[0], OSError)


def test_successful_export_logs_info(tmp_path, store, export_records):
    path = tmp_path / "guild.csv"
    export_roster_csv(store, "guild", path)
    infos = [r for r in export_records if r.levelno == logging.INFO]
    assert len(infos) == 1
    assert str(path) in infos[0].getMessage()


def test_cancelled_flow_logs_nothing(store, export_records):
    export_csv_flow(store, "guild", lambda name: None)
    assert export_records == []


def test_enable_file_logging_writes_file(tmp_path, root_logger):
    path = enable_file_logging(tmp_path / "logs")
    assert path == tmp_path / "logs" / "sf_browser.log"
    get_logger("tests").info("hello from the tests")
    for handler in root_logger.handlers:
        handler.flush()
    assert "hello from the tests" in path.read_text(encoding="utf-8")


def test_enable_file_logging_is_idempotent(tmp_path, root_logger):
    enable_file_logging(tmp_path)
    enable_file_logging(tmp_path)
    file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
