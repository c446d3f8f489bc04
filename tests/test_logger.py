from __future__ import annotations

import logging

from nic_reassign.utils import setup_logging
from nic_reassign.utils.logger import LOGGER_NAME, CleanFormatter, log_api_call, log_api_response


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("nic_reassign", level, __file__, 1, message, None, None)


def test_clean_formatter_prefixes() -> None:
    formatter = CleanFormatter("%(message)s")

    assert formatter.format(_record(logging.INFO, "Initialization...")) == "Initialization..."
    assert formatter.format(_record(logging.WARNING, "Error occurred...")) == "[!] WARNING: Error occurred..."
    assert formatter.format(_record(logging.ERROR, "boom")) == "[X] ERROR: boom"
    assert formatter.format(_record(logging.CRITICAL, "stuck")) == "[!!] CRITICAL: stuck"
    assert formatter.format(_record(logging.DEBUG, "detail")) == "[DEBUG] detail"


def test_setup_logging_levels_and_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "reassign.log"

    logger = setup_logging(log_file=str(log_file), verbose=True)
    logger.info("Starting Windows ZCA VM: zca-vm")
    for handler in logger.handlers:
        handler.flush()

    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "Starting Windows ZCA VM: zca-vm" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()
    logger = setup_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_api_logging_truncates(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="nic_reassign")
    logger = logging.getLogger("nic_reassign.tests")

    log_api_call(logger, "virtual_machines.begin_deallocate", resource_group="rg-a", name="zca-vm")
    log_api_response(logger, "x" * 300, truncate=10)
    log_api_call(None, "ignored")

    assert "API call: virtual_machines.begin_deallocate(resource_group=rg-a, name=zca-vm)" in caplog.text
    assert "API response: xxxxxxxxxx..." in caplog.text
