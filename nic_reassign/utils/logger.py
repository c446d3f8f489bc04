"""
NIC Reassign - Logging Setup

This module sets up logging for NIC Reassign runs.

Logging Strategy:
- INFO (default): High-level progress for operators
- DEBUG (--verbose): Resolved resource names and every Azure call
- WARNING: Recoverable issues (e.g., a NIC that must be deleted by hand)
- ERROR: Problems that stop the run
- CRITICAL: Rollback failed, manual intervention required
"""

import logging
import sys
from pathlib import Path
from typing import Any

LOGGER_NAME = 'nic_reassign'


class CleanFormatter(logging.Formatter):
    """
    Custom formatter for clean user-facing logs.

    - INFO: Just the message (clean)
    - WARNING/ERROR/CRITICAL: Show level with emphasis
    """

    def format(self, record):
        """Format log record based on level."""

        if record.levelno == logging.INFO:
            return record.getMessage()

        elif record.levelno == logging.WARNING:
            return f"[!] WARNING: {record.getMessage()}"

        elif record.levelno == logging.ERROR:
            return f"[X] ERROR: {record.getMessage()}"

        elif record.levelno == logging.CRITICAL:
            return f"[!!] CRITICAL: {record.getMessage()}"

        else:
            return f"[DEBUG] {record.getMessage()}"


def setup_logging(level='INFO', log_file=None, verbose=False):
    """
    Setup logging for NIC Reassign.

    Configures logging to:
    1. Output to console (stdout)
    2. Optionally write to log file
    3. Use a detailed format in verbose mode

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only logs to console.
        verbose: If True, use DEBUG level and detailed format

    Returns:
        logging.Logger: Configured logger instance

    Example:
        logger = setup_logging(verbose=True)
        logger.debug("Windows ZCA VM name: zca-vm")
    """

    if verbose:
        level = 'DEBUG'

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers (in case setup_logging called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if verbose:
        # [2026-10-18 10:30:45] DEBUG [run:45]: Executing Deallocate VM(rg, zca-vm)
        console_format = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(funcName)s:%(lineno)d]: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        console_format = CleanFormatter('%(message)s')

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)

        # File format includes more details
        file_handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_file}")

    return logger


def log_api_call(logger, method_name: str, **params):
    """
    Log an API call (DEBUG level).

    Args:
        logger: Logger instance (may be None)
        method_name: Name of the API method (e.g., 'virtual_machines.begin_deallocate')
        **params: API call parameters

    Example:
        log_api_call(logger, 'virtual_machines.begin_deallocate', resource_group='rg', name='vm')
        # Output: API call: virtual_machines.begin_deallocate(resource_group=rg, name=vm)
    """
    if not logger:
        return
    param_str = ', '.join(f'{k}={v}' for k, v in params.items())
    logger.debug(f"API call: {method_name}({param_str})")


def log_api_response(logger, response: Any, truncate: int = 200):
    """
    Log an API response (DEBUG level), truncated to `truncate` characters.
    """
    if not logger:
        return
    response_str = str(response)
    if len(response_str) > truncate:
        response_str = response_str[:truncate] + '...'
    logger.debug(f"API response: {response_str}")


def print_header(logger, title: str, char='=', length=60):
    """
    Print a formatted header (INFO level).

    Example:
        print_header(logger, 'NIC Reassign - Apply')
        # Output:
        # ============================================================
        # NIC Reassign - Apply
        # ============================================================
    """
    logger.info(char * length)
    logger.info(title)
    logger.info(char * length)
