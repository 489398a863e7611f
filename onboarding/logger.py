# -*- coding: utf-8 -*-
"""
onboarding.logger

Standard logger for the onboarding wizard.

Importing the package leaves the host application's loguru sinks alone and
keeps the ``onboarding`` messages disabled. Call ``define_log_level`` to
enable them and install the wizard's own sinks.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

from onboarding.config import DEFAULT_LOG_LEVEL, LOG_DIR_ENV, LOG_LEVEL_ENV

PACKAGE_NAME = "onboarding"


def define_log_level(
    print_level: Optional[str] = None,
    logfile_level: str = "DEBUG",
    name: Optional[str] = None,
):
    """
    Configure Loguru logger.
    print_level: console log threshold (falls back to ONBOARDING_LOG_LEVEL)
    logfile_level: file log threshold
    name: optional prefix for log filename
    """
    print_level = print_level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    # Remove all sinks
    _logger.remove()

    # Console output
    _logger.add(
        sys.stderr,
        level=print_level.upper(),
        backtrace=True,
        diagnose=True,
    )

    # File output, only when a log directory is configured
    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        log_name = f"{name}_{timestamp}" if name else timestamp
        _logger.add(
            logs_dir / f"{log_name}.log",
            level=logfile_level,
            backtrace=True,
            diagnose=True,
            enqueue=True,
            rotation="50 MB",
            retention="14 days",
        )

    _logger.enable(PACKAGE_NAME)
    return _logger


# Silent until the host opts in
_logger.disable(PACKAGE_NAME)
logger = _logger
