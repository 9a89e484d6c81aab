#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Shared utilities for the notebook conversion pipeline.
Logging setup and configuration lookup used by the CLI and mail handler.
"""

import os
import sys
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'INFO', log_dir: Optional[Path] = None,
                  logger_name: str = 'HighlightHop') -> logging.Logger:
    """
    Set up logging configuration with UTF-8 encoding.

    Args:
        level: Log level name (e.g., 'INFO', 'DEBUG')
        log_dir: Directory for a timestamped log file; console only when None
        logger_name: Name for the logger and the log file prefix

    Returns:
        Configured logger instance
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = log_dir / f'{logger_name.lower()}_{timestamp}.log'
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    return logging.getLogger(logger_name)


def load_settings(env_file: Optional[Path] = None) -> None:
    """
    Load a .env file into the environment; existing variables win.

    Without env_file, .env is looked up from the working directory upwards.
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
    load_dotenv(env_file)


def get_reply_sender() -> str:
    """
    Address replies are sent from, built from DOMAIN_NAME.

    Raises:
        ConfigurationError: If DOMAIN_NAME is not set
    """
    domain_name = os.environ.get('DOMAIN_NAME')
    if not domain_name:
        raise ConfigurationError("DOMAIN_NAME environment variable is not set.")
    return f"no-reply@{domain_name}"
