"""
Utility functions for the draw analytics package.

This package contains logging setup, error-logging decorators,
input validation and JSON helpers shared by the engines and the CLI.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import numpy as np

from .decorators import log_analysis_errors
from .validation import ensure_valid_pick, validate_draw

# Constants
LOG_DIR = Path("logs")
LOG_FILE = LOG_DIR / "analytics.log"


def setup_logging(log_file: Optional[str] = None,
                  log_level: int = logging.INFO,
                  console: bool = True) -> None:
    """
    Configure logging for the analytics package.

    Args:
        log_file: Path to log file (default: logs/analytics.log)
        log_level: Logging level (default: INFO)
        console: Whether to also log to console (default: True)
    """
    if log_file is None:
        log_file = LOG_FILE

    log_dir = Path(log_file).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(log_level)
    root_logger.addHandler(file_handler)

    # Console goes to stderr so stdout stays clean for JSON output
    if console:
        console_formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(log_level)
        root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized at level {logging.getLevelName(log_level)}")
    logging.info(f"Log file: {os.path.abspath(log_file)}")


class NumpyEncoder(json.JSONEncoder):
    """Custom encoder for numpy data types"""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif hasattr(obj, 'isoformat'):
            return obj.isoformat()
        return json.JSONEncoder.default(self, obj)


__all__ = [
    'setup_logging',
    'log_analysis_errors',
    'ensure_valid_pick',
    'validate_draw',
    'NumpyEncoder',
    'LOG_DIR',
    'LOG_FILE',
]
