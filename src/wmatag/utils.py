"""
Utility functions and configuration for wmatag.
"""

import os
import re
import sys
import logging
from pathlib import Path
from typing import List, Any
from logging.handlers import RotatingFileHandler

# ---------- Constants ----------
EXIT_CODE_SUCCESS = 0
EXIT_CODE_ERROR = 1
EXIT_CODE_USAGE = 2
EXIT_CODE_NO_FILES = 3
EXIT_CODE_INTERRUPTED = 130

_TRUTHY = ('1', 'true', 'yes')

# ---------- Configuration ----------
class Config:
    """Configuration management with validation."""
    # Joins a multi-value list when it lands in a single-valued field (TITLE, ARTIST, ...)
    SCALAR_SEPARATOR = ' '
    # Splits --value on the command line into multiple values
    DEFAULT_DELIMITER = ';'
    DEFAULT_VERBOSE = False

    SUPPORTED_EXT = {'.wma', '.asf', '.wmv'}

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not isinstance(cls.SCALAR_SEPARATOR, str):
            raise ValueError("SCALAR_SEPARATOR must be a string")
        if not cls.DEFAULT_DELIMITER:
            raise ValueError("DEFAULT_DELIMITER cannot be empty")
        if not isinstance(cls.DEFAULT_VERBOSE, bool):
            raise ValueError("DEFAULT_VERBOSE must be a boolean")
        if not cls.SUPPORTED_EXT:
            raise ValueError("SUPPORTED_EXT cannot be empty")
        for ext in cls.SUPPORTED_EXT:
            if not ext.startswith('.'):
                raise ValueError(f"Invalid extension in SUPPORTED_EXT: {ext!r}")

    @classmethod
    def load_from_env(cls) -> None:
        """Load configuration from environment variables, updating class attributes."""
        if os.getenv('WMATAG_SCALAR_SEPARATOR') is not None:
            cls.SCALAR_SEPARATOR = os.getenv('WMATAG_SCALAR_SEPARATOR')
        if os.getenv('WMATAG_DELIMITER'):
            cls.DEFAULT_DELIMITER = os.getenv('WMATAG_DELIMITER')
        if 'WMATAG_VERBOSE' in os.environ:
            cls.DEFAULT_VERBOSE = os.environ['WMATAG_VERBOSE'].strip().lower() in _TRUTHY
        cls.validate()

# ---------- Logging Setup ----------
def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rotation and proper formatting."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Create logs directory if it doesn't exist
    log_dir = Path('logs')
    log_dir.mkdir(exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / 'wmatag.log',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            file_handler
        ]
    )

# ---------- Small Helpers ----------
_LEADING_INT = re.compile(r'\s*(\d+)')

def parse_int(x: Any) -> int:
    """
    Parse the leading unsigned decimal integer of a value, returning 0 when there is none.

    Examples:
        >>> parse_int('07')
        7
        >>> parse_int('3/12')
        3
        >>> parse_int('n/a')
        0
    """
    if x is None:
        return 0
    if isinstance(x, bool):
        return int(x)
    if isinstance(x, int):
        return max(x, 0)
    m = _LEADING_INT.match(str(x))
    if not m:
        return 0
    return int(m.group(1))

def join_for_printing(lst: List[str]) -> str:
    """Join list for display, showing '(none)' for empty lists."""
    return '(none)' if not lst else '; '.join(lst)

def split_values(s: str, delimiter: str = ';') -> List[str]:
    """Split a delimiter-separated string into stripped, non-empty values."""
    if s is None:
        return []
    parts = [p.strip() for p in str(s).split(delimiter)]
    return [p for p in parts if p != ""]
