"""
Core functionality for the CTF wordlist generator
"""

from .config import Config, get_config
from .logger import configure_logging, get_logger

__all__ = [
    "Config",
    "configure_logging",
    "get_config",
    "get_logger",
]
