# This file makes selenium_testcase.core a Python package and exposes key classes.

from .config_loader import ConfigLoader
from .session_manager import SessionManager

__all__ = [
    "ConfigLoader",
    "SessionManager",
]
