"""Selenium-backed browser sessions for unittest and pytest test cases."""

from .core import ConfigLoader, SessionManager
from .data_models import SessionSettings
from .exceptions import InvalidArgument, SeleniumTestCaseError, SessionNotAvailable, UnsupportedBrowser
from .testcase import SeleniumTestCase

__version__ = "0.1.0"

__all__ = [
    "ConfigLoader",
    "SessionManager",
    "SessionSettings",
    "SeleniumTestCase",
    "SeleniumTestCaseError",
    "UnsupportedBrowser",
    "InvalidArgument",
    "SessionNotAvailable",
]
