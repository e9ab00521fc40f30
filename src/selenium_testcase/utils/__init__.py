# This file makes selenium_testcase.utils a Python package and exposes key utilities.

from .file_handler import Filesystem
from .logger import setup_logger
from .selenium_waits import wait_for_any_present, wait_for_title

__all__ = [
    "Filesystem",
    "setup_logger",
    "wait_for_any_present",
    "wait_for_title",
]
