"""
Session manager package.

Public API:
- SessionManager: owns the lifecycle of one remote browser session and forwards calls to it.
- SeleniumRemoteClient / ByLocatorFactory: default collaborators, replaceable by injection.
"""

from .interfaces import FileWriter, LocatorFactory, RemoteClient, SessionHandle
from .locators import ByLocatorFactory
from .remote import SeleniumRemoteClient
from .service import SessionManager

__all__ = [
    "SessionManager",
    "SeleniumRemoteClient",
    "ByLocatorFactory",
    "RemoteClient",
    "SessionHandle",
    "LocatorFactory",
    "FileWriter",
]
