import unittest
from typing import Optional

from .core.config_loader import ConfigLoader
from .core.session_manager import SessionManager, SessionHandle
from .data_models import SessionSettings
from .utils.logger import setup_logger

PACKAGE_LOGGER = 'selenium_testcase'


class SeleniumTestCase(unittest.TestCase):
    """
    Base class for browser tests.

    Each test gets its own SessionManager as ``self.session``. No browser is
    started in setUp; the first call that needs one (``visit``, ``page_title``,
    ...) creates it, and cleanup always closes it.

    Subclasses select configuration through the class attributes:

    - ``settings``: a SessionSettings instance used as is.
    - ``settings_file``: path of a JSON settings file to load instead of the default.
    """

    settings: Optional[SessionSettings] = None
    settings_file: Optional[str] = None

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        setup_logger(cls.config_loader(), logger_name=PACKAGE_LOGGER)

    @classmethod
    def config_loader(cls) -> ConfigLoader:
        return ConfigLoader(cls.settings_file)

    def setUp(self):
        super().setUp()
        settings = self.settings if self.settings else SessionSettings.from_config_loader(self.config_loader())
        self.session = self.create_session_manager(settings)
        self.addCleanup(self.session.destroy_session)

    def create_session_manager(self, settings: SessionSettings) -> SessionManager:
        """Hook for subclasses that need to inject collaborators."""
        return SessionManager(settings)

    # Session helpers

    def create_session(self) -> None:
        self.session.create_session()

    def force_create_session(self) -> None:
        self.session.force_create_session()

    def destroy_session(self) -> None:
        self.session.destroy_session()

    def webdriver_loaded(self) -> bool:
        return self.session.is_session_active()

    def webdriver(self) -> SessionHandle:
        return self.session.get_driver()

    def set_browser(self, name: str) -> None:
        self.session.set_browser(name)

    # Page helpers

    def visit(self, url: str) -> "SeleniumTestCase":
        self.session.visit(url)
        return self

    def page_title(self) -> str:
        return self.session.page_title()

    def page_source(self) -> str:
        return self.session.page_source()

    def current_url(self) -> str:
        return self.session.current_url()

    def save_page_source(self, path: str) -> None:
        self.session.save_page_source(path)

    # Assertions

    def assertPageTitle(self, expected: str, msg: Optional[str] = None) -> None:
        self.assertEqual(expected, self.page_title(), msg)

    def assertPageSourceContains(self, text: str, msg: Optional[str] = None) -> None:
        self.assertIn(text, self.page_source(), msg)

    def assertCurrentUrl(self, expected: str, msg: Optional[str] = None) -> None:
        self.assertEqual(expected, self.current_url(), msg)
