import logging
from typing import Any, Optional

from selenium.webdriver.common.options import ArgOptions

from ...data_models import SessionSettings
from ...exceptions import InvalidArgument, SessionNotAvailable
from ...utils.file_handler import Filesystem
from ...utils.selenium_waits import Locator, wait_for_any_present, wait_for_title
from ..config_loader import ConfigLoader
from .capabilities import build_browser_options, normalize_browser
from .constants import DEFAULT_WAIT_TIMEOUT
from .interfaces import FileWriter, LocatorFactory, RemoteClient, SessionHandle
from .locators import ByLocatorFactory
from .remote import SeleniumRemoteClient, TRANSPORT_ERRORS

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Owns at most one remote browser session and mediates every call made on it.

    The session is created lazily: nothing talks to the Selenium server until
    `create_session()` is called, either directly or through an accessor.
    """

    def __init__(
        self,
        settings: Optional[SessionSettings] = None,
        *,
        remote_client: Optional[RemoteClient] = None,
        locator_factory: Optional[LocatorFactory] = None,
        file_writer: Optional[FileWriter] = None,
        config_loader: Optional[ConfigLoader] = None,
    ):
        self.settings = settings if settings else SessionSettings.from_config_loader(config_loader)
        self.remote_client: RemoteClient = remote_client if remote_client else SeleniumRemoteClient()
        self.locator_factory: LocatorFactory = locator_factory if locator_factory else ByLocatorFactory()
        self.file_writer: FileWriter = file_writer if file_writer else Filesystem()
        self.handle: Optional[SessionHandle] = None
        self.browser: str = normalize_browser(self.settings.browser)

    # Session lifecycle

    def create_session(self, force: bool = False) -> None:
        if self.handle is not None and not force:
            return

        s = self.settings
        try:
            handle = self.remote_client.create(
                s.host,
                self.build_capabilities(),
                s.connection_timeout,
                s.request_timeout,
                s.proxy_host,
                s.proxy_port,
            )
        except TRANSPORT_ERRORS as e:
            logger.error(f"Could not reach Selenium server at {s.host}: {e}")
            raise SessionNotAvailable(
                f"Selenium server is not running or unreachable at {s.host}"
            ) from e

        self.handle = handle
        logger.info(f"{self.browser.capitalize()} session created on {s.host}.")

    def force_create_session(self) -> None:
        """
        Creates a new session even if one is active.

        The previous handle is replaced without calling quit(), so its remote
        session stays open on the server until the server times it out.
        """
        self.create_session(force=True)

    def destroy_session(self) -> None:
        if self.handle is None:
            return
        try:
            self.handle.quit()
            logger.info("Browser session closed.")
        except Exception as e:
            logger.warning(f"Error closing browser session: {e}", exc_info=True)
        finally:
            self.handle = None

    def is_session_active(self) -> bool:
        return self.handle is not None

    def get_driver(self) -> SessionHandle:
        """Returns the session handle, creating a session first if none is active."""
        if self.handle is None:
            self.create_session()
        return self.handle

    # Browser, capabilities and locators

    def set_browser(self, name: str) -> None:
        self.browser = normalize_browser(name)

    def build_capabilities(self) -> ArgOptions:
        s = self.settings
        return build_browser_options(
            self.browser,
            headless=s.headless,
            window_size=s.window_size,
            additional_options=list(s.driver_options),
            user_agent=s.user_agent,
        )

    def build_locator(self, mechanism: str, value: str) -> Locator:
        try:
            return self.locator_factory.by(mechanism, value)
        except Exception as e:
            raise InvalidArgument(f"Invalid locator ({mechanism!r}, {value!r}): {e}") from e

    # Page accessors

    def page_title(self) -> str:
        return self.get_driver().title

    def page_source(self) -> str:
        return self.get_driver().page_source

    def current_url(self) -> str:
        return self.get_driver().current_url

    def save_page_source(self, path: str) -> None:
        source = self.page_source()
        if not self.file_writer.put(path, source):
            raise InvalidArgument(f"Could not write page source to {path}")
        logger.info(f"Saved page source to {path}")

    def visit(self, url: str) -> "SessionManager":
        logger.info(f"Navigating to {url}")
        self.get_driver().get(url)
        return self

    def find_element(self, mechanism: str, value: str) -> Any:
        by, value = self.build_locator(mechanism, value)
        return self.get_driver().find_element(by, value)

    def wait_for_element(self, mechanism: str, value: str, timeout: float = DEFAULT_WAIT_TIMEOUT) -> Any:
        locator = self.build_locator(mechanism, value)
        element = wait_for_any_present(self.get_driver(), [locator], timeout)
        if element is None:
            logger.warning(f"Element {locator} not present after {timeout}s")
        return element

    def wait_for_title(self, title: str, timeout: float = DEFAULT_WAIT_TIMEOUT) -> bool:
        return wait_for_title(self.get_driver(), title, timeout)

    # Substitution points

    def set_handle(self, handle: Optional[SessionHandle]) -> None:
        self.handle = handle

    def set_file_writer(self, writer: FileWriter) -> None:
        self.file_writer = writer

    def set_remote_client(self, client: RemoteClient) -> None:
        self.remote_client = client

    def set_locator_factory(self, factory: LocatorFactory) -> None:
        self.locator_factory = factory

    def __enter__(self):
        self.create_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy_session()
