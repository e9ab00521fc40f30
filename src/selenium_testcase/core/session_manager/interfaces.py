from typing import Any, Optional, Protocol

from selenium.webdriver.common.options import ArgOptions

from ...utils.selenium_waits import Locator


class SessionHandle(Protocol):
    """The subset of Selenium's WebDriver the session manager relies on."""

    @property
    def title(self) -> str: ...

    @property
    def page_source(self) -> str: ...

    @property
    def current_url(self) -> str: ...

    def get(self, url: str) -> None: ...

    def find_element(self, by: str, value: Optional[str] = None) -> Any: ...

    def quit(self) -> None: ...


class RemoteClient(Protocol):
    def create(
        self,
        host: str,
        capabilities: ArgOptions,
        connection_timeout: float,
        request_timeout: float,
        proxy_host: Optional[str] = None,
        proxy_port: Optional[int] = None,
    ) -> SessionHandle: ...


class LocatorFactory(Protocol):
    def by(self, mechanism: str, value: str) -> Locator: ...


class FileWriter(Protocol):
    def put(self, path: str, content: str) -> bool: ...
