from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .core.config_loader import ConfigLoader


DEFAULT_HOST = "http://localhost:4444/wd/hub"


class SessionSettings(BaseModel):
    # Connection parameters stay fixed for the lifetime of a SessionManager
    model_config = ConfigDict(frozen=True)

    host: str = Field(DEFAULT_HOST, description="URL of the Selenium server or Grid hub.")
    browser: str = Field("firefox", description="Browser to request: 'firefox', 'chrome', 'edge', 'safari' or 'ie'.")
    connection_timeout: float = Field(30.0, description="Seconds to wait for the HTTP connection to the server.")
    request_timeout: float = Field(120.0, description="Seconds to wait for a response to each WebDriver command.")
    proxy_host: Optional[str] = Field(None, description="HTTP proxy used to reach the Selenium server.")
    proxy_port: Optional[int] = Field(None, description="Port of the HTTP proxy.")

    # Browser options
    headless: bool = False
    window_size: Optional[str] = Field(None, description="Window size as 'WIDTH,HEIGHT'.")
    driver_options: List[str] = Field(default_factory=list, description="Extra command-line arguments for the browser.")
    user_agent: Optional[str] = None

    @classmethod
    def from_config_loader(cls, config_loader: Optional["ConfigLoader"] = None) -> "SessionSettings":
        """Builds settings from the 'selenium' block of the settings file."""
        from .core.config_loader import ConfigLoader

        loader = config_loader if config_loader else ConfigLoader()
        block = loader.get_setting('selenium', {}) or {}
        return cls.model_validate(block)


if __name__ == '__main__':
    print(SessionSettings().model_dump_json(indent=2))
    print(SessionSettings(browser="chrome", headless=True, window_size="1280,800").model_dump_json(indent=2))
