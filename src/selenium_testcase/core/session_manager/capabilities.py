import logging
import re
from typing import Optional, Tuple

from selenium.webdriver.common.options import ArgOptions

from ...exceptions import UnsupportedBrowser
from .constants import BROWSER_OPTIONS, CHROMIUM_BROWSERS, SUPPORTED_BROWSERS

logger = logging.getLogger(__name__)

_WINDOW_SIZE_RE = re.compile(r'^\s*(\d+)\s*[,x]\s*(\d+)\s*$')


def normalize_browser(name: str) -> str:
    """Returns the lowercase browser name, raising UnsupportedBrowser if it is not supported."""
    normalized = name.strip().lower() if isinstance(name, str) else None
    if normalized not in BROWSER_OPTIONS:
        raise UnsupportedBrowser(
            f"Unsupported browser: {name!r}. Supported browsers: {', '.join(SUPPORTED_BROWSERS)}"
        )
    return normalized


def parse_window_size(window_size: str) -> Optional[Tuple[int, int]]:
    match = _WINDOW_SIZE_RE.match(window_size)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def build_browser_options(
    browser: str,
    *,
    headless: bool = False,
    window_size: Optional[str] = None,
    additional_options: Optional[list] = None,
    user_agent: Optional[str] = None,
) -> ArgOptions:
    browser = normalize_browser(browser)
    options = BROWSER_OPTIONS[browser]()

    if headless:
        if browser in CHROMIUM_BROWSERS:
            options.add_argument('--headless=new')
        elif browser == 'firefox':
            options.add_argument('--headless')
        else:
            logger.warning(f"Headless mode is not supported for {browser}; ignoring.")

    if window_size:
        size = parse_window_size(window_size)
        if size is None:
            logger.warning(f"Ignoring malformed window size: {window_size!r} (expected 'WIDTH,HEIGHT')")
        elif browser in CHROMIUM_BROWSERS:
            options.add_argument(f"--window-size={size[0]},{size[1]}")
        elif browser == 'firefox':
            options.add_argument(f"--width={size[0]}")
            options.add_argument(f"--height={size[1]}")
        else:
            logger.warning(f"Window size arguments are not supported for {browser}; ignoring.")

    if user_agent:
        if browser in CHROMIUM_BROWSERS:
            options.add_argument(f"user-agent={user_agent}")
        elif browser == 'firefox':
            options.set_preference('general.useragent.override', user_agent)
        else:
            logger.warning(f"Custom user agent is not supported for {browser}; ignoring.")

    if isinstance(additional_options, list):
        for opt in additional_options:
            if isinstance(opt, str):
                options.add_argument(opt)
            else:
                logger.warning(f"Ignoring non-string driver option: {opt}")
    elif additional_options is not None:
        logger.warning(f"'driver_options' in config is not a list: {additional_options}")

    logger.debug(f"Built {type(options).__name__} with arguments {options.arguments}")
    return options
