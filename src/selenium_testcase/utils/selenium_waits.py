import typing
from typing import Iterable, Tuple, Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException


Locator = Tuple[str, str]


def wait_for_any_present(context: typing.Union[WebDriver, WebElement],
                         locators: Iterable[Locator],
                         timeout: float = 10) -> Optional[WebElement]:
    """
    Waits for the first present element among the provided locators within the given context.
    Returns the found WebElement or None if none are found within timeout.
    """
    for by, value in locators:
        try:
            return WebDriverWait(context, timeout).until(
                EC.presence_of_element_located((by, value))
            )
        except TimeoutException:
            continue
    return None


def wait_for_title(driver: WebDriver, title: str, timeout: float = 10) -> bool:
    """Waits until the page title equals `title`. Returns False on timeout."""
    try:
        return bool(WebDriverWait(driver, timeout).until(EC.title_is(title)))
    except TimeoutException:
        return False
