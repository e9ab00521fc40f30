from typing import Dict, Tuple, Type

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.common.by import By
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.ie.options import Options as IeOptions
from selenium.webdriver.safari.options import Options as SafariOptions

# Browser name -> Selenium options class used as the capability descriptor
BROWSER_OPTIONS: Dict[str, Type[ArgOptions]] = {
    'firefox': FirefoxOptions,
    'chrome': ChromeOptions,
    'edge': EdgeOptions,
    'safari': SafariOptions,
    'ie': IeOptions,
}

SUPPORTED_BROWSERS: Tuple[str, ...] = tuple(BROWSER_OPTIONS)

CHROMIUM_BROWSERS = ('chrome', 'edge')

# Normalized mechanism name (lowercase, no spaces/underscores/dashes) -> By strategy
LOCATOR_MECHANISMS: Dict[str, str] = {
    'id': By.ID,
    'name': By.NAME,
    'xpath': By.XPATH,
    'cssselector': By.CSS_SELECTOR,
    'classname': By.CLASS_NAME,
    'tagname': By.TAG_NAME,
    'linktext': By.LINK_TEXT,
    'partiallinktext': By.PARTIAL_LINK_TEXT,
}

DEFAULT_WAIT_TIMEOUT = 10
