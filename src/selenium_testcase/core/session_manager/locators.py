import re

from ...utils.selenium_waits import Locator
from .constants import LOCATOR_MECHANISMS

_SEPARATORS_RE = re.compile(r'[\s_\-]+')


class ByLocatorFactory:
    """
    Builds (by, value) locators from mechanism names.

    Accepts Selenium's own strategy strings ('css selector') as well as
    snake_case ('css_selector') and camelCase ('cssSelector') spellings.
    """

    def by(self, mechanism: str, value: str) -> Locator:
        if not isinstance(mechanism, str) or not mechanism.strip():
            raise ValueError(f"Locator mechanism must be a non-empty string, got {mechanism!r}")
        key = _SEPARATORS_RE.sub('', mechanism).lower()
        try:
            return LOCATOR_MECHANISMS[key], value
        except KeyError:
            raise ValueError(f"Unknown locator mechanism: {mechanism!r}") from None
