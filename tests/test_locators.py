import pytest
from selenium.webdriver.common.by import By

from selenium_testcase.core.session_manager import ByLocatorFactory


@pytest.mark.parametrize("mechanism, expected", [
    ("id", By.ID),
    ("xpath", By.XPATH),
    ("css selector", By.CSS_SELECTOR),
    ("css_selector", By.CSS_SELECTOR),
    ("cssSelector", By.CSS_SELECTOR),
    ("className", By.CLASS_NAME),
    ("tag_name", By.TAG_NAME),
    ("linkText", By.LINK_TEXT),
    ("partial-link-text", By.PARTIAL_LINK_TEXT),
    ("NAME", By.NAME),
])
def test_maps_mechanism_names(mechanism, expected):
    assert ByLocatorFactory().by(mechanism, "value") == (expected, "value")


@pytest.mark.parametrize("mechanism", ["invalidMechanism", "", "   ", None])
def test_rejects_unknown_mechanisms(mechanism):
    with pytest.raises(ValueError):
        ByLocatorFactory().by(mechanism, "value")
