from unittest.mock import patch, sentinel

from selenium.webdriver.common.proxy import ProxyType
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from selenium_testcase.core.session_manager import SeleniumRemoteClient
from selenium_testcase.core.session_manager.remote import build_client_config, build_proxy


def test_no_proxy_without_host():
    assert build_proxy(None, 3128) is None


def test_proxy_adds_scheme_and_port():
    proxy = build_proxy("proxy.local", 3128)

    assert proxy.proxy_type == ProxyType.MANUAL
    assert proxy.http_proxy == "http://proxy.local:3128"
    assert proxy.ssl_proxy == "http://proxy.local:3128"


def test_proxy_keeps_explicit_scheme():
    assert build_proxy("https://proxy.local", None).http_proxy == "https://proxy.local"


def test_client_config_carries_both_timeouts():
    config = build_client_config("http://selenium.local:4444/wd/hub", connection_timeout=5, request_timeout=60)

    assert config.remote_server_addr == "http://selenium.local:4444/wd/hub"
    assert config.timeout.connect_timeout == 5
    assert config.timeout.read_timeout == 60


def test_client_config_uses_proxy():
    config = build_client_config(
        "http://selenium.local:4444/wd/hub",
        connection_timeout=5,
        request_timeout=60,
        proxy_host="proxy.local",
        proxy_port=3128,
    )

    assert config.proxy.http_proxy == "http://proxy.local:3128"


def test_create_opens_a_remote_session():
    options = FirefoxOptions()

    with patch("selenium_testcase.core.session_manager.remote.webdriver.Remote", return_value=sentinel.driver) as remote:
        driver = SeleniumRemoteClient().create("http://selenium.local:4444/wd/hub", options, 5, 60)

    assert driver is sentinel.driver
    kwargs = remote.call_args.kwargs
    assert kwargs["command_executor"] == "http://selenium.local:4444/wd/hub"
    assert kwargs["options"] is options
    assert kwargs["client_config"].timeout.read_timeout == 60
