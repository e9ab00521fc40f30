import logging
from typing import Optional

import urllib3
from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.common.proxy import Proxy
from selenium.webdriver.remote.client_config import ClientConfig
from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)

# Errors raised by Selenium's HTTP layer when the server cannot be reached
TRANSPORT_ERRORS = (urllib3.exceptions.HTTPError, ConnectionError)


def build_proxy(proxy_host: Optional[str], proxy_port: Optional[int]) -> Optional[Proxy]:
    if not proxy_host:
        return None
    proxy_url = proxy_host if '://' in proxy_host else f"http://{proxy_host}"
    if proxy_port:
        proxy_url = f"{proxy_url}:{int(proxy_port)}"
    proxy = Proxy()
    proxy.http_proxy = proxy_url
    proxy.ssl_proxy = proxy_url
    return proxy


def build_client_config(
    host: str,
    *,
    connection_timeout: float,
    request_timeout: float,
    proxy_host: Optional[str] = None,
    proxy_port: Optional[int] = None,
) -> ClientConfig:
    kwargs = {
        'timeout': urllib3.Timeout(connect=connection_timeout, read=request_timeout),
    }
    proxy = build_proxy(proxy_host, proxy_port)
    if proxy is not None:
        logger.info(f"Reaching Selenium server through proxy {proxy.http_proxy}")
        kwargs['proxy'] = proxy
    return ClientConfig(remote_server_addr=host, **kwargs)


class SeleniumRemoteClient:
    """Creates sessions on a Selenium server through webdriver.Remote."""

    def create(
        self,
        host: str,
        capabilities: ArgOptions,
        connection_timeout: float,
        request_timeout: float,
        proxy_host: Optional[str] = None,
        proxy_port: Optional[int] = None,
    ) -> WebDriver:
        client_config = build_client_config(
            host,
            connection_timeout=connection_timeout,
            request_timeout=request_timeout,
            proxy_host=proxy_host,
            proxy_port=proxy_port,
        )
        logger.info(f"Requesting {capabilities.capabilities.get('browserName')} session from {host}")
        return webdriver.Remote(command_executor=host, options=capabilities, client_config=client_config)
