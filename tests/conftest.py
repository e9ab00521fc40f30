from unittest.mock import MagicMock

import pytest

from selenium_testcase import SessionManager, SessionSettings


@pytest.fixture
def settings():
    return SessionSettings(
        host="http://selenium.local:4444/wd/hub",
        browser="firefox",
        connection_timeout=5,
        request_timeout=60,
        proxy_host="proxy.local",
        proxy_port=3128,
    )


@pytest.fixture
def handle():
    return MagicMock(name="handle")


@pytest.fixture
def remote_client(handle):
    client = MagicMock(name="remote_client")
    client.create.return_value = handle
    return client


@pytest.fixture
def file_writer():
    writer = MagicMock(name="file_writer")
    writer.put.return_value = True
    return writer


@pytest.fixture
def manager(settings, remote_client, file_writer):
    return SessionManager(settings, remote_client=remote_client, file_writer=file_writer)
