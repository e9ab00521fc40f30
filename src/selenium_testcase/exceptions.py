class SeleniumTestCaseError(Exception):
    pass


class UnsupportedBrowser(SeleniumTestCaseError, ValueError):
    """Raised when a browser name is not one of the supported browsers."""


class InvalidArgument(SeleniumTestCaseError, ValueError):
    """Raised for a bad locator mechanism or an unwritable file path."""


class SessionNotAvailable(SeleniumTestCaseError):
    """Raised when the Selenium server cannot be reached while creating a session."""
