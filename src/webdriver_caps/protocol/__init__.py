"""
WebDriver protocol errors.

Error codes and the exception type raised by capability processing.
"""

from webdriver_caps.protocol.errors import (
    ErrorCode,
    HTTP_STATUS,
    WebDriverError,
    UnrecognizedCapabilityError,
)

__all__ = [
    "ErrorCode",
    "HTTP_STATUS",
    "WebDriverError",
    "UnrecognizedCapabilityError",
]
