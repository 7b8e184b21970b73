"""Validation of individual capability entries."""

from __future__ import annotations

from typing import Any, Callable

from webdriver_caps.capabilities.extensions import ExtensionRegistry
from webdriver_caps.capabilities.names import (
    CapabilityName,
    PAGE_LOAD_STRATEGIES,
    PROMPT_BEHAVIORS,
)
from webdriver_caps.capabilities.timeouts import deserialize_timeouts
from webdriver_caps.protocol.errors import WebDriverError

# Type alias for built-in field validators: (name, non-null value) -> value
FieldValidator = Callable[[CapabilityName, Any], Any]


def _expect_boolean(name: CapabilityName, value: Any) -> bool:
    if not isinstance(value, bool):
        raise WebDriverError.invalid_type(f"Capability {name.value} must be a boolean")
    return value


def _expect_string(name: CapabilityName, value: Any) -> str:
    if not isinstance(value, str):
        raise WebDriverError.invalid_type(f"Capability {name.value} must be a string")
    return value


def _expect_keyword(keywords: frozenset[str]) -> FieldValidator:
    """Build a validator accepting only strings from a keyword table."""

    def validate(name: CapabilityName, value: Any) -> str:
        if not isinstance(value, str):
            raise WebDriverError.invalid_argument(f"Capability {name.value} must be a string")
        if value not in keywords:
            raise WebDriverError.invalid_argument(f"Invalid {name.value} capability")
        return value

    return validate


def _expect_timeouts(name: CapabilityName, value: Any) -> dict[str, Any]:
    return deserialize_timeouts(value)


FIELD_VALIDATORS: dict[CapabilityName, FieldValidator] = {
    CapabilityName.ACCEPT_INSECURE_CERTS: _expect_boolean,
    CapabilityName.BROWSER_NAME: _expect_string,
    CapabilityName.BROWSER_VERSION: _expect_string,
    CapabilityName.PLATFORM_NAME: _expect_string,
    CapabilityName.PAGE_LOAD_STRATEGY: _expect_keyword(PAGE_LOAD_STRATEGIES),
    CapabilityName.STRICT_FILE_INTERACTABILITY: _expect_boolean,
    CapabilityName.TIMEOUTS: _expect_timeouts,
    CapabilityName.UNHANDLED_PROMPT_BEHAVIOR: _expect_keyword(PROMPT_BEHAVIORS),
}
"""Validator for every built-in capability name."""


def validate_capability(
    name: str,
    value: Any,
    extensions: ExtensionRegistry | None = None,
) -> Any:
    """
    Validate and normalize a single capability.

    Args:
        name: Capability name.
        value: Decoded JSON value for the capability.
        extensions: Registry consulted for names that are not built in.

    Returns:
        The normalized value, or None if the capability should be
        dropped (a null value means "no preference").

    Raises:
        UnrecognizedCapabilityError: If name is neither built in nor
            registered as an extension.
        WebDriverError: If value does not satisfy the capability's schema.
    """
    builtin = CapabilityName.lookup(name)
    if builtin is not None:
        if value is None:
            return None
        return FIELD_VALIDATORS[builtin](builtin, value)

    extension = extensions.lookup(name) if extensions is not None else None
    if extension is None:
        raise WebDriverError.unrecognized_capability(name)

    if value is None:
        return None
    return extension(name, value)
