"""Validation of whole capability objects."""

from __future__ import annotations

import logging
from typing import Any

from webdriver_caps.capabilities.extensions import ExtensionRegistry
from webdriver_caps.capabilities.fields import validate_capability
from webdriver_caps.protocol.errors import WebDriverError

logger = logging.getLogger(__name__)

# Capability name -> normalized value. Never holds None values.
CapabilitySet = dict[str, Any]


def validate_capabilities(
    capability: Any,
    extensions: ExtensionRegistry | None = None,
) -> CapabilitySet:
    """
    Validate a capability object and return its normalized form.

    Entries are checked in insertion order and the first invalid entry
    aborts validation. Entries whose value is null are left out of the
    result.

    Args:
        capability: Decoded JSON value claimed to be a capability object.
        extensions: Registry for capabilities that are not built in.

    Returns:
        New CapabilitySet; the input is not modified.

    Raises:
        WebDriverError: If capability is not an object or any entry is invalid.
    """
    if not isinstance(capability, dict):
        raise WebDriverError.invalid_argument("Capability is not an Object")

    result: CapabilitySet = {}

    for name, value in capability.items():
        deserialized = validate_capability(name, value, extensions)
        if deserialized is not None:
            result[name] = deserialized

    logger.debug(f"Validated capabilities: {list(result)}")
    return result
