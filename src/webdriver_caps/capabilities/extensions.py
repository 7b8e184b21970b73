"""Registry of extension capability validators."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from webdriver_caps.capabilities.names import CapabilityName

logger = logging.getLogger(__name__)

# Validator for one extension capability: (name, raw value) -> normalized
# value, or None to drop the entry. Raises WebDriverError on bad input.
ExtensionValidator = Callable[[str, Any], Any]

EXTENSION_PREFIX_SEPARATOR = ":"


def passthrough(name: str, value: Any) -> Any:
    """Accept any value unchanged, as a copy detached from the request."""
    return copy.deepcopy(value)


class ExtensionRegistry:
    """
    Validators for capabilities outside the built-in set.

    Holds exact-name entries (such as ``proxy``) and vendor prefix
    entries (such as ``ladybird:``). An empty registry recognizes
    nothing, so every non-built-in name is rejected.
    """

    def __init__(self):
        self._names: dict[str, ExtensionValidator] = {}
        self._prefixes: dict[str, ExtensionValidator] = {}

    def register(self, name: str, validator: ExtensionValidator) -> None:
        """
        Register a validator for an exact capability name.

        Args:
            name: Capability name.
            validator: Function validating the capability's value.

        Raises:
            ValueError: If name is empty or a built-in capability.
        """
        if not name:
            raise ValueError("Extension capability name is required")
        if CapabilityName.lookup(name) is not None:
            raise ValueError(f"Cannot override built-in capability: {name}")

        self._names[name] = validator
        logger.debug(f"Registered extension capability: {name}")

    def register_prefix(self, prefix: str, validator: ExtensionValidator) -> None:
        """
        Register a validator for every capability under a vendor prefix.

        Args:
            prefix: Vendor prefix including the trailing colon, e.g. "moz:".
            validator: Function validating matching capabilities.

        Raises:
            ValueError: If prefix does not end with a colon.
        """
        if len(prefix) < 2 or not prefix.endswith(EXTENSION_PREFIX_SEPARATOR):
            raise ValueError(f"Extension prefix must end with ':': {prefix!r}")

        self._prefixes[prefix] = validator
        logger.debug(f"Registered extension prefix: {prefix}")

    def unregister(self, key: str) -> bool:
        """
        Remove a name or prefix registration.

        Returns:
            True if something was removed.
        """
        if self._names.pop(key, None) is not None:
            return True
        return self._prefixes.pop(key, None) is not None

    def lookup(self, name: str) -> ExtensionValidator | None:
        """
        Find the validator for a capability name.

        Exact names win over prefixes, and longer prefixes win over
        shorter ones.
        """
        validator = self._names.get(name)
        if validator is not None:
            return validator

        matches = [p for p in self._prefixes if name.startswith(p) and len(name) > len(p)]
        if not matches:
            return None
        return self._prefixes[max(matches, key=len)]

    def is_empty(self) -> bool:
        """Check if nothing is registered."""
        return not self._names and not self._prefixes

    @property
    def names(self) -> list[str]:
        """Registered exact names."""
        return list(self._names)

    @property
    def prefixes(self) -> list[str]:
        """Registered vendor prefixes."""
        return list(self._prefixes)

    def __len__(self) -> int:
        return len(self._names) + len(self._prefixes)

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __repr__(self) -> str:
        return f"ExtensionRegistry(names={self.names}, prefixes={self.prefixes})"
