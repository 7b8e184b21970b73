"""Timeouts configuration used by the timeouts capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from webdriver_caps.protocol.errors import WebDriverError

# Largest integer a JSON number can represent exactly
MAX_SAFE_INTEGER = 2**53 - 1

DEFAULT_SCRIPT_TIMEOUT = 30_000
DEFAULT_PAGE_LOAD_TIMEOUT = 300_000
DEFAULT_IMPLICIT_WAIT_TIMEOUT = 0


def _as_timeout(value: Any) -> int | None:
    """Return value as a timeout in milliseconds, or None if it is not one."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    if value < 0 or value > MAX_SAFE_INTEGER:
        return None
    return value


@dataclass(frozen=True)
class TimeoutsConfiguration:
    """
    Session timeouts, in milliseconds.

    A script timeout of None means scripts never time out.
    """

    script: int | None = DEFAULT_SCRIPT_TIMEOUT
    """Time to wait for injected scripts."""

    page_load: int = DEFAULT_PAGE_LOAD_TIMEOUT
    """Time to wait for navigations to complete."""

    implicit: int = DEFAULT_IMPLICIT_WAIT_TIMEOUT
    """Time to wait when locating elements."""

    @classmethod
    def from_dict(cls, data: Any) -> "TimeoutsConfiguration":
        """
        Deserialize a timeouts object.

        Keys that are absent keep their defaults; unknown keys are ignored.

        Args:
            data: Decoded JSON value of the timeouts capability.

        Returns:
            TimeoutsConfiguration instance.

        Raises:
            WebDriverError: invalid argument if data is not an object or a
                timeout value is out of range.
        """
        if not isinstance(data, dict):
            raise WebDriverError.invalid_argument("Payload is not a JSON object")

        timeouts: dict[str, Any] = {}

        if "script" in data:
            script = data["script"]
            if script is not None:
                script = _as_timeout(script)
                if script is None:
                    raise WebDriverError.invalid_argument("Invalid script timeout value")
            timeouts["script"] = script

        for key, attr in (("pageLoad", "page_load"), ("implicit", "implicit")):
            if key not in data:
                continue
            timeout = _as_timeout(data[key])
            if timeout is None:
                raise WebDriverError.invalid_argument(f"Invalid {key} timeout value")
            timeouts[attr] = timeout

        return cls(**timeouts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire format embedded in a capability set."""
        return {
            "script": self.script,
            "pageLoad": self.page_load,
            "implicit": self.implicit,
        }


def deserialize_timeouts(value: Any) -> dict[str, Any]:
    """Validate a raw timeouts value and return its normalized form."""
    return TimeoutsConfiguration.from_dict(value).to_dict()
