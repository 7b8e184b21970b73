"""WebDriver capability negotiation for new session requests."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

import orjson

from webdriver_caps.capabilities.extensions import ExtensionRegistry
from webdriver_caps.capabilities.validation import CapabilitySet, validate_capabilities
from webdriver_caps.protocol.errors import WebDriverError

if TYPE_CHECKING:
    from webdriver_caps.config import NegotiationConfig

logger = logging.getLogger(__name__)

# Decides whether a merged capability set can be satisfied by the browser
CapabilityMatcher = Callable[[CapabilitySet], bool]


def match_any(capabilities: CapabilitySet) -> bool:
    """Matcher that accepts every candidate."""
    return True


def merge_capabilities(
    primary: CapabilitySet,
    secondary: CapabilitySet | None = None,
) -> CapabilitySet:
    """
    Merge a first-match entry into the always-match baseline.

    A key present in both sets is an error even if the values agree.

    Args:
        primary: Validated always-match capabilities.
        secondary: Validated first-match capabilities, if any.

    Returns:
        New CapabilitySet holding deep copies of both, so merged sets
        never share nested values with each other or with their inputs.

    Raises:
        WebDriverError: invalid argument naming the first shared key.
    """
    result = copy.deepcopy(primary)

    if secondary is None:
        return result

    for name, value in secondary.items():
        if name in primary:
            raise WebDriverError.merge_conflict(name)
        result[name] = copy.deepcopy(value)

    return result


@dataclass
class NegotiationResult:
    """
    Result of successful capability negotiation.

    Holds the selected capability set along with the intermediate
    values it was chosen from.
    """

    capabilities: CapabilitySet
    """Capabilities the session should be created with."""

    always_match: CapabilitySet = field(default_factory=dict)
    """Validated always-match baseline."""

    candidates: list[CapabilitySet] = field(default_factory=list)
    """Merged capability sets, in first-match order."""

    selected: int = 0
    """Index of the selected candidate."""

    def __str__(self) -> str:
        return (
            f"NegotiationResult(selected={self.selected}/{len(self.candidates)}, "
            f"capabilities={sorted(self.capabilities)})"
        )


class CapabilityNegotiator:
    """
    Processes the capabilities of a new session request.

    Validates the always-match and first-match declarations, merges
    each first-match entry with the baseline, and selects the first
    merged set the matcher accepts. Holds no per-request state, so one
    instance can serve any number of requests.
    """

    def __init__(
        self,
        extensions: ExtensionRegistry | None = None,
        matcher: CapabilityMatcher | None = None,
    ):
        """
        Initialize the negotiator.

        Args:
            extensions: Validators for non-built-in capabilities (defaults to none).
            matcher: Predicate selecting among merged candidates (defaults to accepting all).
        """
        self.extensions = extensions if extensions is not None else ExtensionRegistry()
        self.matcher = matcher or match_any

    @classmethod
    def from_config(
        cls,
        config: "NegotiationConfig",
        matcher: CapabilityMatcher | None = None,
    ) -> "CapabilityNegotiator":
        """Create a negotiator whose extensions come from configuration."""
        return cls(extensions=config.build_registry(), matcher=matcher)

    def negotiate(self, parameters: Any) -> NegotiationResult:
        """
        Negotiate capabilities for a new session.

        Args:
            parameters: Decoded new session request body, shaped as
                ``{"capabilities": {"alwaysMatch": {...}, "firstMatch": [...]}}``.

        Returns:
            NegotiationResult with the selected capabilities.

        Raises:
            WebDriverError: On the first malformed, invalid or conflicting
                input, or if no candidate matches.
        """
        try:
            return self._negotiate(parameters)
        except WebDriverError as e:
            logger.debug(f"Capability negotiation failed: {e}")
            raise

    def _negotiate(self, parameters: Any) -> NegotiationResult:
        if not isinstance(parameters, dict):
            raise WebDriverError.invalid_argument("Session parameters is not an object")

        capabilities_request = parameters.get("capabilities")
        if not isinstance(capabilities_request, dict):
            raise WebDriverError.invalid_argument("Capabilities is not an object")

        # Baseline
        required: CapabilitySet = {}
        if "alwaysMatch" in capabilities_request:
            required = validate_capabilities(
                capabilities_request["alwaysMatch"], self.extensions
            )

        # Alternatives
        if "firstMatch" in capabilities_request:
            all_first_match = capabilities_request["firstMatch"]
            if not isinstance(all_first_match, list) or not all_first_match:
                raise WebDriverError.invalid_argument(
                    "Capability firstMatch must be an array with at least one entry"
                )
        else:
            all_first_match = [{}]

        logger.debug(f"Processing {len(all_first_match)} firstMatch entries")

        validated_first_match = [
            validate_capabilities(first_match, self.extensions)
            for first_match in all_first_match
        ]

        candidates = [
            merge_capabilities(required, first_match)
            for first_match in validated_first_match
        ]

        for index, candidate in enumerate(candidates):
            if self.matcher(candidate):
                logger.debug(f"Selected candidate {index} of {len(candidates)}")
                logger.info(f"Negotiated capabilities: {list(candidate)}")
                return NegotiationResult(
                    capabilities=candidate,
                    always_match=required,
                    candidates=candidates,
                    selected=index,
                )

        raise WebDriverError.no_matching_capabilities()

    def negotiate_json(self, body: str | bytes) -> NegotiationResult:
        """
        Decode a JSON request body and negotiate it.

        Raises:
            WebDriverError: invalid argument if body is not valid JSON,
                otherwise as for negotiate().
        """
        try:
            parameters = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise WebDriverError.invalid_argument(f"Invalid JSON body: {e}") from e
        return self.negotiate(parameters)


def negotiate_capabilities(
    parameters: Any,
    extensions: ExtensionRegistry | None = None,
    matcher: CapabilityMatcher | None = None,
) -> CapabilitySet:
    """
    Convenience function for capability negotiation.

    Args:
        parameters: Decoded new session request body.
        extensions: Validators for non-built-in capabilities.
        matcher: Predicate selecting among merged candidates.

    Returns:
        The selected capability set.
    """
    negotiator = CapabilityNegotiator(extensions=extensions, matcher=matcher)
    return negotiator.negotiate(parameters).capabilities


def negotiate_json(
    body: str | bytes,
    extensions: ExtensionRegistry | None = None,
    matcher: CapabilityMatcher | None = None,
) -> CapabilitySet:
    """Decode a JSON request body and return the selected capability set."""
    negotiator = CapabilityNegotiator(extensions=extensions, matcher=matcher)
    return negotiator.negotiate_json(body).capabilities
