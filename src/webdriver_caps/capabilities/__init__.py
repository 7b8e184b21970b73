"""
WebDriver Capability Processing.

Validates capability declarations from a new session request and
merges them into the capability set a session is created with.
"""

from webdriver_caps.capabilities.names import (
    CapabilityName,
    PageLoadStrategy,
    PromptBehavior,
    PAGE_LOAD_STRATEGIES,
    PROMPT_BEHAVIORS,
)
from webdriver_caps.capabilities.timeouts import (
    TimeoutsConfiguration,
    deserialize_timeouts,
)
from webdriver_caps.capabilities.extensions import (
    ExtensionRegistry,
    ExtensionValidator,
    passthrough,
)
from webdriver_caps.capabilities.fields import (
    FIELD_VALIDATORS,
    validate_capability,
)
from webdriver_caps.capabilities.validation import (
    CapabilitySet,
    validate_capabilities,
)
from webdriver_caps.capabilities.negotiation import (
    CapabilityMatcher,
    CapabilityNegotiator,
    NegotiationResult,
    match_any,
    merge_capabilities,
    negotiate_capabilities,
    negotiate_json,
)

__all__ = [
    # Names
    "CapabilityName",
    "PageLoadStrategy",
    "PromptBehavior",
    "PAGE_LOAD_STRATEGIES",
    "PROMPT_BEHAVIORS",
    # Timeouts
    "TimeoutsConfiguration",
    "deserialize_timeouts",
    # Extensions
    "ExtensionRegistry",
    "ExtensionValidator",
    "passthrough",
    # Validation
    "FIELD_VALIDATORS",
    "validate_capability",
    "CapabilitySet",
    "validate_capabilities",
    # Negotiation
    "CapabilityMatcher",
    "CapabilityNegotiator",
    "NegotiationResult",
    "match_any",
    "merge_capabilities",
    "negotiate_capabilities",
    "negotiate_json",
]
