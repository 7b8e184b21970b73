"""Built-in capability names and keyword tables."""

from enum import Enum


class CapabilityName(Enum):
    """Capability names every remote end recognizes."""

    ACCEPT_INSECURE_CERTS = "acceptInsecureCerts"
    BROWSER_NAME = "browserName"
    BROWSER_VERSION = "browserVersion"
    PLATFORM_NAME = "platformName"
    PAGE_LOAD_STRATEGY = "pageLoadStrategy"
    STRICT_FILE_INTERACTABILITY = "strictFileInteractability"
    TIMEOUTS = "timeouts"
    UNHANDLED_PROMPT_BEHAVIOR = "unhandledPromptBehavior"

    @classmethod
    def lookup(cls, name: str) -> "CapabilityName | None":
        """Return the member for a wire name, or None if it is not built in."""
        try:
            return cls(name)
        except ValueError:
            return None


class PageLoadStrategy(Enum):
    """Keywords accepted by the pageLoadStrategy capability."""

    NONE = "none"
    EAGER = "eager"
    NORMAL = "normal"


class PromptBehavior(Enum):
    """Keywords accepted by the unhandledPromptBehavior capability."""

    DISMISS = "dismiss"
    ACCEPT = "accept"
    DISMISS_AND_NOTIFY = "dismiss and notify"
    ACCEPT_AND_NOTIFY = "accept and notify"
    IGNORE = "ignore"


PAGE_LOAD_STRATEGIES = frozenset(s.value for s in PageLoadStrategy)
PROMPT_BEHAVIORS = frozenset(b.value for b in PromptBehavior)
