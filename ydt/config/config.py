"""Configuration classes for ydt."""

from dataclasses import dataclass


@dataclass(frozen=True)
class YdtConfig:
    """Immutable configuration for dictionary lookups.

    Frozen so that one instance can be shared between concurrent lookups.
    """

    # Endpoint settings
    result_url: str = "https://www.youdao.com/result"
    target_lang: str = "en"

    # Network settings
    request_timeout: float = 10.0  # Seconds, applied to each attempt

    # Client identities
    project_user_agent: str = "ydt"
    browser_user_agent: str = "Mozilla/5.0"

    # Statuses that trigger one retry under the browser identity
    fallback_statuses: frozenset[int] = frozenset({403, 429})

    def __post_init__(self):
        """Normalize fallback statuses to a frozenset."""
        if not isinstance(self.fallback_statuses, frozenset):
            object.__setattr__(self, "fallback_statuses", frozenset(self.fallback_statuses))
