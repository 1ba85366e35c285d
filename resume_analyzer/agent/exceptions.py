class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class ProviderConfigurationError(ProviderError):
    """Raised when a provider cannot be built from the given LLMConfig.

    Covers unknown provider names, malformed class paths and missing API
    keys. It is still a ProviderError so callers handle it the same way as a
    failed generation call.
    """
