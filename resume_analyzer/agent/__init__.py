from .exceptions import ProviderConfigurationError, ProviderError
from .manager import AgentManager

__all__ = ["AgentManager", "ProviderError", "ProviderConfigurationError"]
