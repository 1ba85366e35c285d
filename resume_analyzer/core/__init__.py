from .config import LLMConfig, Settings, settings
from .logging import setup_logging

__all__ = ["LLMConfig", "Settings", "settings", "setup_logging"]
