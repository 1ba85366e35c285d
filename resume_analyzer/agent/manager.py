from typing import Any

from ..core import LLMConfig
from .providers.base import Provider


class AgentManager:
    """
    Builds the configured provider and runs prompts through it.

    Providers are imported lazily so that only the SDK for the selected
    backend has to be importable.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config
        self.model = config.model
        self.model_provider = (config.provider or "").strip()

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # Not every backend honours every option; each provider makes a best effort.
        opts = {
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }
        opts.update(kwargs)
        match self.model_provider.lower():
            case 'gemini':
                from .providers.gemini import GeminiProvider
                return GeminiProvider(api_key=self.config.api_key,
                                      model_name=self.model,
                                      opts=opts)
            case 'ollama':
                from .providers.ollama import OllamaProvider
                return OllamaProvider(model_name=self.model,
                                      api_base_url=self.config.base_url,
                                      opts=opts)
            case _:
                from .providers.llama_index import LlamaIndexProvider
                return LlamaIndexProvider(provider=self.model_provider,
                                          model_name=self.model,
                                          api_key=self.config.api_key,
                                          api_base_url=self.config.base_url,
                                          opts=opts)

    async def run(self, prompt: str, **kwargs: Any) -> str:
        """
        Run the prompt through the configured provider and return its raw text.
        """
        provider = await self._get_provider(**kwargs)
        return await provider(prompt)
