import logging

from typing import Any, Dict, Optional
from fastapi.concurrency import run_in_threadpool
from google import genai
from google.genai import types

from ..exceptions import ProviderConfigurationError, ProviderError
from .base import Provider

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"


class GeminiProvider(Provider):
    """Google Gemini text generation through the Google Gen AI SDK."""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_GEMINI_MODEL,
        opts: Optional[Dict[str, Any]] = None,
    ):
        if not api_key:
            raise ProviderConfigurationError(
                "Gemini API key is not configured. Set LLM_API_KEY (or GEMINI_API_KEY) in .env"
            )
        self.opts = opts or {}
        self.model = model_name or DEFAULT_GEMINI_MODEL
        self._client = genai.Client(api_key=api_key)

    def _generation_config(self) -> Optional[types.GenerateContentConfig]:
        kwargs = {}
        if self.opts.get("temperature") is not None:
            kwargs["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            kwargs["max_output_tokens"] = self.opts["max_tokens"]
        if not kwargs:
            return None
        return types.GenerateContentConfig(**kwargs)

    def _generate_sync(self, prompt: str) -> str:
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._generation_config(),
            )
        except Exception as e:
            logger.error(f"Gemini generation error: {e}")
            raise ProviderError(f"Gemini - Error generating response: {e}") from e
        if response.text is None:
            raise ProviderError("Gemini returned an empty response")
        return response.text

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"GeminiProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
