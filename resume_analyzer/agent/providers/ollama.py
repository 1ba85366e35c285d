import logging
import ollama
from ollama._types import ResponseError as OllamaResponseError

from typing import Any, Dict, List, Optional
from fastapi.concurrency import run_in_threadpool

from ..exceptions import ProviderError
from .base import Provider

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for text generation."""

    def __init__(
        self,
        model_name: str,
        api_base_url: Optional[str] = None,
        opts: Optional[Dict[str, Any]] = None
    ):
        self.opts = opts or {}
        self.model = model_name
        self._client = ollama.Client(host=api_base_url) if api_base_url else ollama.Client()
        self._ensure_model_pulled(model_name)

    def _installed_models(self) -> List[str]:
        return [m.model for m in self._client.list().models]

    def _is_installed(self, model_name: str) -> bool:
        installed = self._installed_models()
        # "llama3" should match "llama3:latest"
        return model_name in installed or any(m.startswith(model_name) for m in installed)

    def _ensure_model_pulled(self, model_name: str) -> None:
        """
        Make sure the model is available locally, pulling it if needed.

        Raises ProviderError if the model is neither installed nor pullable.
        """
        try:
            if self._is_installed(model_name):
                logger.debug(f"Ollama model '{model_name}' already installed")
                return
        except Exception as e:
            logger.warning(f"Failed to list Ollama models: {e}")

        try:
            logger.info(f"Pulling Ollama model '{model_name}'...")
            self._client.pull(model_name)
            logger.info(f"Successfully pulled Ollama model '{model_name}'")
        except Exception as e:
            error_msg = (
                f"Ollama model '{model_name}' is unavailable. "
                f"Please run 'ollama pull {model_name}' and retry. "
                f"Original error: {e}"
            )
            logger.error(error_msg)
            raise ProviderError(error_msg) from e

    def _options(self) -> Dict[str, Any]:
        options = {}
        if self.opts.get("temperature") is not None:
            options["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            options["num_predict"] = self.opts["max_tokens"]
        return options

    def _generate_sync(self, prompt: str) -> str:
        """Generate a response from the model synchronously."""
        try:
            response = self._client.generate(
                prompt=prompt,
                model=self.model,
                options=self._options(),
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
