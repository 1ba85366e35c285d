"""
LlamaIndex Provider Integration

Lets LLM_PROVIDER name any LlamaIndex LLM class by its fully-qualified path,
for example:

    llama_index.llms.anthropic.Anthropic
    llama_index.llms.openai_like.OpenAILike

Only ``model``, ``api_key``, ``base_url``, ``temperature`` and ``max_tokens``
are forwarded to the constructor. Integrations that still expect
``model_name`` are retried with that keyword instead.
"""

import logging

from importlib import import_module
from typing import Any, Dict, Optional, Tuple
from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ProviderConfigurationError, ProviderError
from .base import Provider

logger = logging.getLogger(__name__)


def _get_real_provider(provider_name: str) -> Tuple[type, str, str]:
    # Expects e.g. llama_index.llms.openai_like.OpenAILike
    if not isinstance(provider_name, str):
        raise ProviderConfigurationError("provider_name must be a string denoting a fully-qualified Python class name")
    dotpos = provider_name.rfind('.')
    if dotpos <= 0 or dotpos == len(provider_name) - 1:
        raise ProviderConfigurationError(f"provider_name not correctly formatted: {provider_name!r}")
    classname = provider_name[dotpos+1:]
    modname = provider_name[:dotpos]
    try:
        rm = import_module(modname)
        return getattr(rm, classname), modname, classname
    except (ImportError, AttributeError) as e:
        raise ProviderConfigurationError(f"Cannot load LLM provider class '{provider_name}': {e}") from e


class LlamaIndexProvider(Provider):
    def __init__(self,
                 provider: str,
                 model_name: str,
                 api_key: Optional[str] = None,
                 api_base_url: Optional[str] = None,
                 opts: Optional[Dict[str, Any]] = None):
        if not provider:
            raise ProviderConfigurationError("Provider string is required")
        self.opts = opts or {}
        self._model = model_name
        self._provider = provider
        provider_obj, self._modname, self._classname = _get_real_provider(provider)
        if not isinstance(provider_obj, type) or not issubclass(provider_obj, BaseLLM):
            raise ProviderConfigurationError(
                "LLM provider must be e.g. a llama_index.llms.* class - "
                "a subclass of llama_index.core.base.llms.base.BaseLLM"
            )

        kwargs_for_provider = {
            'model': model_name,
            'api_key': api_key,
        }
        if api_base_url:
            kwargs_for_provider['base_url'] = api_base_url
        if self.opts.get('temperature') is not None:
            kwargs_for_provider['temperature'] = self.opts['temperature']
        if self.opts.get('max_tokens') is not None:
            kwargs_for_provider['max_tokens'] = self.opts['max_tokens']
        try:
            self._client = provider_obj(**kwargs_for_provider)
        except TypeError as e:
            if 'model' in str(e) or 'unexpected keyword argument' in str(e):
                legacy_kwargs = {**kwargs_for_provider}
                legacy_kwargs.pop('model', None)
                legacy_kwargs['model_name'] = model_name
                self._client = provider_obj(**legacy_kwargs)
            else:
                raise

    def _generate_sync(self, prompt: str) -> str:
        try:
            cr = self._client.complete(prompt)
            return cr.text
        except Exception as e:
            logger.error(f"llama_index sync error: {e}")
            raise ProviderError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
