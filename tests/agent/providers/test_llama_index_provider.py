"""
Tests for LlamaIndexProvider using LlamaIndex's own MockLLM as the backend.
"""

import pytest
from unittest.mock import patch
from llama_index.core.llms import MockLLM

from resume_analyzer.agent.exceptions import ProviderConfigurationError, ProviderError
from resume_analyzer.agent.providers.llama_index import LlamaIndexProvider, _get_real_provider

CAPTURED_KWARGS = []


class RecordingLLM(MockLLM):
    """MockLLM that echoes the prompt and records its constructor kwargs."""

    def __init__(self, **kwargs):
        CAPTURED_KWARGS.append(kwargs)
        super().__init__(max_tokens=None)


class FailingLLM(RecordingLLM):
    def complete(self, prompt, formatted=False, **kwargs):
        raise RuntimeError("rate limited")


def _patched(cls):
    return patch(
        'resume_analyzer.agent.providers.llama_index._get_real_provider',
        return_value=(cls, "tests", cls.__name__),
    )


class TestGetRealProvider:
    """Tests for class-path resolution."""

    def test_resolves_class_path(self):
        cls, modname, classname = _get_real_provider("llama_index.core.llms.MockLLM")

        assert cls is MockLLM
        assert modname == "llama_index.core.llms"
        assert classname == "MockLLM"

    @pytest.mark.parametrize("name", ["gpt4", ".MockLLM", "llama_index.core.llms."])
    def test_malformed_path(self, name):
        with pytest.raises(ProviderConfigurationError, match="not correctly formatted"):
            _get_real_provider(name)

    def test_unknown_module(self):
        with pytest.raises(ProviderConfigurationError, match="Cannot load"):
            _get_real_provider("llama_index.llms.does_not_exist.Nope")

    def test_non_string(self):
        with pytest.raises(ProviderConfigurationError):
            _get_real_provider(None)


class TestLlamaIndexProvider:
    """Tests for LlamaIndexProvider."""

    def setup_method(self):
        CAPTURED_KWARGS.clear()

    def test_forwards_allowed_kwargs_only(self):
        with _patched(RecordingLLM):
            LlamaIndexProvider(
                provider="tests.RecordingLLM",
                model_name="claude-sonnet-4-5",
                api_key="sk-test",
                api_base_url="https://llm.example",
                opts={"temperature": 0.3, "max_tokens": 1000, "top_k": 5},
            )

        assert CAPTURED_KWARGS == [{
            "model": "claude-sonnet-4-5",
            "api_key": "sk-test",
            "base_url": "https://llm.example",
            "temperature": 0.3,
            "max_tokens": 1000,
        }]

    @pytest.mark.asyncio
    async def test_complete_returns_text(self):
        with _patched(RecordingLLM):
            provider = LlamaIndexProvider(provider="tests.RecordingLLM", model_name="m")

        # MockLLM without max_tokens echoes the prompt
        assert await provider("tailor my bullets") == "tailor my bullets"

    @pytest.mark.asyncio
    async def test_completion_failure_is_wrapped(self):
        with _patched(FailingLLM):
            provider = LlamaIndexProvider(provider="tests.FailingLLM", model_name="m")

        with pytest.raises(ProviderError, match="rate limited"):
            await provider("prompt")

    def test_rejects_non_llm_class(self):
        with _patched(dict):
            with pytest.raises(ProviderConfigurationError, match="BaseLLM"):
                LlamaIndexProvider(provider="builtins.dict", model_name="m")

    def test_requires_provider_string(self):
        with pytest.raises(ProviderConfigurationError, match="required"):
            LlamaIndexProvider(provider="", model_name="m")
