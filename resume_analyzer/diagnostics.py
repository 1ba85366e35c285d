"""
Configuration diagnostics.

Prints the effective LLM configuration and checks that the suggestion
provider can be routed. Run with:

    resume-analyzer-inspect
"""

import sys
from typing import List, Optional

from .core import Settings, settings

KNOWN_PROVIDERS = ("gemini", "ollama")


def _mask(secret: Optional[str]) -> str:
    if not secret:
        return "❌ NOT SET"
    return f"✅ Set (...{secret[-4:]})" if len(secret) > 8 else "✅ Set"


def check_settings(app_settings: Settings) -> tuple[List[str], List[str]]:
    """Return (errors, warnings) for the given settings."""
    errors: List[str] = []
    warnings: List[str] = []

    provider = (app_settings.LLM_PROVIDER or "").strip()
    if not provider:
        errors.append("LLM_PROVIDER is empty")
    elif provider.lower() not in KNOWN_PROVIDERS and "." not in provider:
        errors.append(
            f"LLM_PROVIDER '{provider}' is neither 'gemini', 'ollama' nor a "
            "fully-qualified LlamaIndex class path"
        )

    if provider.lower() != "ollama" and not app_settings.LLM_API_KEY:
        if "." in provider:
            # Local LlamaIndex backends may not need a key
            warnings.append(f"LLM_API_KEY is not set; '{provider}' must not require one")
        else:
            errors.append("LLM_API_KEY (or GEMINI_API_KEY) must be set for this provider")

    if not app_settings.LL_MODEL:
        errors.append("LL_MODEL is empty")

    if app_settings.PROMPT_TEXT_LIMIT <= 0:
        warnings.append(f"PROMPT_TEXT_LIMIT={app_settings.PROMPT_TEXT_LIMIT} sends no resume text to the model")
    if app_settings.MISSING_KEYWORDS_LIMIT <= 0:
        warnings.append(f"MISSING_KEYWORDS_LIMIT={app_settings.MISSING_KEYWORDS_LIMIT} hides every missing keyword")

    return errors, warnings


def main(app_settings: Optional[Settings] = None) -> int:
    app_settings = app_settings or settings

    print("=" * 60)
    print(f"{app_settings.PROJECT_NAME} Diagnostics")
    print("=" * 60)

    print("\n🌐 Server:")
    print(f"  HOST:              {app_settings.HOST}")
    print(f"  PORT:              {app_settings.PORT}")
    print(f"  ALLOW_ORIGINS:     {app_settings.ALLOW_ORIGINS}")
    print(f"  LOG_LEVEL:         {app_settings.LOG_LEVEL}")

    print("\n🤖 LLM Configuration:")
    print(f"  LLM_PROVIDER:      {app_settings.LLM_PROVIDER}")
    print(f"  LL_MODEL:          {app_settings.LL_MODEL}")
    print(f"  LLM_BASE_URL:      {app_settings.LLM_BASE_URL or '(not set)'}")
    print(f"  LLM_TEMPERATURE:   {app_settings.LLM_TEMPERATURE}")
    print(f"  LLM_MAX_TOKENS:    {app_settings.LLM_MAX_TOKENS}")
    print(f"  LLM_API_KEY:       {_mask(app_settings.LLM_API_KEY)}")

    print("\n📊 Analysis:")
    print(f"  PROMPT_TEXT_LIMIT:      {app_settings.PROMPT_TEXT_LIMIT}")
    print(f"  MISSING_KEYWORDS_LIMIT: {app_settings.MISSING_KEYWORDS_LIMIT}")

    errors, warnings = check_settings(app_settings)

    print("\n" + "=" * 60)
    if errors:
        print("❌ ERRORS FOUND:")
        for err in errors:
            print(f"   • {err}")
        print("\nFix these issues before running the application.")
        return 1
    if warnings:
        print("⚠️  WARNINGS (non-critical):")
        for warn in warnings:
            print(f"   • {warn}")
        return 0
    print("✅ ALL CHECKS PASSED")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
