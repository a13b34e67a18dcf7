from __future__ import annotations

from stylist.core.config import Settings, settings as default_settings
from stylist.core.errors import ConfigurationError
from stylist.services.llm.providers.base import LLMProvider
from stylist.services.llm.providers.openai import OpenAIProvider


def build_provider(settings: Settings | None = None) -> LLMProvider:
    cfg = settings or default_settings
    if not cfg.OPENAI_API_KEY:
        raise ConfigurationError("OPENAI_API_KEY is not configured.")
    return OpenAIProvider(
        cfg.LLM_MODEL,
        api_key=cfg.OPENAI_API_KEY,
        base_url=cfg.OPENAI_BASE_URL,
        max_output_tokens=cfg.LLM_MAX_OUTPUT_TOKENS,
    )


__all__ = ["LLMProvider", "OpenAIProvider", "build_provider"]
