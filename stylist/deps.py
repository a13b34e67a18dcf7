from functools import lru_cache

from fastapi import Depends

from stylist.core.config import settings
from stylist.services.context import PromptContextExtractor
from stylist.services.llm import LLMProvider, build_provider
from stylist.services.suggestions import OutfitSuggestionGenerator


@lru_cache
def get_provider() -> LLMProvider:
    return build_provider(settings)


def get_extractor(provider: LLMProvider = Depends(get_provider)) -> PromptContextExtractor:
    return PromptContextExtractor(provider)


def get_generator(provider: LLMProvider = Depends(get_provider)) -> OutfitSuggestionGenerator:
    return OutfitSuggestionGenerator(provider)
