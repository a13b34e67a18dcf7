from __future__ import annotations

import datetime as dt
from typing import Dict, Literal, Tuple, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

InspirationCategory = Literal[
    "travel",
    "event",
    "lyrics",
    "movie",
    "anime",
    "sports",
    "culture",
    "season",
    "celebrity",
    "trend",
    "theme",
    "activity",
    "item",
    "weather",
    "generic",
]

INSPIRATION_CATEGORIES: Tuple[str, ...] = get_args(InspirationCategory)
FALLBACK_CATEGORY: InspirationCategory = "generic"
PROMPT_VERSION = "p1"


class LLMUsage(BaseModel):
    model: str = ""
    tokens_in: int = 0
    tokens_out: int = 0
    latency_ms: int = 0
    prompt_version: str = PROMPT_VERSION


class ChatResult(BaseModel):
    content: str = ""
    usage: LLMUsage = Field(default_factory=LLMUsage)


class OutfitContext(BaseModel):
    """Classified style request: one category plus the fields relevant to it."""

    model_config = ConfigDict(populate_by_name=True)

    category: InspirationCategory = FALLBACK_CATEGORY
    fields: Dict[str, str] = Field(default_factory=dict)
    original_query: str = Field("", alias="originalQuery")


class WeatherObservation(BaseModel):
    location: str
    date: dt.date
    temperature_f: float = Field(
        allow_inf_nan=False,
        validation_alias=AliasChoices("temperatureF", "temperature_f", "temperature"),
        serialization_alias="temperatureF",
    )
    description: str = ""


class OutfitSuggestion(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    # older prompts asked the model for "type" rather than "name"
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "type"))
    description: str = Field(min_length=1)
    search_query: str = Field(
        min_length=1,
        validation_alias=AliasChoices("searchQuery", "search_query"),
        serialization_alias="searchQuery",
    )
    image_prompt: str = Field(
        min_length=1,
        validation_alias=AliasChoices("imagePrompt", "image_prompt"),
        serialization_alias="imagePrompt",
    )
