from pydantic import BaseModel, Field
from typing import List, Optional

from stylist.core.config import settings
from stylist.services.llm.types import OutfitContext, OutfitSuggestion, WeatherObservation


def _default_count() -> int:
    return settings.SUGGESTION_COUNT


class ContextIn(BaseModel):
    message: str


class SuggestionsIn(BaseModel):
    context: OutfitContext = Field(default_factory=OutfitContext)
    weather: Optional[WeatherObservation] = None
    count: int = Field(default_factory=_default_count, ge=1, le=8)


class SuggestionsOut(BaseModel):
    directive: str
    suggestions: List[OutfitSuggestion] = Field(default_factory=list)


class LooksIn(BaseModel):
    message: str
    weather: Optional[WeatherObservation] = None
    count: int = Field(default_factory=_default_count, ge=1, le=8)


class LooksOut(SuggestionsOut):
    context: OutfitContext


class ErrorOut(BaseModel):
    detail: str
    error: str
