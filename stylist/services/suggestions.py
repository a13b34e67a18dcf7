"""Best-effort outfit generation.

Failures reaching the model or parsing its reply never surface to callers;
they observe an empty list instead.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from stylist.core.config import settings
from stylist.core.errors import InvalidInput, SuggestionParseError, TransportError
from stylist.services.directives import build_directive
from stylist.services.llm.providers.base import LLMProvider
from stylist.services.llm.prompts import build_suggestion_prompt
from stylist.services.llm.types import OutfitContext, OutfitSuggestion, WeatherObservation

logger = logging.getLogger("stylist.suggestions")

DEFAULT_COUNT = 4


def extract_json_array(raw: Optional[str]) -> List[Any]:
    """Parse the JSON array spanning the first ``[`` to the last ``]`` of ``raw``.

    Models often wrap the array in prose ("Here you go: [...] Enjoy!") or in a
    JSON object; only the bracketed span is parsed.
    """
    if not raw:
        raise SuggestionParseError("empty reply", raw=raw)
    start = raw.find("[")
    end = raw.rfind("]")
    if start == -1 or end < start:
        raise SuggestionParseError("no JSON array in reply", raw=raw)
    try:
        data = json.loads(raw[start : end + 1])
    except ValueError as exc:
        raise SuggestionParseError(f"invalid JSON array: {exc}", raw=raw) from exc
    if not isinstance(data, list):
        raise SuggestionParseError("bracketed span is not an array", raw=raw)
    return data


def parse_suggestions(raw: Optional[str]) -> List[OutfitSuggestion]:
    items = extract_json_array(raw)
    out: List[OutfitSuggestion] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise SuggestionParseError(f"entry {idx} is not an object", raw=raw)
        try:
            out.append(OutfitSuggestion.model_validate(item))
        except ValidationError as exc:
            # one malformed outfit discards the whole reply
            raise SuggestionParseError(f"entry {idx} is incomplete: {exc.error_count()} errors", raw=raw) from exc
    return out


class OutfitSuggestionGenerator:
    def __init__(
        self,
        provider: LLMProvider,
        *,
        temperature: Optional[float] = None,
        timeout_ms: Optional[int] = None,
    ):
        self.provider = provider
        self.temperature = settings.LLM_SUGGEST_TEMPERATURE if temperature is None else temperature
        self.timeout_ms = timeout_ms or settings.LLM_TIMEOUT_MS

    async def generate(
        self,
        context: OutfitContext,
        weather: Optional[WeatherObservation] = None,
        count: int = DEFAULT_COUNT,
        *,
        directive: Optional[str] = None,
    ) -> List[OutfitSuggestion]:
        """Ask the model for ``count`` outfits; ``[]`` on any model or parse failure.

        ``directive`` lets a caller that already built it with ``build_directive``
        pass it through instead of rebuilding it here.
        """
        if count < 1:
            raise InvalidInput("count must be at least 1.")
        if directive is None:
            directive = build_directive(context, weather, count)
        try:
            res = await self.provider.chat(
                build_suggestion_prompt(directive, count),
                temperature=self.temperature,
                timeout_ms=self.timeout_ms,
            )
        except TransportError as exc:
            logger.warning("suggestions:transport_error category=%s err=%s", context.category, exc)
            return []
        try:
            suggestions = parse_suggestions(res.content)
        except SuggestionParseError as exc:
            logger.warning("suggestions:parse_error reason=%s raw=%r", exc.message, exc.raw)
            return []
        if len(suggestions) != count:
            logger.info("suggestions:count_mismatch requested=%s received=%s", count, len(suggestions))
        logger.info(
            "suggestions:generated category=%s weather=%s count=%s latency_ms=%s",
            context.category,
            weather is not None,
            len(suggestions),
            res.usage.latency_ms,
        )
        return suggestions
