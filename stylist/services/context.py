"""Classify a free-text style request into an ``OutfitContext``."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from stylist.core.config import settings
from stylist.core.errors import ContextParseError, InvalidInput
from stylist.services.llm.providers.base import LLMProvider
from stylist.services.llm.prompts import build_extraction_prompt
from stylist.services.llm.types import FALLBACK_CATEGORY, INSPIRATION_CATEGORIES, OutfitContext

logger = logging.getLogger("stylist.context")

PARSE_FAILURE_MESSAGE = "Could not understand your request. Please add more specific details and try again."
EMPTY_MESSAGE = "Please provide a non-empty prompt."

_CATEGORY_KEYS = ("category", "type")

_POLITE_PREFIX = re.compile(
    r"^(?:please\s+)?"
    r"(?:i\s+(?:really\s+)?(?:want|wanna|need)(?:\s+to)?"
    r"|i(?:['’]d|\s+would)\s+(?:really\s+)?(?:like|love)(?:\s+to)?"
    r"|(?:can|could|would)\s+you(?:\s+please)?"
    r"|help\s+me(?:\s+to)?"
    r"|show\s+me"
    r"|give\s+me"
    r"|please)"
    r"\b[\s,:]*",
    re.IGNORECASE,
)


def normalize_message(message: str) -> str:
    """Drop one leading polite-intent phrase ("I want to", "Could you", ...).

    Falls back to the trimmed message when nothing substantive would remain.
    """
    stripped = message.strip()
    normalized = _POLITE_PREFIX.sub("", stripped, count=1).strip()
    return normalized or stripped


def _coerce_field(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_context_reply(raw: str, original_query: str) -> OutfitContext:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("context:parse_error raw=%r", raw)
        raise ContextParseError(PARSE_FAILURE_MESSAGE, raw=raw) from exc
    if not isinstance(data, dict):
        logger.warning("context:not_an_object raw=%r", raw)
        raise ContextParseError(PARSE_FAILURE_MESSAGE, raw=raw)

    tag = next((data[k] for k in _CATEGORY_KEYS if isinstance(data.get(k), str) and data[k].strip()), None)
    if tag is None:
        logger.warning("context:missing_category raw=%r", raw)
        raise ContextParseError(PARSE_FAILURE_MESSAGE, raw=raw)

    category = tag.strip().lower()
    if category not in INSPIRATION_CATEGORIES or category == FALLBACK_CATEGORY:
        if category != FALLBACK_CATEGORY:
            logger.info("context:unknown_category tag=%s fallback=%s", category, FALLBACK_CATEGORY)
        return OutfitContext(category=FALLBACK_CATEGORY, original_query=original_query)

    fields: Dict[str, str] = {}
    for key, value in data.items():
        if key in _CATEGORY_KEYS:
            continue
        coerced = _coerce_field(value)
        if coerced is not None:
            fields[key] = coerced
    return OutfitContext(category=category, fields=fields, original_query=original_query)


class PromptContextExtractor:
    def __init__(
        self,
        provider: LLMProvider,
        *,
        temperature: Optional[float] = None,
        timeout_ms: Optional[int] = None,
    ):
        self.provider = provider
        self.temperature = settings.LLM_EXTRACT_TEMPERATURE if temperature is None else temperature
        self.timeout_ms = timeout_ms or settings.LLM_TIMEOUT_MS

    async def extract(self, message: str) -> OutfitContext:
        if not isinstance(message, str) or not message.strip():
            raise InvalidInput(EMPTY_MESSAGE)
        normalized = normalize_message(message)
        res = await self.provider.chat(
            build_extraction_prompt(normalized),
            temperature=self.temperature,
            json_mode=True,
            timeout_ms=self.timeout_ms,
        )
        context = parse_context_reply(res.content, message)
        logger.info(
            "context:extracted category=%s fields=%s latency_ms=%s",
            context.category,
            sorted(context.fields),
            res.usage.latency_ms,
        )
        return context
