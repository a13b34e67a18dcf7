from __future__ import annotations

from typing import Any, Dict, List, Protocol

from stylist.services.llm.types import ChatResult


class LLMProvider(Protocol):
    async def chat(
        self,
        messages: List[Dict[str, Any]],
        *,
        temperature: float,
        json_mode: bool = False,
        timeout_ms: int,
    ) -> ChatResult:
        ...
