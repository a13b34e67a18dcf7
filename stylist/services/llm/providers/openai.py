from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from stylist.core.errors import TransportError
from stylist.services.llm.types import PROMPT_VERSION, ChatResult, LLMUsage

logger = logging.getLogger("stylist.llm")

class OpenAIProvider:
    name = "openai"

    def __init__(
        self,
        model: str,
        *,
        client: Optional[Any] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        max_output_tokens: Optional[int] = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.max_output_tokens = max_output_tokens

    async def chat(
        self,
        messages: List[Dict[str, Any]],
        *,
        temperature: float,
        json_mode: bool = False,
        timeout_ms: int,
    ) -> ChatResult:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if self.max_output_tokens:
            kwargs["max_tokens"] = self.max_output_tokens

        start = time.perf_counter()
        logger.info("llm:openai request model=%s json=%s timeout_ms=%s", self.model, json_mode, timeout_ms)
        try:
            resp = await asyncio.wait_for(
                self.client.chat.completions.create(**kwargs),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("llm:openai timeout model=%s timeout_ms=%s", self.model, timeout_ms)
            raise TransportError("The style assistant took too long to respond.") from exc
        except OpenAIError as exc:
            logger.warning("llm:openai error model=%s err=%s", self.model, exc)
            raise TransportError("The style assistant is unavailable right now.") from exc
        latency_ms = int((time.perf_counter() - start) * 1000)
        content = (resp.choices[0].message.content if resp.choices else None) or ""
        logger.info("llm:openai response model=%s latency_ms=%s chars=%s", self.model, latency_ms, len(content))
        return ChatResult(
            content=content,
            usage=LLMUsage(
                model=self.model,
                tokens_in=getattr(resp.usage, "prompt_tokens", 0) if resp.usage else 0,
                tokens_out=getattr(resp.usage, "completion_tokens", 0) if resp.usage else 0,
                latency_ms=latency_ms,
                prompt_version=PROMPT_VERSION,
            ),
        )
