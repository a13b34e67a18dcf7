from typing import Any, Dict, List

import pytest

from stylist.deps import get_provider
from stylist.main import app
from stylist.services.llm.types import ChatResult, LLMUsage


class ScriptedProvider:
    """Returns canned replies in order; exceptions in the script are raised."""

    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    async def chat(self, messages, *, temperature, json_mode=False, timeout_ms):
        self.calls.append(
            {"messages": messages, "temperature": temperature, "json_mode": json_mode, "timeout_ms": timeout_ms}
        )
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return ChatResult(content=reply, usage=LLMUsage(model="scripted"))


@pytest.fixture
def scripted():
    return ScriptedProvider


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.pop(get_provider, None)
