"""Fake generator implementations for testing."""

from typing import List, Optional

from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.domain.exceptions import UpstreamError


class FakeTextGenerator(TextGeneratorPort):
    """In-memory generator that records every text it receives."""

    def __init__(self, reply: str = "16", error: Optional[str] = None) -> None:
        self.reply = reply
        self.error = error
        self.model_name = "fake-model"
        self.calls: List[str] = []

    async def generate(self, text: str) -> str:
        self.calls.append(text)
        if self.error is not None:
            raise UpstreamError(self.error)
        return self.reply


class ExplodingTextGenerator(TextGeneratorPort):
    """Generator that fails with a non-relay exception, like a raw SDK error."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.calls: List[str] = []

    async def generate(self, text: str) -> str:
        self.calls.append(text)
        raise RuntimeError(self.message)
