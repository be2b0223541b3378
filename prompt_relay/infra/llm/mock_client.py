"""
Mock text generator for local development without a Gemini key.
"""

from prompt_relay.application.ports import TextGeneratorPort


class MockTextGenerator(TextGeneratorPort):
    """Returns a fixed reply and records what it was asked."""

    def __init__(self, reply: str = "64") -> None:
        self.reply = reply
        self.model_name = "mock"
        self.calls: list[str] = []

    async def generate(self, text: str) -> str:
        self.calls.append(text)
        return self.reply

    def get_model_info(self) -> dict:
        return {"model_name": self.model_name, "provider": "mock"}
