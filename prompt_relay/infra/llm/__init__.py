"""LLM generator implementations."""

from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.infra.config.settings import Settings

from .mock_client import MockTextGenerator


def build_generator(settings: Settings) -> TextGeneratorPort:
    """Create the generator selected by ``LLM_PROVIDER``."""
    if settings.llm_provider == "mock":
        return MockTextGenerator()

    from .gemini_client import GeminiTextGenerator

    return GeminiTextGenerator(
        model_name=settings.gemini_model, api_key=settings.google_api_key or None
    )


__all__ = ["MockTextGenerator", "build_generator"]
