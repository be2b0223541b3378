"""
Use Case: Relay Prompt

This use case handles:
1. Validating the caller's prompt
2. Substituting it into the configured template
3. Making exactly one call to the remote generator
"""

import json
from typing import Any

from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.domain.exceptions import UpstreamError, ValidationError
from prompt_relay.domain.template import PromptTemplate
from prompt_relay.infra.config.logging_config import get_logger


def _as_text(prompt: Any) -> str:
    """Strings pass through; other JSON values are sent as their JSON text."""
    if isinstance(prompt, str):
        return prompt
    return json.dumps(prompt, ensure_ascii=False)


class RelayPromptUseCase:
    """
    Use case for forwarding a prompt to the remote generation service.

    Holds no per-request state, so a single instance can serve concurrent
    requests.
    """

    def __init__(self, generator: TextGeneratorPort, template: PromptTemplate):
        self.generator = generator
        self.template = template
        self._log = get_logger("usecase.relay_prompt")

    async def execute(self, prompt: Any) -> str:
        """
        Execute the relay.

        Args:
            prompt: The caller-supplied prompt, exactly as received

        Returns:
            The generated text, unmodified

        Raises:
            ValidationError: If the prompt is missing or empty
            UpstreamError: If templating or the remote call fails
        """
        if not prompt:
            self._log.info("relay.rejected", reason="prompt_missing")
            raise ValidationError("Prompt required")

        prompt_text = _as_text(prompt)
        self._log.info("relay.start", prompt_length=len(prompt_text))

        try:
            text = self.template.render(prompt_text)
        except Exception as e:
            raise UpstreamError(str(e)) from e

        try:
            result = await self.generator.generate(text)
        except UpstreamError as e:
            self._log.warning("relay.failed", error=e.message)
            raise
        except Exception as e:
            self._log.warning("relay.failed", error=str(e))
            raise UpstreamError(str(e)) from e

        self._log.info("relay.completed", text_length=len(result))
        return result
