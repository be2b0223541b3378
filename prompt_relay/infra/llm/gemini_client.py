"""
Gemini text generator built on LangChain.

This client provides only the single-turn invoke the relay needs. Prompt
construction belongs to the use case layer.
"""

from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.domain.exceptions import UpstreamError
from prompt_relay.infra.config.logging_config import get_logger


class GeminiTextGenerator(TextGeneratorPort):
    """
    Infrastructure-layer generator backed by Google's Gemini models.

    One instance is created at startup and shared across requests. The chat
    model itself is built on first use so that a missing or invalid key
    fails the request that needs it rather than process startup.
    """

    def __init__(
        self,
        model_name: str = "gemini-2.0-flash",
        api_key: Optional[str] = None,
        **kwargs,
    ):
        self.model_name = model_name
        self._llm_kwargs: Dict[str, Any] = {
            "model": model_name,
            "max_retries": 0,
            **kwargs,
        }
        if api_key:
            self._llm_kwargs["google_api_key"] = api_key

        self._llm: Optional[ChatGoogleGenerativeAI] = None
        self._text_parser = StrOutputParser()
        self._log = get_logger("infra.llm")

    @property
    def llm(self) -> ChatGoogleGenerativeAI:
        if self._llm is None:
            self._llm = ChatGoogleGenerativeAI(**self._llm_kwargs)
            self._log.info("llm.client.created", model=self.model_name)
        return self._llm

    async def generate(self, text: str) -> str:
        """
        Send ``text`` as a single user message and return the reply text.

        Raises:
            UpstreamError: wrapping any SDK or transport failure
        """
        try:
            response = await self.llm.ainvoke([HumanMessage(content=text)])
            result = self._text_parser.invoke(response)
        except Exception as e:
            self._log.error("llm.invoke.failed", model=self.model_name, error=str(e))
            raise UpstreamError(str(e)) from e

        self._log.info("llm.invoke.text", model=self.model_name)
        return result

    def get_model_info(self) -> dict:
        """Get information about the current LLM configuration."""
        return {"model_name": self.model_name, "provider": "gemini"}
