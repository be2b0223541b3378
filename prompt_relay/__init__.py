"""Prompt relay: forwards templated prompts to a Gemini model over HTTP."""

__version__ = "0.1.0"
