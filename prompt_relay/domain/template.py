"""Prompt template value object."""

from dataclasses import dataclass

DEFAULT_MARKER = "{prompt}"


@dataclass(frozen=True)
class PromptTemplate:
    """A configured template with a single substitution point."""

    template: str
    marker: str = DEFAULT_MARKER

    def render(self, prompt: str) -> str:
        """Replace the first occurrence of the marker with ``prompt`` verbatim."""
        return self.template.replace(self.marker, prompt, 1)
