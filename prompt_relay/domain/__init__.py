from .exceptions import RelayError, UpstreamError, ValidationError
from .template import PromptTemplate

__all__ = ["PromptTemplate", "RelayError", "UpstreamError", "ValidationError"]
