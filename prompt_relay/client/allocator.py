"""
Client for the relay that turns a model reply into a buffer.

Asks the relay how many bytes a prompt deserves, expects the reply text to
be a byte count, and hands back a zero-filled ``bytearray`` of that size.
Replies such as "undefined", "infinite" or "NaN", and sizes that are not
positive, raise ``AllocationError``.
"""

import re
from typing import Optional

import httpx

from prompt_relay.infra.config.logging_config import get_logger

DEFAULT_BASE_URL = "http://127.0.0.1:3000"
REJECTED_REPLIES = ("undefined", "infinite", "NaN")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_LINE_BREAK = re.compile(r"[\r\n]")


class AllocationError(Exception):
    """Raised when the relay's reply cannot be turned into a buffer."""

    def __init__(self, message: str, reply: Optional[str] = None) -> None:
        super().__init__(message)
        self.reply = reply


def parse_size(reply: str) -> int:
    """Read the byte count from a reply the way C's ``atoi`` would.

    Only the text before the first CR or LF counts. Leading whitespace and
    a sign are allowed; parsing stops at the first non-digit, and a reply
    with no leading digits is 0.
    """
    line = _LINE_BREAK.split(reply, 1)[0]
    if any(word in line for word in REJECTED_REPLIES):
        raise AllocationError(
            "cannot allocate memory for that (you think this is a data center?)",
            reply=line,
        )

    match = _LEADING_INT.match(line)
    size = int(match.group(1)) if match else 0
    if size <= 0:
        raise AllocationError(f'invalid size "{line}"', reply=line)
    return size


class AllocationClient:
    """Synchronous client for ``POST /ai``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        verbose: bool = False,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url
        self.verbose = verbose
        self._client = http_client or httpx.Client(base_url=base_url, timeout=None)
        self._log = get_logger("client.allocator")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AllocationClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request_text(self, prompt: str) -> str:
        """Send the prompt to the relay and return the raw ``text`` field."""
        try:
            response = self._client.post("/ai", json={"prompt": prompt})
        except httpx.HTTPError as e:
            raise AllocationError(f"relay unreachable: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error:
            message = body.get("error") or f"relay returned {response.status_code}"
            raise AllocationError(message)

        text = body.get("text")
        if not isinstance(text, str):
            raise AllocationError("relay reply has no text field")
        return text

    def request_size(self, prompt: str) -> int:
        """Ask the relay for a byte count for ``prompt``."""
        return parse_size(self.request_text(prompt))

    def allocate(self, prompt: str) -> bytearray:
        """Return a zero-filled buffer sized by the model's answer."""
        size = self.request_size(prompt)
        if self.verbose:
            self._log.info("allocation.chosen", size=size, prompt=prompt)
        try:
            return bytearray(size)
        except (OverflowError, MemoryError) as e:
            raise AllocationError(
                f"cannot allocate {size} bytes", reply=str(size)
            ) from e


def malloc_ai_verbose(
    prompt: str, verbose: bool = False, base_url: str = DEFAULT_BASE_URL
) -> bytearray:
    with AllocationClient(base_url=base_url, verbose=verbose) as client:
        return client.allocate(prompt)


def malloc_ai(prompt: str, base_url: str = DEFAULT_BASE_URL) -> bytearray:
    return malloc_ai_verbose(prompt, verbose=False, base_url=base_url)
