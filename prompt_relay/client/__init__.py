from .allocator import (
    AllocationClient,
    AllocationError,
    malloc_ai,
    malloc_ai_verbose,
    parse_size,
)

__all__ = [
    "AllocationClient",
    "AllocationError",
    "malloc_ai",
    "malloc_ai_verbose",
    "parse_size",
]
