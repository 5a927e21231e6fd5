"""Messaging infrastructure.

Job enqueuing from the API to the ARQ worker queue.
"""

from .arq_pool import close_arq_pool, get_arq_pool

__all__ = [
    "close_arq_pool",
    "get_arq_pool",
]
