"""Redis client for infrastructure layer.

Public API (Package Level):
- RedisClient: Key/value client with TTL support and OperationResult returns
"""

from infrastructure.clients.redis.client import RedisClient

__all__ = [
    "RedisClient",
]
