"""Redis local store implementation."""

import redis


class RedisLocalStore:
    """Redis-backed fallback store.

    Keeps fallback snapshots in Redis so that several processes on one
    host share the same offline copy. Uses the synchronous client, as
    the local store contract is synchronous.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "payrollcache",
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis local store.

        Args:
            redis_url: Redis connection URL. Ignored when client is given.
            key_prefix: Prefix for all keys.
            client: Optional pre-configured Redis client.
        """
        self._redis: redis.Redis = client or redis.Redis.from_url(redis_url)
        self._key_prefix = key_prefix

    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None if absent.

        Args:
            key: The store key.

        Returns:
            The stored value decoded as UTF-8, or None.
        """
        value = self._redis.get(self._prefixed_key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        """Store a string under a key.

        Args:
            key: The store key.
            value: The value to store.
        """
        self._redis.set(self._prefixed_key(key), value.encode("utf-8"))

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        self._redis.delete(self._prefixed_key(key))

    def _prefixed_key(self, key: str) -> str:
        """Add prefix to key if not already present.

        Args:
            key: The store key.

        Returns:
            The key with prefix.
        """
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisLocalStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
