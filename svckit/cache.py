"""Thin helpers over a Redis client."""

from datetime import timedelta

_SECOND = timedelta(seconds=1)


class RedisUtil:
    """Stores and reads string values in Redis."""

    def __init__(self, client):
        self.client = client

    def set(self, key, value, expiration=0):
        """Store ``value`` under ``key``; a positive ``expiration`` sets a TTL."""
        if not isinstance(expiration, timedelta):
            expiration = timedelta(seconds=expiration)
        if expiration <= timedelta(0):
            self.client.set(key, value)
        elif expiration < _SECOND or expiration % _SECOND:
            self.client.set(key, value, px=max(1, expiration // timedelta(milliseconds=1)))
        else:
            self.client.set(key, value, ex=expiration // _SECOND)

    def get(self, key):
        """Return the value under ``key``; raise ``KeyError`` if it is absent."""
        value = self.client.get(key)
        if value is None:
            raise KeyError(key)
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def delete(self, *args):
        """Remove the given keys."""
        self.client.delete(*args)

    def exists(self, *args):
        """Return whether any of the given keys exists."""
        return self.client.exists(*args) > 0