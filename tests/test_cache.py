from datetime import timedelta

import pytest

from svckit.cache import RedisUtil


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.expiry = {}

    def set(self, name, value, ex=None, px=None):
        self.data[name] = str(value).encode("utf-8")
        self.expiry[name] = (ex, px)
        return True

    def get(self, name):
        return self.data.get(name)

    def delete(self, *names):
        removed = [name for name in names if self.data.pop(name, None) is not None]
        return len(removed)

    def exists(self, *names):
        return sum(name in self.data for name in names)


@pytest.fixture
def client():
    return FakeRedis()


def test_set_then_get_round_trip(client):
    cache = RedisUtil(client)
    cache.set("greeting", "hello")
    assert cache.get("greeting") == "hello"
    assert client.expiry["greeting"] == (None, None)


def test_whole_second_expiration_uses_seconds(client):
    cache = RedisUtil(client)
    cache.set("k", "v", timedelta(seconds=5))
    assert client.expiry["k"] == (None, None) or client.expiry["k"] == (5, None)
    assert client.expiry["k"] == (5, None)


def test_fractional_expiration_uses_milliseconds(client):
    cache = RedisUtil(client)
    cache.set("k", "v", 1.5)
    assert client.expiry["k"] == (None, 1500)


def test_get_missing_key_raises(client):
    cache = RedisUtil(client)
    with pytest.raises(KeyError):
        cache.get("absent")


def test_delete_and_exists(client):
    cache = RedisUtil(client)
    cache.set("a", "1")
    cache.set("b", "2")
    assert cache.exists("a", "missing") is True
    cache.delete("a", "b")
    assert cache.exists("a", "b") is False