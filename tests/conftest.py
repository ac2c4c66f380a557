"""Pytest configuration and fixtures for tagcache tests."""

import time
from datetime import timedelta
from typing import Callable, Dict, Optional, Set

import pytest

from tagcache.adapters import MemoryStoreAdapter
from tagcache.serializers import MsgpackCodec
from tagcache.services import TaggedCache, InMemoryCacheMetrics


class FakeClock:
    """Manually advanced monotonic clock."""
    
    def __init__(self, start: float = 1000.0):
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


class FaultyStore(MemoryStoreAdapter):
    """Memory store that raises configured errors per operation.
    
    ``failures`` maps an operation name to an exception, or to a
    ``(key, exception)`` pair to fail only for that key.
    """
    
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        super().__init__(clock=clock)
        self.failures: Dict[str, object] = {}
    
    def fail(self, operation: str, error: Exception, key: Optional[str] = None) -> None:
        self.failures[operation] = (key, error) if key is not None else error
    
    def _check(self, operation: str, key: str) -> None:
        failure = self.failures.get(operation)
        if failure is None:
            return
        if isinstance(failure, tuple):
            failing_key, error = failure
            if failing_key == key:
                raise error
            return
        raise failure
    
    def get(self, key: str) -> Optional[bytes]:
        self._check("get", key)
        return super().get(key)
    
    def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        self._check("set", key)
        super().set(key, value, ttl)
    
    def delete(self, *keys: str) -> None:
        for key in keys:
            self._check("delete", key)
        super().delete(*keys)
    
    def add_to_set(self, set_key: str, member: str) -> None:
        self._check("add_to_set", set_key)
        super().add_to_set(set_key, member)
    
    def set_members(self, set_key: str) -> Set[str]:
        self._check("set_members", set_key)
        return super().set_members(set_key)


@pytest.fixture
def clock():
    """Fake clock for TTL tests."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """Memory store driven by the fake clock."""
    return MemoryStoreAdapter(clock=clock)


@pytest.fixture
def faulty_store(clock):
    """Memory store with injectable failures."""
    return FaultyStore(clock=clock)


@pytest.fixture
def metrics():
    """Per-test metrics sink."""
    return InMemoryCacheMetrics()


@pytest.fixture
def tagged_cache(memory_store, metrics):
    """Cache engine over the memory store with the default codec."""
    return TaggedCache(memory_store, codec=MsgpackCodec(), metrics=metrics)
