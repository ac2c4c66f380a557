"""Hit/miss accounting sinks for the cache engine."""

import threading
from typing import Any, Dict


class InMemoryCacheMetrics:
    """Per-instance hit/miss counters.
    
    Counts are best-effort observability, never used for cache decisions.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
    
    def record_hit(self, key: str) -> None:
        with self._lock:
            self._hits += 1
    
    def record_miss(self, key: str) -> None:
        with self._lock:
            self._misses += 1
    
    def get_stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and hit rate."""
        with self._lock:
            hits, misses = self._hits, self._misses
        total = hits + misses
        hit_rate = (hits / total) if total > 0 else 0.0
        return {
            "hits": hits,
            "misses": misses,
            "total_requests": total,
            "hit_rate": hit_rate,
        }
    
    def reset(self) -> None:
        """Reset counters."""
        with self._lock:
            self._hits = 0
            self._misses = 0


class NullCacheMetrics:
    """Metrics sink that records nothing."""
    
    def record_hit(self, key: str) -> None:
        pass
    
    def record_miss(self, key: str) -> None:
        pass
    
    def get_stats(self) -> Dict[str, Any]:
        return {}
