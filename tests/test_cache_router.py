"""Tests for the cache admin router."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tagcache.api import cache_router
from tagcache.core.exceptions import BackendError
from tagcache.services import TaggedCache


@pytest.fixture
def app(tagged_cache):
    app = FastAPI()
    app.state.tagged_cache = tagged_cache
    app.include_router(cache_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


class TestCacheRouter:
    """Test admin endpoints over the memory store."""
    
    def test_exists(self, client, tagged_cache):
        tagged_cache.cache("user:1", lambda: {"id": 1}, 60)
        
        response = client.get("/cache/keys/user:1/exists")
        
        assert response.status_code == 200
        assert response.json() == {"key": "user:1", "exists": True}
        assert client.get("/cache/keys/user:2/exists").json()["exists"] is False
    
    def test_key_with_slashes(self, client, tagged_cache):
        tagged_cache.cache("pages/home", lambda: "html", 60)
        
        response = client.get("/cache/keys/pages/home/exists")
        assert response.json() == {"key": "pages/home", "exists": True}
    
    def test_flush_key(self, client, tagged_cache):
        tagged_cache.cache("user:1", lambda: {"id": 1}, 60)
        
        response = client.delete("/cache/keys/user:1")
        
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["keys"] == ["user:1"]
        assert tagged_cache.exists("user:1") is False
    
    def test_flush_tags(self, client, tagged_cache):
        tagged_cache.cache("a", lambda: 1, 60, ["users"])
        tagged_cache.cache("b", lambda: 2, 60, ["orders"])
        
        response = client.post("/cache/tags/flush", json={"tags": ["users", "users"]})
        
        assert response.status_code == 200
        assert response.json()["tags"] == ["users"]
        assert tagged_cache.exists("a") is False
        assert tagged_cache.exists("b") is True
    
    @pytest.mark.parametrize("body", [{"tags": []}, {"tags": [" "]}, {}])
    def test_flush_tags_validation(self, client, body):
        assert client.post("/cache/tags/flush", json=body).status_code == 422
    
    def test_stats(self, client, tagged_cache):
        tagged_cache.cache("a", lambda: 1, 60)
        tagged_cache.get("a")
        
        stats = client.get("/cache/stats").json()["stats"]
        
        assert stats["hits"] == 1
        assert stats["misses"] == 1


class TestCacheRouterBackendFailure:
    """Test mapping of backend failures to 503."""
    
    @pytest.fixture
    def client(self, faulty_store):
        app = FastAPI()
        app.state.tagged_cache = TaggedCache(faulty_store)
        app.include_router(cache_router)
        return TestClient(app)
    
    def test_exists_backend_error(self, client, faulty_store):
        faulty_store.fail("get", BackendError("connection refused"))
        
        response = client.get("/cache/keys/k/exists")
        
        assert response.status_code == 503
        assert response.json()["detail"]["type"] == "BackendError"
    
    def test_flush_tags_partial_failure(self, client, faulty_store):
        faulty_store.fail("set_members", BackendError("timeout"), key="tag:bad")
        
        response = client.post("/cache/tags/flush", json={"tags": ["bad", "good"]})
        
        assert response.status_code == 503
        detail = response.json()["detail"]
        assert detail["code"] == "TAG_FLUSH_FAILED"
        assert list(detail["details"]["tags"]) == ["bad"]
