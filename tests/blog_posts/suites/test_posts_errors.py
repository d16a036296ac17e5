"""
Blog Posts API resource - client errors and response envelope
"""

import pytest
from bson import ObjectId

from core.rest_client import RestClient
from utils.error_handling import request_id_var

pytestmark = [
    pytest.mark.asyncio(loop_scope="session"),
    pytest.mark.usefixtures("seeded_store"),
]


class TestNotFound:

    async def test_get_unknown_id_returns_404(self, rest_client):
        res = await rest_client.get(f"/posts/{ObjectId()}")

        assert res.status_code == 404
        body = res.json()
        assert body["error"] == "HTTP 404"
        assert body["message"] == "Post not found"
        assert "timestamp" in body

    async def test_get_malformed_id_returns_404(self, rest_client):
        res = await rest_client.get("/posts/not-an-object-id")

        assert res.status_code == 404

    async def test_delete_unknown_id_returns_404(self, rest_client, posts_service):
        res = await rest_client.delete(f"/posts/{ObjectId()}")

        assert res.status_code == 404
        assert (await posts_service.count_posts()).count == 10

    async def test_legacy_delete_unknown_id_returns_404(self, rest_client):
        res = await rest_client.delete(f"/{ObjectId()}")

        assert res.status_code == 404

    async def test_put_unknown_id_returns_404(self, rest_client, data_factory):
        missing_id = str(ObjectId())
        payload = data_factory.to_payload(data_factory.generate_post(id=missing_id))

        res = await rest_client.put(f"/posts/{missing_id}", payload)

        assert res.status_code == 404


class TestValidation:

    async def test_create_without_title_is_rejected(self, rest_client, data_factory, posts_service):
        payload = data_factory.to_payload(data_factory.generate_post())
        del payload["title"]

        res = await rest_client.post("/posts", payload)

        assert res.status_code == 422
        body = res.json()
        assert body["error"] == "Validation Error"
        assert any(detail["field"].endswith("title") for detail in body["detail"])
        assert (await posts_service.count_posts()).count == 10

    async def test_create_without_author_last_name_is_rejected(self, rest_client, data_factory):
        payload = data_factory.to_payload(data_factory.generate_post())
        del payload["author"]["lastName"]

        res = await rest_client.post("/posts", payload)

        assert res.status_code == 422
        assert any("lastName" in detail["field"] for detail in res.json()["detail"])

    async def test_create_with_empty_content_is_rejected(self, rest_client, data_factory):
        payload = data_factory.to_payload(data_factory.generate_post(content=""))

        res = await rest_client.post("/posts", payload)

        assert res.status_code == 422

    async def test_put_with_mismatched_ids_is_rejected(self, rest_client, data_factory, posts_service):
        existing = (await posts_service.list_posts()).data[0]
        path_id = str(existing["_id"])
        payload = data_factory.to_payload(data_factory.generate_post(id=str(ObjectId())))

        res = await rest_client.put(f"/posts/{path_id}", payload)

        assert res.status_code == 400
        assert "must match" in res.json()["message"]
        stored = await posts_service.get_post_by_id(path_id)
        assert stored.data[0]["title"] == existing["title"]
        assert stored.data[0]["content"] == existing["content"]

    async def test_put_without_body_id_is_rejected(self, rest_client, data_factory, posts_service):
        path_id = str((await posts_service.list_posts()).data[0]["_id"])
        payload = data_factory.to_payload(data_factory.generate_post())

        res = await rest_client.put(f"/posts/{path_id}", payload)

        assert res.status_code == 422

    async def test_put_without_title_leaves_post_untouched(self, rest_client, data_factory, posts_service):
        existing = (await posts_service.list_posts()).data[0]
        path_id = str(existing["_id"])
        payload = data_factory.to_payload(data_factory.generate_post(id=path_id))
        del payload["title"]

        res = await rest_client.put(f"/posts/{path_id}", payload)

        assert res.status_code == 422
        assert any(detail["field"].endswith("title") for detail in res.json()["detail"])
        stored = await posts_service.get_post_by_id(path_id)
        assert stored.data[0] == existing


class TestResponseEnvelope:

    async def test_responses_carry_trace_id(self, rest_client):
        ok = await rest_client.get("/posts")
        missing = await rest_client.get(f"/posts/{ObjectId()}")

        assert ok.headers.get("X-Trace-ID")
        assert missing.headers.get("X-Trace-ID")
        assert missing.json()["trace_id"] == missing.headers["X-Trace-ID"]

    async def test_unhandled_error_carries_trace_id(self, store_manager, posts_service, monkeypatch):
        async def broken_list_posts():
            raise RuntimeError("store exploded")

        monkeypatch.setattr(posts_service, "list_posts", broken_list_posts)
        client = RestClient(store_manager.app, raise_app_exceptions=False)
        try:
            res = await client.get("/posts")
        finally:
            await client.close()

        assert res.status_code == 500
        body = res.json()
        assert body["error"] == "Internal Server Error"
        assert "store exploded" not in body["message"]
        assert res.headers.get("X-Trace-ID")
        assert body["trace_id"] == res.headers["X-Trace-ID"]

    async def test_trace_id_is_cleared_after_request(self, rest_client):
        await rest_client.get(f"/posts/{ObjectId()}")

        assert request_id_var.get() == ""

    async def test_health_reports_connected_store(self, rest_client):
        res = await rest_client.get("/health")

        assert res.status_code == 200
        body = res.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
