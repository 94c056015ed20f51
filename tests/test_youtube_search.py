import sys
import unittest
from pathlib import Path
from urllib.parse import quote

import httpx

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillchat.tutorials import YouTubeVideoSearch, search_results_url  # noqa: E402


def _results_url(skill: str) -> str:
    return "https://www.youtube.com/results?search_query=" + quote(f"{skill} tutorial")


class YouTubeVideoSearchTests(unittest.IsolatedAsyncioTestCase):
    def _search(self, handler, api_key="test-key"):
        self.requests = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        self.addAsyncCleanup(client.aclose)
        return YouTubeVideoSearch(api_key=api_key, client=client)

    async def test_first_result_becomes_watch_url(self):
        search = self._search(
            lambda request: httpx.Response(200, json={"items": [{"id": {"videoId": "abc123"}}, {"id": {"videoId": "zzz"}}]})
        )
        result = await search.search("Load Balancing")

        self.assertEqual(result.url, "https://www.youtube.com/watch?v=abc123")
        self.assertEqual(result.source, "youtube_api")
        self.assertFalse(result.is_fallback)

        params = self.requests[0].url.params
        self.assertEqual(params["q"], "Load Balancing tutorial")
        self.assertEqual(params["videoDuration"], "long")
        self.assertEqual(params["order"], "viewCount")
        self.assertEqual(params["maxResults"], "1")
        self.assertEqual(params["type"], "video")
        self.assertEqual(params["key"], "test-key")

    async def test_missing_key_skips_network(self):
        search = self._search(lambda request: httpx.Response(200, json={"items": []}), api_key="")
        result = await search.search("Caching")

        self.assertEqual(self.requests, [])
        self.assertEqual(result.url, _results_url("Caching"))
        self.assertEqual(result.source, "search_fallback")

    async def test_quota_exceeded_uses_dedicated_fallback(self):
        body = {"error": {"code": 403, "errors": [{"reason": "quotaExceeded"}]}}
        search = self._search(lambda request: httpx.Response(403, json=body))
        result = await search.search("Message Queues")

        self.assertEqual(result.url, _results_url("Message Queues"))
        self.assertEqual(result.source, "quota_fallback")
        self.assertTrue(result.is_fallback)

    async def test_top_level_quota_reason_uses_dedicated_fallback(self):
        body = {"error": {"code": 403, "reason": "quotaExceeded"}}
        search = self._search(lambda request: httpx.Response(403, json=body))
        result = await search.search("Caching")

        self.assertEqual(result.url, _results_url("Caching"))
        self.assertEqual(result.source, "quota_fallback")

    async def test_other_http_errors_fall_back(self):
        search = self._search(lambda request: httpx.Response(500, text="oops"))
        result = await search.search("Monitoring")

        self.assertEqual(result.url, _results_url("Monitoring"))
        self.assertEqual(result.source, "search_fallback")

    async def test_empty_result_set_falls_back(self):
        search = self._search(lambda request: httpx.Response(200, json={"items": []}))
        result = await search.search("Security")

        self.assertEqual(result.source, "search_fallback")
        self.assertEqual(result.url, _results_url("Security"))

    async def test_transport_error_falls_back(self):
        def broken(request):
            raise httpx.ConnectError("connection refused", request=request)

        search = self._search(broken)
        result = await search.search("Server")

        self.assertEqual(result.source, "search_fallback")
        self.assertEqual(result.url, _results_url("Server"))

    def test_results_url_is_percent_encoded(self):
        self.assertEqual(
            search_results_url("C# & .NET"),
            "https://www.youtube.com/results?search_query=C%23%20%26%20.NET%20tutorial",
        )


if __name__ == "__main__":
    unittest.main()
