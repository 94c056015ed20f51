import os
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillchat.ai.providers.openai_provider import OpenAIProvider  # noqa: E402
from skillchat.ai.types import AIProviderError, ChatMessage  # noqa: E402


class _Chunks:
    def __init__(self, texts):
        self._texts = list(texts)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._texts:
            raise StopAsyncIteration
        text = self._texts.pop(0)
        return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


class OpenAIProviderTests(unittest.IsolatedAsyncioTestCase):
    def _provider(self, **kwargs):
        provider = OpenAIProvider(model="test-model", api_key="sk-test", **kwargs)
        self.calls = []

        async def create(**create_kwargs):
            self.calls.append(create_kwargs)
            if create_kwargs.get("stream"):
                return _Chunks(["Hel", None, "lo"])
            message = SimpleNamespace(content='{"missing_skills": []}')
            return SimpleNamespace(choices=[SimpleNamespace(message=message)])

        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
        return provider

    def test_missing_key_raises(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": ""}):
            with self.assertRaises(AIProviderError):
                OpenAIProvider(model="test-model")

    async def test_stream_sends_plain_chat_request(self):
        with patch.dict(os.environ, {"OPENAI_RESPONSE_FORMAT": "json"}):
            provider = self._provider(temperature=0.3)
        chunks = [text async for text in provider.stream([ChatMessage(role="user", content="hi")])]

        self.assertEqual(chunks, ["Hel", "lo"])
        self.assertEqual(
            self.calls[0],
            {
                "model": "test-model",
                "messages": [{"role": "user", "content": "hi"}],
                "temperature": 0.3,
                "stream": True,
            },
        )

    async def test_complete_applies_overrides(self):
        provider = self._provider()
        text = await provider.complete(
            [ChatMessage(role="system", content="Reply in JSON.")],
            temperature=0.1,
            max_tokens=500,
        )

        self.assertEqual(text, '{"missing_skills": []}')
        self.assertEqual(self.calls[0]["temperature"], 0.1)
        self.assertEqual(self.calls[0]["max_tokens"], 500)
        self.assertNotIn("response_format", self.calls[0])


if __name__ == "__main__":
    unittest.main()
