from types import SimpleNamespace

import pytest

from buildcast.parsers import ResultBuilder


class FakeModelClient:
    """Stands in for GeminiAPIClient: returns canned replies or raises."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate_content(self, content):
        self.prompts.append(content)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeTTSClient:
    """Stands in for elevenlabs.client.ElevenLabs."""

    def __init__(self, chunks=(b"ab", b"cd"), error=None):
        self.calls = []
        self._chunks = chunks
        self._error = error
        self.text_to_speech = SimpleNamespace(convert=self._convert)
        self.voices = SimpleNamespace(get_all=lambda: [])

    def _convert(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return iter(self._chunks)


@pytest.fixture
def valid_reply():
    return (
        '{"concepts": ["Photosynthesis", "Chlorophyll"], '
        '"summary": "Plants turn light into chemical energy.", '
        '"flashcards": [{"question": "What absorbs light?", "answer": "Chlorophyll pigments."}]}'
    )


@pytest.fixture
def sample_result():
    return ResultBuilder.assemble(
        ["Topic"],
        "A summary that is long enough.",
        [("What is the topic?", "The topic is a thing.")],
    )


@pytest.fixture
def tts_client():
    """Factory for fake ElevenLabs clients."""
    return FakeTTSClient


@pytest.fixture
def model_client():
    """Factory for fake model clients."""
    return FakeModelClient
