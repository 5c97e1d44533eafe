import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from voicestudio.tts import GeminiTTSClient, GeminiTTSConfig

AUDIO_BYTES = b"\x00\x01fake-pcm\xff"
AUDIO_B64 = base64.b64encode(AUDIO_BYTES).decode("ascii")


def make_response(data=AUDIO_BYTES):
    """Build a generate_content response shaped like the SDK's."""
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="audio/L16;rate=24000"))
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


@pytest.fixture
def fake_sdk():
    sdk = MagicMock()
    sdk.aio.models.generate_content = AsyncMock(return_value=make_response())
    return sdk


@pytest.fixture
def tts_client(fake_sdk):
    client = GeminiTTSClient(GeminiTTSConfig(api_key="test-key"))
    client._client = fake_sdk
    return client
