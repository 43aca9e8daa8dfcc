"""
Tests for the Gemini backend.
"""

import logging
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from chunkscribe.ai import gemini_client
from chunkscribe.ai.gemini_client import GeminiClient
from chunkscribe.exceptions import BackendUnavailableError
from chunkscribe.models import Chunk, ModelType, TranscriptionSettings


def _client(text="transcribed words"):
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=text)
    return client


def _chunk(index=1, total=3, media_type="audio/mpeg"):
    return Chunk(data=b"\x00\x01\x02", media_type=media_type, name="call.mp3",
                 index=index, total=total, start=0, end=3)


def test_transcribe_builds_single_turn_request():
    client = _client()
    backend = GeminiClient(model=ModelType.GEMINI_2_5_FLASH, temperature=0.4, client=client)

    text = backend.transcribe(_chunk(), TranscriptionSettings())

    assert text == "transcribed words"
    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs['model'] == "models/gemini-2.5-flash"

    contents = kwargs['contents']
    assert contents.role == "user"
    prompt = contents.parts[0].text
    assert "verbatim transcription" in prompt
    assert "part 2 of 3" in prompt
    assert "filler words, stutters, and false starts" in prompt

    inline = contents.parts[1].inline_data
    assert inline.mime_type == "audio/mpeg"
    assert inline.data == b"\x00\x01\x02"
    assert kwargs['config'].temperature == 0.4


def test_single_chunk_prompt_has_no_part_info():
    client = _client()

    GeminiClient(client=client).transcribe(_chunk(index=0, total=1), TranscriptionSettings())

    prompt = client.models.generate_content.call_args.kwargs['contents'].parts[0].text
    assert "part 1 of 1" not in prompt


def test_empty_response_text_becomes_empty_string():
    backend = GeminiClient(client=_client(text=None))

    assert backend.transcribe(_chunk(), TranscriptionSettings()) == ""


def test_generate_text_uses_requested_temperature():
    client = _client(text="summary")
    backend = GeminiClient(temperature=0.4, client=client)

    assert backend.generate_text("Summarize this", temperature=0.2) == "summary"
    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs['contents'].parts[0].text == "Summarize this"
    assert len(kwargs['contents'].parts) == 1
    assert kwargs['config'].temperature == 0.2


def test_errors_propagate():
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("429 Too Many Requests")

    with pytest.raises(RuntimeError):
        GeminiClient(client=client).transcribe(_chunk(), TranscriptionSettings())


def test_missing_api_key_makes_backend_unavailable(monkeypatch):
    monkeypatch.delenv('GOOGLE_API_KEY', raising=False)
    monkeypatch.setattr(gemini_client, "load_dotenv", lambda: None)

    with pytest.raises(BackendUnavailableError):
        GeminiClient()


def test_chunk_views_are_sent_as_bytes():
    client = _client()
    chunk = Chunk(data=memoryview(b"xxabcxx")[2:5], media_type="audio/wav", name="a.wav",
                  index=0, total=1, start=2, end=5)

    GeminiClient(client=client).transcribe(chunk, TranscriptionSettings())

    inline = client.models.generate_content.call_args.kwargs['contents'].parts[1].inline_data
    assert inline.data == b"abc"
    assert isinstance(inline.data, bytes)


def test_logs_estimated_base64_size(caplog):
    caplog.set_level(logging.DEBUG, logger="chunkscribe.ai.gemini_client")

    GeminiClient(client=_client()).transcribe(_chunk(), TranscriptionSettings())

    assert "estimated base64 size: 5 bytes" in caplog.text
