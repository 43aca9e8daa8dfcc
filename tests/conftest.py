"""
Shared fixtures for the transcription pipeline tests.
"""

from typing import Dict, Optional

import pytest

from chunkscribe.ai.base import TranscriptionBackend
from chunkscribe.core.observer import PipelineObserver
from chunkscribe.models import BackendType, SourceFile

MB = 1024 * 1024


class FakeBackend(TranscriptionBackend):
    """Backend that records calls and returns canned text."""

    backend_type = BackendType.GENERATIVE

    def __init__(self, responses: Optional[Dict[int, str]] = None, fail_on=(), on_call=None):
        self.responses = responses or {}
        self.fail_on = set(fail_on)
        self.on_call = on_call
        self.calls = []
        self.settings_seen = []
        self.cancel_count = 0

    def transcribe(self, chunk, settings):
        self.calls.append(chunk)
        self.settings_seen.append(settings)
        if self.on_call:
            self.on_call(chunk)
        if chunk.index in self.fail_on:
            raise RuntimeError("backend rejected chunk")
        return self.responses.get(chunk.index, f"text {chunk.index}")

    def cancel(self):
        self.cancel_count += 1


class RecordingObserver(PipelineObserver):
    """Observer that keeps every checkpoint it receives."""

    def __init__(self):
        self.stages = []
        self.partials = []
        self.completed = []
        self.failed = []
        self.fallbacks = []
        self.progress = []

    def on_stage(self, status, message=""):
        self.stages.append(status)

    def on_extraction_progress(self, pct):
        self.progress.append(pct)

    def on_extraction_fallback(self, error):
        self.fallbacks.append(error)

    def on_chunk_completed(self, chunk, text):
        self.completed.append((chunk.index, text))

    def on_chunk_failed(self, chunk, error):
        self.failed.append((chunk.index, error))

    def on_partial_transcript(self, transcript):
        self.partials.append(transcript)


@pytest.fixture
def make_source():
    def _make(data: bytes = b"0123456789", media_type: str = "audio/mpeg", name: str = "meeting.mp3"):
        return SourceFile(data=data, media_type=media_type, name=name)
    return _make


@pytest.fixture
def observer():
    return RecordingObserver()
