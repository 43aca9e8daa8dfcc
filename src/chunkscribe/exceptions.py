#!/usr/bin/env python3
"""
Exception types raised by the transcription pipeline.
"""


class TranscriptionError(Exception):
    """Base class for pipeline failures."""


class InputError(TranscriptionError):
    """Raised when there is nothing to work on (no file, empty transcript)."""


class ExtractionError(TranscriptionError):
    """Raised when the audio track of a video cannot be decoded."""


class ChunkTranscriptionError(TranscriptionError):
    """A backend call for a single chunk failed."""

    def __init__(self, index: int, message: str):
        super().__init__(f"Chunk {index + 1}: {message}")
        self.index = index
        self.message = message


class BackendUnavailableError(TranscriptionError):
    """Raised when a backend client cannot be created (missing key or credentials)."""


class PipelineBusyError(TranscriptionError):
    """Raised when a run is submitted while another one is in flight."""


class OperationCancelled(Exception):
    """Raised when an operation is cancelled by the caller. Not a failure."""
