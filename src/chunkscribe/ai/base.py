#!/usr/bin/env python3
"""
Base class for transcription backends.
"""

from abc import ABC, abstractmethod

from ..models import BackendType, Chunk, TranscriptionSettings


class TranscriptionBackend(ABC):
    """
    A cloud service that turns one chunk of audio into text.

    Implementations raise on transport or backend errors; retries and
    placeholder handling belong to the pipeline.
    """

    backend_type: BackendType

    @abstractmethod
    def transcribe(self, chunk: Chunk, settings: TranscriptionSettings) -> str:
        """
        Transcribe a single chunk.

        Args:
            chunk: Chunk bytes tagged with the parent file's media type
            settings: Recognition options for this run

        Returns:
            Transcript text for the chunk
        """

    def cancel(self):
        """Cancel an in-flight request if the transport supports it."""

    @property
    def name(self) -> str:
        return self.backend_type.value
