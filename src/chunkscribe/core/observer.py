#!/usr/bin/env python3
"""
Pipeline observers.

The pipeline reports what it is doing through an observer so that progress
can be rendered anywhere (terminal, log file, UI) without the pipeline
knowing about it.
"""

import logging

from ..models import Chunk, RunStatus

logger = logging.getLogger(__name__)


class PipelineObserver:
    """
    Receives pipeline checkpoints. All hooks are no-ops by default.
    """

    def on_stage(self, status: RunStatus, message: str = ""):
        """Called when the run enters a new state."""

    def on_extraction_progress(self, pct: float):
        """Called with the audio extraction percentage."""

    def on_extraction_fallback(self, error: Exception):
        """Called when audio extraction failed and the original file is used instead."""

    def on_chunk_started(self, chunk: Chunk):
        """Called before a chunk is sent to the backend."""

    def on_chunk_completed(self, chunk: Chunk, text: str):
        """Called after a chunk was transcribed."""

    def on_chunk_failed(self, chunk: Chunk, error: Exception):
        """Called when a chunk could not be transcribed."""

    def on_partial_transcript(self, transcript: str):
        """Called with the transcript accumulated so far."""


class LoggingObserver(PipelineObserver):
    """Writes every checkpoint to the module logger."""

    def on_stage(self, status: RunStatus, message: str = ""):
        logger.info("[%s] %s", status.value, message)

    def on_extraction_progress(self, pct: float):
        logger.debug("Extracting audio: %.0f%%", pct)

    def on_extraction_fallback(self, error: Exception):
        logger.warning("Audio extraction failed, transcribing original file: %s", error)

    def on_chunk_started(self, chunk: Chunk):
        logger.info("Processing chunk %d of %d", chunk.part_number, chunk.total)

    def on_chunk_completed(self, chunk: Chunk, text: str):
        logger.info("Chunk %d of %d transcribed (%d characters)", chunk.part_number, chunk.total, len(text))

    def on_chunk_failed(self, chunk: Chunk, error: Exception):
        logger.error("Error with chunk %d: %s", chunk.part_number, error)

    def on_partial_transcript(self, transcript: str):
        logger.debug("Partial transcript: %d characters", len(transcript))
