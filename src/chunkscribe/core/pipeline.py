#!/usr/bin/env python3
"""
Main transcription pipeline orchestrator.

This module provides the TranscriptionPipeline class that takes a file
through media type resolution, optional audio extraction, chunking and
sequential per-chunk transcription.
"""

import datetime
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, Optional

from ..ai import TranscriptionBackend, create_backend
from ..exceptions import (
    BackendUnavailableError,
    ChunkTranscriptionError,
    ExtractionError,
    InputError,
    PipelineBusyError
)
from ..models import ChunkResult, PipelineConfig, RunStatus, SourceFile, TranscriptionRun
from ..utils import estimate_base64_size, format_file_size, requires_chunking
from .chunking import chunk_file, is_supported_type, is_video_type, resolve_media_type
from .extraction import AudioExtractor
from .observer import LoggingObserver, PipelineObserver
from .transcription import TranscriptCombiner

logger = logging.getLogger(__name__)


class TranscriptionPipeline:
    """
    Main transcription pipeline that orchestrates all components.

    One run at a time; cancel() may be called from another thread.
    """

    def __init__(self, config: Optional[PipelineConfig] = None,
                 backend: Optional[TranscriptionBackend] = None,
                 audio_extractor: Optional[AudioExtractor] = None,
                 observer: Optional[PipelineObserver] = None):
        """
        Initialize the transcription pipeline.

        Args:
            config: Pipeline configuration (defaults if None)
            backend: Transcription backend (created from config on first run if None)
            audio_extractor: Extractor for video files
            observer: Receives progress checkpoints (logs them if None)
        """
        self.config = config or PipelineConfig()
        self.backend = backend
        self.audio_extractor = audio_extractor or AudioExtractor(
            sample_rate_hertz=self.config.settings.sample_rate_hertz
        )
        self.observer = observer or LoggingObserver()
        self.combiner = TranscriptCombiner()

        self.current_run: Optional[TranscriptionRun] = None
        self._cancel_event = threading.Event()
        self._run_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._run_lock.locked()

    def cancel(self):
        """Request cancellation of the active run."""
        logger.info("Cancellation requested")
        self._cancel_event.set()
        if self.backend is not None:
            self.backend.cancel()

    def reset(self):
        """Discard the last run."""
        if self.is_running:
            raise PipelineBusyError("Cannot reset while a transcription is running")
        self.current_run = None
        self._cancel_event.clear()

    def transcribe_path(self, path: str, settings_overrides: Optional[Dict[str, Any]] = None) -> TranscriptionRun:
        """Read a file from disk and transcribe it."""
        return self.process_file(SourceFile.from_path(path), settings_overrides)

    def process_file(self, source: Optional[SourceFile],
                     settings_overrides: Optional[Dict[str, Any]] = None) -> TranscriptionRun:
        """
        Transcribe a file.

        Args:
            source: File to transcribe
            settings_overrides: Recognition options applied on top of the configured ones

        Returns:
            The finished run (status DONE or ABORTED)

        Raises:
            InputError: If no file was supplied
            BackendUnavailableError: If the backend client cannot be created
            PipelineBusyError: If another run is in progress
        """
        if not self._run_lock.acquire(blocking=False):
            raise PipelineBusyError("A transcription is already running")

        run = TranscriptionRun(start_time=datetime.datetime.now().isoformat())
        self.current_run = run
        try:
            self._cancel_event.clear()
            self._execute(run, source, settings_overrides or {})
            return run
        finally:
            run.end_time = datetime.datetime.now().isoformat()
            self._run_lock.release()

    def _execute(self, run: TranscriptionRun, source: Optional[SourceFile], settings_overrides: Dict[str, Any]):
        self._enter(run, RunStatus.PREPARING, "Preparing to transcribe...")

        if source is None:
            self._fail(run, "Please select an audio file.")
            raise InputError("Please select an audio file.")

        try:
            settings = self.config.settings.merged(settings_overrides)
        except ValueError as e:
            self._fail(run, str(e))
            raise

        media_type = resolve_media_type(source)
        source = replace(source, media_type=media_type)
        run.source_name = source.name
        run.media_type = media_type
        self._log_source(source)

        if self.backend is None:
            try:
                self.backend = create_backend(self.config)
            except BackendUnavailableError as e:
                self._fail(run, str(e))
                raise

        if self._cancelled():
            return self._abort(run)

        if is_video_type(media_type) and self.config.extract_audio:
            self._enter(run, RunStatus.EXTRACTING_AUDIO, f"Extracting audio from {source.name}...")
            try:
                source = self.audio_extractor.extract_audio(
                    source, self.observer.on_extraction_progress, sample_rate_hertz=settings.sample_rate_hertz
                )
                run.used_audio_extraction = True
            except ExtractionError as e:
                logger.warning("Falling back to the original video for %s: %s", source.name, e)
                self.observer.on_extraction_fallback(e)

            if self._cancelled():
                return self._abort(run)

        self._enter(run, RunStatus.CHUNKING, "Splitting file into chunks...")
        try:
            chunks = chunk_file(source, self.config.max_chunk_bytes)
        except ValueError as e:
            self._fail(run, f"Invalid chunk size: {e}")
            raise
        if not chunks:
            logger.warning("File %s is empty, nothing to transcribe", source.name)

        self._enter(run, RunStatus.TRANSCRIBING, f"Transcribing {len(chunks)} chunks with {self.backend.name}")
        for chunk in chunks:
            if self._cancelled():
                return self._abort(run)

            self.observer.on_chunk_started(chunk)
            try:
                text = self.backend.transcribe(chunk, settings)
                result = ChunkResult.ok(chunk.index, text)
            except Exception as e:
                error = ChunkTranscriptionError(chunk.index, str(e))
                result = ChunkResult.failed(chunk.index, str(e))
                self.observer.on_chunk_failed(chunk, error)

            if self._cancelled():
                return self._abort(run)

            run.results.append(result)
            if result.success:
                self.observer.on_chunk_completed(chunk, result.text)
            self.observer.on_partial_transcript(self.combiner.combine(run.results))

            # Space out requests to stay under backend rate limits
            is_last = chunk.index == len(chunks) - 1
            if not is_last and self.config.chunk_delay_seconds > 0:
                if self._cancel_event.wait(self.config.chunk_delay_seconds):
                    return self._abort(run)

        self._enter(run, RunStatus.JOINING, "Joining chunk transcripts...")
        run.transcript = self.combiner.combine(run.results)

        if run.failed_chunks:
            logger.warning("%d of %d chunks failed: %s", len(run.failed_chunks), run.total_chunks,
                           [i + 1 for i in run.failed_chunks])
        self._enter(run, RunStatus.DONE, "All chunks processed")

    def _log_source(self, source: SourceFile):
        estimated_base64_size = estimate_base64_size(source.size)
        logger.info("File selected: %s (%s)", source.name, format_file_size(source.size))
        logger.info("File type: %s", source.media_type)
        logger.info("Estimated base64 size: %s", format_file_size(estimated_base64_size))
        if requires_chunking(source.size):
            logger.info("File will require chunking (base64 size exceeds 30MB)")
        if not is_supported_type(source.media_type):
            logger.warning("Media type %s is not in the supported format list, the backend may reject it",
                           source.media_type)

    def _cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def _enter(self, run: TranscriptionRun, status: RunStatus, message: str = ""):
        run.status = status
        self.observer.on_stage(status, message)

    def _fail(self, run: TranscriptionRun, message: str):
        run.error = message
        self._enter(run, RunStatus.ERRORED, message)

    def _abort(self, run: TranscriptionRun):
        # Partial results are not surfaced on cancel
        run.cancelled = True
        run.results = []
        run.transcript = ""
        self._enter(run, RunStatus.ABORTED, "Transcription cancelled")
