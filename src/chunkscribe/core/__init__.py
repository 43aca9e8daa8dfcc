#!/usr/bin/env python3
"""
Core pipeline modules for the transcription system.

This package contains the core pipeline components including:
- Media type resolution and chunking
- Audio extraction from video
- Transcript combination
- Pipeline orchestration
"""

from .pipeline import TranscriptionPipeline
from .observer import PipelineObserver, LoggingObserver
from .chunking import chunk_file, resolve_media_type
from .extraction import AudioExtractor
from .transcription import TranscriptCombiner

__all__ = [
    'TranscriptionPipeline',
    'PipelineObserver',
    'LoggingObserver',
    'chunk_file',
    'resolve_media_type',
    'AudioExtractor',
    'TranscriptCombiner'
]
