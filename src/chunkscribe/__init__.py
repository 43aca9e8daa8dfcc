#!/usr/bin/env python3
"""
chunkscribe - chunked audio/video transcription with Gemini or Speech-to-Text.
"""

__version__ = "1.0.0"

from .models import (
    BackendType,
    Chunk,
    ChunkResult,
    ModelType,
    PipelineConfig,
    RunStatus,
    SourceFile,
    TranscriptionRun,
    TranscriptionSettings
)
from .core import TranscriptionPipeline, PipelineObserver, chunk_file, resolve_media_type
from .ai import GeminiClient, SpeechClient, SummaryGenerator

__all__ = [
    'BackendType',
    'Chunk',
    'ChunkResult',
    'ModelType',
    'PipelineConfig',
    'RunStatus',
    'SourceFile',
    'TranscriptionRun',
    'TranscriptionSettings',
    'TranscriptionPipeline',
    'PipelineObserver',
    'chunk_file',
    'resolve_media_type',
    'GeminiClient',
    'SpeechClient',
    'SummaryGenerator',
    '__version__'
]
