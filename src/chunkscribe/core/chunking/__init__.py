#!/usr/bin/env python3
"""
Chunking modules for the transcription pipeline.

This package handles media type resolution and byte-range chunking.
"""

from .file_chunker import chunk_file
from .media_types import resolve_media_type, is_video_type, is_supported_type

__all__ = [
    'chunk_file',
    'resolve_media_type',
    'is_video_type',
    'is_supported_type'
]
