#!/usr/bin/env python3
"""
Audio extraction modules for the transcription pipeline.
"""

from .audio_extractor import AudioExtractor, EXTRACTED_MEDIA_TYPE

__all__ = [
    'AudioExtractor',
    'EXTRACTED_MEDIA_TYPE'
]
