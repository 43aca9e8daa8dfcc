#!/usr/bin/env python3
"""
Transcript modules for the transcription pipeline.
"""

from .transcript_combiner import TranscriptCombiner, error_placeholder

__all__ = [
    'TranscriptCombiner',
    'error_placeholder'
]
