#!/usr/bin/env python3
"""
Transcript combination functionality for the transcription pipeline.

This module handles joining per-chunk results into a single transcript.
"""

from typing import List

from ...models import ChunkResult

ERROR_PLACEHOLDER = "[Error transcribing part {part}]"


def error_placeholder(index: int) -> str:
    """Placeholder text for a failed chunk (index is 0-based)."""
    return ERROR_PLACEHOLDER.format(part=index + 1)


class TranscriptCombiner:
    """
    Handles combining chunk results into a transcript.
    """

    def __init__(self, separator: str = " "):
        """
        Initialize the transcript combiner.

        Args:
            separator: Text placed between chunk transcripts
        """
        self.separator = separator

    def segment_text(self, result: ChunkResult) -> str:
        """Text a result contributes to the transcript."""
        if result.success:
            return result.text
        return error_placeholder(result.index)

    def combine(self, results: List[ChunkResult]) -> str:
        """
        Join results in index order, placeholders included.

        Args:
            results: Chunk results

        Returns:
            Full transcript text
        """
        ordered = sorted(results, key=lambda r: r.index)
        return self.separator.join(self.segment_text(r) for r in ordered)
