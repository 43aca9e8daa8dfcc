#!/usr/bin/env python3
"""
File chunking functionality for the transcription pipeline.

This module splits a source file into byte-range chunks small enough to be
sent inline to a transcription backend.
"""

import logging
from typing import List

from ...models import SourceFile, Chunk
from ...utils.file_utils import format_file_size

logger = logging.getLogger(__name__)


def chunk_file(source: SourceFile, max_bytes: int) -> List[Chunk]:
    """
    Split a file into consecutive chunks of at most max_bytes.

    Every chunk keeps the parent's media type and name. An empty file
    yields an empty list.

    Args:
        source: File to split
        max_bytes: Maximum size of a chunk in bytes

    Returns:
        Chunks in byte order
    """
    if max_bytes <= 0:
        raise ValueError("max_bytes must be positive")

    file_size = source.size
    boundaries = []
    start = 0
    while start < file_size:
        end = min(start + max_bytes, file_size)
        boundaries.append((start, end))
        start = end

    total = len(boundaries)
    buffer = memoryview(source.data)
    chunks = [
        Chunk(
            data=buffer[start:end],
            media_type=source.media_type,
            name=source.name,
            index=index,
            total=total,
            start=start,
            end=end,
        )
        for index, (start, end) in enumerate(boundaries)
    ]

    logger.debug("File %s split into %d chunks of max %s",
                 source.name, total, format_file_size(max_bytes))
    return chunks

