#!/usr/bin/env python3
"""
File utility functions for the transcription pipeline.
"""

import math
from pathlib import Path

# Base64 grows data by about 33-37%; the upper bound is used to be safe
BASE64_OVERHEAD = 1.37

# Inline request payloads above this size need to be chunked
INLINE_PAYLOAD_LIMIT_BYTES = 30 * 1024 * 1024


def estimate_base64_size(original_size: int) -> int:
    """
    Estimate the base64-encoded size of a payload.

    Args:
        original_size: Size in bytes before encoding

    Returns:
        Estimated encoded size in bytes
    """
    return math.ceil(original_size * BASE64_OVERHEAD)


def requires_chunking(original_size: int) -> bool:
    """Whether a file is too large to send as a single inline payload."""
    return estimate_base64_size(original_size) > INLINE_PAYLOAD_LIMIT_BYTES


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count for display.

    Args:
        size_bytes: Size in bytes

    Returns:
        Size as "N bytes", "N.N KB" or "N.N MB"
    """
    if size_bytes < 1024:
        return f"{size_bytes} bytes"
    elif size_bytes < 1048576:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / 1048576:.1f} MB"


def ensure_directory(path: str) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text_file(path: str, text: str) -> Path:
    """Write text to path, creating parent directories."""
    file_path = Path(path)
    ensure_directory(str(file_path.parent))
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(text)
    return file_path
