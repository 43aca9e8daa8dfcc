#!/usr/bin/env python3
"""
Media type resolution for uploaded files.

Backends reject chunks without a usable audio/video media type, so every
source file is resolved to one before it is chunked.
"""

from ...models import SourceFile

DEFAULT_MEDIA_TYPE = "audio/mpeg"

EXTENSION_MEDIA_TYPES = {
    # Audio formats
    'mp3': 'audio/mpeg',
    'wav': 'audio/wav',
    'ogg': 'audio/ogg',
    'webm': 'audio/webm',
    'm4a': 'audio/mp4',
    'aac': 'audio/aac',
    'flac': 'audio/flac',
    # Video formats
    'mp4': 'video/mp4',
    'mov': 'video/quicktime',
    'avi': 'video/x-msvideo',
    'mkv': 'video/x-matroska',
}

SUPPORTED_AUDIO_FORMATS = ('audio/mp3', 'audio/wav', 'audio/mpeg', 'audio/ogg', 'audio/webm')
SUPPORTED_VIDEO_FORMATS = ('video/mp4', 'video/webm', 'video/ogg')


def resolve_media_type(source: SourceFile) -> str:
    """
    Get the media type to send to the backend for a file.

    A declared audio/* or video/* type wins; otherwise the name extension is
    looked up, falling back to audio/mpeg.
    """
    declared = source.media_type or ""
    if declared.startswith('audio/') or declared.startswith('video/'):
        return declared

    return EXTENSION_MEDIA_TYPES.get(source.extension, DEFAULT_MEDIA_TYPE)


def is_video_type(media_type: str) -> bool:
    return media_type.startswith('video/')


def is_supported_type(media_type: str) -> bool:
    """Whether the type is one of the formats known to transcribe cleanly."""
    return media_type in SUPPORTED_AUDIO_FORMATS or media_type in SUPPORTED_VIDEO_FORMATS
