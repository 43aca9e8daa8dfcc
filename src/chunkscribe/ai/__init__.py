#!/usr/bin/env python3
"""
AI/ML modules for the transcription pipeline.

This package contains AI-related functionality including:
- Gemini API client
- Speech-to-Text client
- Prompt management
- Summary generation
"""

from .base import TranscriptionBackend
from .gemini_client import GeminiClient
from .speech_client import SpeechClient
from .prompt_manager import PromptManager
from .summary_generator import SummaryGenerator
from .factory import create_backend, create_summary_client

__all__ = [
    'TranscriptionBackend',
    'GeminiClient',
    'SpeechClient',
    'PromptManager',
    'SummaryGenerator',
    'create_backend',
    'create_summary_client'
]
