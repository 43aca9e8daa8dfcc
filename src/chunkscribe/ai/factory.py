#!/usr/bin/env python3
"""
Backend factory for the transcription pipeline.

Selects the transcription backend from configuration.
"""

from typing import Optional

from ..models import BackendType, PipelineConfig
from .base import TranscriptionBackend
from .gemini_client import GeminiClient
from .prompt_manager import PromptManager
from .speech_client import SpeechClient


def create_backend(config: PipelineConfig, prompt_manager: Optional[PromptManager] = None) -> TranscriptionBackend:
    """
    Factory for backend instantiation.

    Args:
        config: Pipeline configuration
        prompt_manager: Prompt source for the generative backend

    Returns:
        GeminiClient or SpeechClient

    Raises:
        BackendUnavailableError: If credentials for the backend are missing
    """
    if config.backend == BackendType.GENERATIVE:
        return GeminiClient(
            model=config.gemini_model,
            temperature=config.transcription_temperature,
            prompt_manager=prompt_manager
        )

    return SpeechClient()


def create_summary_client(config: PipelineConfig, backend: Optional[TranscriptionBackend] = None) -> GeminiClient:
    """
    Get a Gemini client for summaries, reusing the transcription backend when it is one.
    """
    if isinstance(backend, GeminiClient):
        return backend
    return GeminiClient(model=config.gemini_model, temperature=config.transcription_temperature)
