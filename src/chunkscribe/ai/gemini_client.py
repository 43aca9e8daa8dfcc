#!/usr/bin/env python3
"""
Gemini API client for the transcription pipeline.

This module handles all interactions with the Gemini API: verbatim chunk
transcription and plain text generation for summaries.
"""

import logging
import os
from typing import Optional

from google import genai
from google.genai import types
from dotenv import load_dotenv

from ..exceptions import BackendUnavailableError
from ..models import BackendType, Chunk, ModelType, TranscriptionSettings
from ..utils.file_utils import estimate_base64_size, format_file_size
from .base import TranscriptionBackend
from .prompt_manager import PromptManager

logger = logging.getLogger(__name__)

TOP_P = 0.95
TOP_K = 64


class GeminiClient(TranscriptionBackend):
    """
    Client for interacting with the Gemini API.
    """

    backend_type = BackendType.GENERATIVE

    def __init__(self, model: ModelType = ModelType.GEMINI_2_5_FLASH, temperature: float = 0.4,
                 prompt_manager: Optional[PromptManager] = None, client=None):
        """
        Initialize the Gemini client.

        Args:
            model: Model type to use for transcription
            temperature: Sampling temperature for transcription requests
            prompt_manager: Source of the transcription instruction
            client: Pre-built genai.Client (created from GOOGLE_API_KEY if None)
        """
        self.model = model
        self.temperature = temperature
        self.prompt_manager = prompt_manager or PromptManager()
        self.client = client if client is not None else self._setup_gemini()

    def _setup_gemini(self):
        """Initialize the Gemini API client."""
        load_dotenv()
        api_key = os.getenv('GOOGLE_API_KEY')

        if not api_key:
            raise BackendUnavailableError("GOOGLE_API_KEY not found in environment variables")

        return genai.Client(api_key=api_key)

    def transcribe(self, chunk: Chunk, settings: TranscriptionSettings) -> str:
        """
        Transcribe a chunk by sending its bytes inline with a verbatim instruction.

        Args:
            chunk: Chunk to transcribe
            settings: Recognition options (not used by the generative model)

        Returns:
            Transcript text for the chunk
        """
        prompt = self.prompt_manager.get_transcription_prompt(chunk.part_number, chunk.total)
        logger.debug("Chunk %d estimated base64 size: %s, MIME type: %s",
                     chunk.part_number, format_file_size(estimate_base64_size(chunk.size)), chunk.media_type)

        contents = types.Content(
            role='user',
            parts=[
                types.Part(text=prompt),
                types.Part(
                    inline_data=types.Blob(data=bytes(chunk.data), mime_type=chunk.media_type)
                )
            ]
        )

        logger.info("Sending part %d of %d to Gemini API...", chunk.part_number, chunk.total)
        response = self.client.models.generate_content(
            model=f'models/{self.model.value}',
            contents=contents,
            config=self._generation_config(self.temperature)
        )
        logger.info("Received response from Gemini API")

        return response.text or ""

    def generate_text(self, prompt: str, temperature: Optional[float] = None) -> str:
        """
        Send a text-only prompt and return the response text unmodified.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature (transcription temperature if None)

        Returns:
            Response text
        """
        contents = types.Content(role='user', parts=[types.Part(text=prompt)])
        response = self.client.models.generate_content(
            model=f'models/{self.model.value}',
            contents=contents,
            config=self._generation_config(self.temperature if temperature is None else temperature)
        )
        return response.text or ""

    def _generation_config(self, temperature: float) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(temperature=temperature, top_p=TOP_P, top_k=TOP_K)
