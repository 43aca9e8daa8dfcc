#!/usr/bin/env python3
"""
Meeting summary generation for the transcription pipeline.
"""

import logging
import threading
from typing import Optional

from ..exceptions import InputError, OperationCancelled
from .gemini_client import GeminiClient
from .prompt_manager import PromptManager

logger = logging.getLogger(__name__)


class SummaryGenerator:
    """
    Turns a finished transcript into structured meeting notes.
    """

    def __init__(self, gemini_client: GeminiClient, temperature: float = 0.2,
                 prompt_manager: Optional[PromptManager] = None):
        """
        Initialize the summary generator.

        Args:
            gemini_client: Client used to call the generative model
            temperature: Sampling temperature, lower than for transcription
            prompt_manager: Source of the summary prompt
        """
        self.gemini_client = gemini_client
        self.temperature = temperature
        self.prompt_manager = prompt_manager or PromptManager()
        self._cancel_event = threading.Event()

    def cancel(self):
        """Request cancellation of the current summary."""
        self._cancel_event.set()
        self.gemini_client.cancel()

    def summarize(self, transcript: str) -> str:
        """
        Summarize a transcript into discussion points, decisions and action items.

        Args:
            transcript: Full transcript text

        Returns:
            Summary text as returned by the model

        Raises:
            InputError: If the transcript is empty
            OperationCancelled: If cancel() was called
        """
        if not transcript or not transcript.strip():
            raise InputError("Nothing to summarize: transcript is empty")

        self._check_cancelled()
        prompt = self.prompt_manager.get_summary_prompt(transcript)

        logger.info("Generating summary for %d characters of transcript", len(transcript))
        summary = self.gemini_client.generate_text(prompt, temperature=self.temperature)

        # Drop a reply that arrived after cancel()
        self._check_cancelled()

        logger.info("Summary generated")
        return summary

    def _check_cancelled(self):
        if self._cancel_event.is_set():
            self._cancel_event.clear()
            raise OperationCancelled("Summary cancelled by user.")
