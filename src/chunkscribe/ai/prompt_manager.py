#!/usr/bin/env python3
"""
Prompt management for the transcription pipeline.

This module handles the instructions sent to the generative model for
chunk transcription and meeting summaries.
"""

from pathlib import Path
from typing import Optional

DEFAULT_TRANSCRIPTION_PROMPT = (
    "Please provide a verbatim transcription of this {part_info}audio. "
    "Include all spoken words exactly as heard, with no summarization, commentary, or analysis. "
    "Include filler words, stutters, and false starts. Just transcribe the exact speech."
)

DEFAULT_SUMMARY_PROMPT = """You are an assistant that writes concise, accurate meeting notes.

Based on the meeting transcript below, write a structured summary with exactly these three sections:

## Key Discussion Points
- The main topics that were discussed, one bullet per topic.

## Key Decisions
- Every decision the participants agreed on. Write "None recorded" if there were none.

## Action Items
- Each follow-up task, with the owner and due date when they are mentioned. Write "None recorded" if there were none.

Only use information that appears in the transcript.

TRANSCRIPT:
{transcript}"""


class PromptManager:
    """
    Manages prompts for the transcription pipeline.
    """

    def __init__(self, prompt_file_path: Optional[str] = None, summary_prompt_file_path: Optional[str] = None):
        """
        Initialize the prompt manager.

        Args:
            prompt_file_path: Path to a transcription prompt file (optional)
            summary_prompt_file_path: Path to a summary prompt file (optional)
        """
        self.prompt_file_path = Path(prompt_file_path) if prompt_file_path else None
        self.summary_prompt_file_path = Path(summary_prompt_file_path) if summary_prompt_file_path else None

        self._transcription_prompt = None
        self._summary_prompt = None

    def get_transcription_prompt(self, part_number: int = 0, total_parts: int = 0) -> str:
        """
        Get the verbatim transcription prompt for a chunk.

        Args:
            part_number: 1-based chunk number (0 when the file is not chunked)
            total_parts: Total number of chunks

        Returns:
            Formatted prompt string
        """
        part_info = ""
        if part_number and total_parts > 1:
            part_info = f"part {part_number} of {total_parts} of the "

        return self._load_transcription_prompt().replace("{part_info}", part_info)

    def get_summary_prompt(self, transcript: str) -> str:
        """
        Get the structured meeting summary prompt.

        Args:
            transcript: Full transcript text to summarize

        Returns:
            Prompt with the transcript embedded
        """
        return self._load_summary_prompt().replace("{transcript}", transcript)

    def _load_transcription_prompt(self) -> str:
        if self._transcription_prompt is None:
            self._transcription_prompt = self._read_prompt(self.prompt_file_path, DEFAULT_TRANSCRIPTION_PROMPT)
        return self._transcription_prompt

    def _load_summary_prompt(self) -> str:
        if self._summary_prompt is None:
            self._summary_prompt = self._read_prompt(self.summary_prompt_file_path, DEFAULT_SUMMARY_PROMPT)
        return self._summary_prompt

    def _read_prompt(self, path: Optional[Path], default: str) -> str:
        """Load a prompt from file, falling back to the built-in one."""
        if path is None:
            return default
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            return default

    def set_prompt_file(self, prompt_file_path: str):
        """
        Set a new transcription prompt file path.

        Args:
            prompt_file_path: Path to the new prompt file
        """
        self.prompt_file_path = Path(prompt_file_path)
        self._transcription_prompt = None  # Reset to force reload

    def get_prompt_info(self) -> dict:
        """
        Get information about the current prompt configuration.

        Returns:
            Dictionary containing prompt information
        """
        return {
            "prompt_file_path": str(self.prompt_file_path) if self.prompt_file_path else None,
            "prompt_file_exists": bool(self.prompt_file_path and self.prompt_file_path.exists()),
            "summary_prompt_file_path": str(self.summary_prompt_file_path) if self.summary_prompt_file_path else None,
            "prompt_loaded": self._transcription_prompt is not None
        }
