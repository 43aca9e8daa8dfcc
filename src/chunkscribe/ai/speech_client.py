#!/usr/bin/env python3
"""
Google Cloud Speech-to-Text client for the transcription pipeline.

This module builds recognition requests for a chunk and turns the response
into plain or speaker-labeled text.
"""

import logging
from typing import Iterable, Optional

from dotenv import load_dotenv
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import speech

from ..exceptions import BackendUnavailableError
from ..models import BackendType, Chunk, TranscriptionSettings
from .base import TranscriptionBackend

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'LINEAR16'

# Content type -> Speech-to-Text encoding name
MEDIA_TYPE_ENCODINGS = {
    'audio/wav': 'LINEAR16',
    'audio/x-wav': 'LINEAR16',
    'audio/wave': 'LINEAR16',
    'audio/flac': 'FLAC',
    'audio/x-flac': 'FLAC',
    'audio/mp3': 'MP3',
    'audio/mpeg': 'MP3',
    'audio/ogg': 'OGG_OPUS',
    'audio/webm': 'WEBM_OPUS',
    'audio/amr': 'AMR',
    'audio/amr-wb': 'AMR_WB',
}


def get_audio_encoding(media_type: str) -> str:
    """Map a content type to an encoding name, LINEAR16 if unmapped."""
    return MEDIA_TYPE_ENCODINGS.get(media_type, DEFAULT_ENCODING)


def build_recognition_config(media_type: str, settings: TranscriptionSettings) -> speech.RecognitionConfig:
    """
    Build the recognition config for a chunk.

    Args:
        media_type: Content type of the chunk
        settings: Recognition options for this run

    Returns:
        RecognitionConfig message
    """
    encoding = get_audio_encoding(media_type)
    config = speech.RecognitionConfig(
        encoding=speech.RecognitionConfig.AudioEncoding[encoding],
        sample_rate_hertz=settings.sample_rate_hertz,
        language_code=settings.language_code,
        enable_automatic_punctuation=settings.enable_automatic_punctuation,
        enable_word_time_offsets=settings.enable_word_time_offsets,
        model=settings.model,
    )

    if settings.enable_speaker_diarization:
        config.diarization_config = speech.SpeakerDiarizationConfig(
            enable_speaker_diarization=True,
            min_speaker_count=settings.speaker_count,
            max_speaker_count=settings.speaker_count,
        )

    return config


def _top_alternative(result):
    alternatives = getattr(result, 'alternatives', None)
    if not alternatives:
        return None
    return alternatives[0]


def format_plain_transcript(results: Iterable) -> str:
    """Space-join the top alternative of every result, in order."""
    texts = []
    for result in results:
        alternative = _top_alternative(result)
        if alternative is not None:
            texts.append(alternative.transcript)
    return " ".join(texts)


def format_diarized_transcript(results: Iterable) -> str:
    """
    Build a speaker-labeled transcript from word-level speaker tags.

    A new "Speaker N: " paragraph starts whenever the tag changes. Results
    without word detail are appended unlabeled.
    """
    text = ""
    current_speaker: Optional[int] = None

    for result in results:
        alternative = _top_alternative(result)
        if alternative is None:
            continue

        words = list(getattr(alternative, 'words', None) or [])
        if not words:
            text += alternative.transcript.strip() + " "
            continue

        for word_info in words:
            speaker = getattr(word_info, 'speaker_tag', 0) or 1
            if speaker != current_speaker:
                text = text.rstrip() + f"\n\nSpeaker {speaker}: "
                current_speaker = speaker
            text += word_info.word + " "

    return text.strip()


class SpeechClient(TranscriptionBackend):
    """
    Client for the Google Cloud Speech-to-Text API.
    """

    backend_type = BackendType.SPEECH_RECOGNITION

    def __init__(self, client=None):
        """
        Initialize the Speech-to-Text client.

        Args:
            client: Pre-built speech.SpeechClient (uses Application Default Credentials if None)
        """
        self.client = client if client is not None else self._setup_speech()

    def _setup_speech(self):
        """Initialize the Speech-to-Text API client."""
        load_dotenv()
        try:
            return speech.SpeechClient()
        except DefaultCredentialsError as e:
            raise BackendUnavailableError(f"Error initializing Speech client: {e}") from e

    def transcribe(self, chunk: Chunk, settings: TranscriptionSettings) -> str:
        """
        Transcribe a chunk with synchronous recognition.

        Args:
            chunk: Chunk to transcribe
            settings: Recognition options for this run

        Returns:
            Transcript text, speaker-labeled when diarization is enabled
        """
        config = build_recognition_config(chunk.media_type, settings)
        audio = speech.RecognitionAudio(content=bytes(chunk.data))

        logger.info("Sending part %d of %d to Speech-to-Text (%s)",
                    chunk.part_number, chunk.total, get_audio_encoding(chunk.media_type))
        response = self.client.recognize(config=config, audio=audio)

        results = list(response.results or [])
        if not results:
            logger.info("No speech recognized in part %d", chunk.part_number)
            return ""

        if settings.enable_speaker_diarization:
            return format_diarized_transcript(results)
        return format_plain_transcript(results)
