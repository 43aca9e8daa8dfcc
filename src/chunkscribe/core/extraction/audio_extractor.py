#!/usr/bin/env python3
"""
Audio extraction functionality for the transcription pipeline.

This module renders the audio track of a video into a 16 kHz mono WAV file
so that it can be transcribed without the video stream.
"""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Optional

from moviepy import VideoFileClip
from proglog import ProgressBarLogger

from ...exceptions import ExtractionError
from ...models import SourceFile

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]

EXTRACTED_MEDIA_TYPE = "audio/wav"


class _ProgressReporter(ProgressBarLogger):
    """Turns moviepy's progress bar updates into percentage callbacks."""

    def __init__(self, on_progress: Optional[ProgressCallback]):
        super().__init__()
        self.on_progress = on_progress
        self.last_pct = 0.0

    def bars_callback(self, bar, attr, value, old_value=None):
        if attr != 'index' or self.on_progress is None:
            return
        total = self.bars[bar].get('total')
        if not total:
            return
        pct = min(100.0, value / total * 100)
        # Only report forward movement
        if pct > self.last_pct:
            self.last_pct = pct
            self.on_progress(pct)

    def finish(self):
        if self.on_progress is not None and self.last_pct < 100.0:
            self.last_pct = 100.0
            self.on_progress(100.0)


class AudioExtractor:
    """
    Extracts the audio track from video files.
    """

    def __init__(self, sample_rate_hertz: int = 16000, work_dir: Optional[str] = None):
        """
        Initialize the audio extractor.

        Args:
            sample_rate_hertz: Sample rate of the extracted audio
            work_dir: Directory for temporary files (system default if None)
        """
        self.sample_rate_hertz = sample_rate_hertz
        self.work_dir = work_dir

    def extract_audio(self, source: SourceFile, on_progress: Optional[ProgressCallback] = None,
                      sample_rate_hertz: Optional[int] = None) -> SourceFile:
        """
        Extract the audio track of a video.

        Args:
            source: Video file to decode
            on_progress: Called with the completed percentage (0-100)
            sample_rate_hertz: Sample rate for this file (the extractor default if None)

        Returns:
            Audio-only SourceFile (audio/wav)

        Raises:
            ExtractionError: If the video cannot be decoded or has no audio
        """
        fps = sample_rate_hertz or self.sample_rate_hertz
        suffix = f".{source.extension}" if source.extension else ".mp4"
        audio_name = f"{Path(source.name).stem or 'audio'}.wav"

        with tempfile.TemporaryDirectory(dir=self.work_dir) as temp_dir:
            video_path = Path(temp_dir) / f"input{suffix}"
            audio_path = Path(temp_dir) / audio_name
            with open(video_path, 'wb') as f:
                f.write(source.data)

            reporter = _ProgressReporter(on_progress)
            try:
                with VideoFileClip(str(video_path)) as video:
                    logger.info("Video duration: %.1f seconds", video.duration or 0.0)
                    if video.audio is None:
                        raise ExtractionError(f"Video has no audio track: {source.name}")
                    video.audio.write_audiofile(
                        str(audio_path),
                        fps=fps,
                        nbytes=2,
                        codec='pcm_s16le',
                        ffmpeg_params=['-ac', '1'],
                        logger=reporter
                    )
            except ExtractionError:
                raise
            except Exception as e:
                raise ExtractionError(f"Error extracting audio from {source.name}: {e}") from e

            reporter.finish()

            with open(audio_path, 'rb') as f:
                audio_data = f.read()

        logger.info("Extracted %d bytes of audio from %s", len(audio_data), source.name)
        return SourceFile(data=audio_data, media_type=EXTRACTED_MEDIA_TYPE, name=audio_name)
