"""
Tests for audio extraction from video files.
"""

from unittest.mock import MagicMock

import pytest

from chunkscribe.core.extraction import AudioExtractor, EXTRACTED_MEDIA_TYPE
from chunkscribe.core.extraction import audio_extractor
from chunkscribe.exceptions import ExtractionError
from chunkscribe.models import SourceFile


def _video_source(name="standup.mov"):
    return SourceFile(data=b"fake video bytes", media_type="video/quicktime", name=name)


def _fake_clip(audio, opened_paths):
    def _open(path):
        opened_paths.append(path)
        clip = MagicMock()
        clip.__enter__.return_value = clip
        clip.duration = 12.0
        clip.audio = audio
        return clip
    return _open


def _fake_audio(payload=b"RIFF....WAVEfmt "):
    audio = MagicMock()

    def _write_audiofile(path, fps, nbytes, codec, ffmpeg_params, logger):
        logger(chunk__total=4)
        for i in range(1, 5):
            logger(chunk__index=i)
        with open(path, 'wb') as f:
            f.write(payload)

    audio.write_audiofile.side_effect = _write_audiofile
    return audio


def test_extracts_mono_wav_and_reports_progress(monkeypatch):
    opened = []
    audio = _fake_audio(b"wav payload")
    monkeypatch.setattr(audio_extractor, "VideoFileClip", _fake_clip(audio, opened))
    progress = []

    result = AudioExtractor(sample_rate_hertz=16000).extract_audio(_video_source(), progress.append)

    assert result.data == b"wav payload"
    assert result.media_type == EXTRACTED_MEDIA_TYPE == "audio/wav"
    assert result.name == "standup.wav"
    assert opened[0].endswith(".mov")

    kwargs = audio.write_audiofile.call_args.kwargs
    assert kwargs['fps'] == 16000
    assert kwargs['ffmpeg_params'] == ['-ac', '1']

    assert progress
    assert progress == sorted(progress)
    assert progress[-1] == 100.0


def test_progress_is_optional(monkeypatch):
    monkeypatch.setattr(audio_extractor, "VideoFileClip", _fake_clip(_fake_audio(), []))

    result = AudioExtractor().extract_audio(_video_source("clip.mp4"))

    assert result.name == "clip.wav"


def test_video_without_audio_track_fails(monkeypatch):
    monkeypatch.setattr(audio_extractor, "VideoFileClip", _fake_clip(None, []))

    with pytest.raises(ExtractionError, match="no audio track"):
        AudioExtractor().extract_audio(_video_source())


def test_decoder_errors_become_extraction_errors(monkeypatch):
    def _broken(path):
        raise OSError("MoviePy error: failed to read the duration of file")

    monkeypatch.setattr(audio_extractor, "VideoFileClip", _broken)

    with pytest.raises(ExtractionError) as exc_info:
        AudioExtractor().extract_audio(_video_source())
    assert isinstance(exc_info.value.__cause__, OSError)


def test_per_file_sample_rate_overrides_default(monkeypatch):
    audio = _fake_audio()
    monkeypatch.setattr(audio_extractor, "VideoFileClip", _fake_clip(audio, []))

    AudioExtractor(sample_rate_hertz=16000).extract_audio(_video_source(), sample_rate_hertz=44100)

    assert audio.write_audiofile.call_args.kwargs['fps'] == 44100
