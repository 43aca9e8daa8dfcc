#!/usr/bin/env python3
"""
Data models and configuration classes for the transcription pipeline.

This module contains all the data structures, configuration classes,
and type definitions used throughout the transcription pipeline.
"""

import os
from dataclasses import dataclass, asdict, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class ModelType(Enum):
    """Supported Gemini models for transcription and summaries."""
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_PRO = "gemini-2.5-pro"
    GEMINI_2_0_FLASH = "gemini-2.0-flash"
    GEMINI_1_5_FLASH = "gemini-1.5-flash"


class BackendType(Enum):
    """Transcription backends a pipeline run can be routed to."""
    GENERATIVE = "generative"
    SPEECH_RECOGNITION = "speechRecognition"


class RunStatus(Enum):
    """States of a single pipeline run."""
    IDLE = "idle"
    PREPARING = "preparing"
    EXTRACTING_AUDIO = "extracting_audio"
    CHUNKING = "chunking"
    TRANSCRIBING = "transcribing"
    JOINING = "joining"
    DONE = "done"
    ABORTED = "aborted"
    ERRORED = "errored"


@dataclass(frozen=True)
class SourceFile:
    """A media file selected for transcription."""
    data: bytes
    media_type: str
    name: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lowercase extension after the last dot, or empty string."""
        if '.' not in self.name:
            return ""
        return self.name.rsplit('.', 1)[-1].lower()

    @classmethod
    def from_path(cls, path: str, media_type: str = "") -> 'SourceFile':
        """
        Read a file from disk.

        Args:
            path: Path to the audio or video file
            media_type: Declared media type, if the caller knows it

        Returns:
            SourceFile holding the file bytes
        """
        file_path = Path(path)
        with open(file_path, 'rb') as f:
            data = f.read()
        return cls(data=data, media_type=media_type, name=file_path.name)

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, media_type={self.media_type!r}, size={self.size})"


@dataclass(frozen=True)
class Chunk:
    """
    Contiguous byte range of a SourceFile.

    data is a view into the parent's buffer, not a copy. media_type and
    name are copied from the parent file, never re-derived.
    """
    data: memoryview
    media_type: str
    name: str
    index: int
    total: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def part_number(self) -> int:
        """1-based position used in prompts and placeholders."""
        return self.index + 1

    def __repr__(self) -> str:
        return (f"Chunk(name={self.name!r}, index={self.index}, total={self.total}, "
                f"range=[{self.start}, {self.end}))")


# Original option names accepted alongside the snake_case field names
_SETTINGS_ALIASES = {
    'languageCode': 'language_code',
    'enableAutomaticPunctuation': 'enable_automatic_punctuation',
    'enableWordTimeOffsets': 'enable_word_time_offsets',
    'enableSpeakerDiarization': 'enable_speaker_diarization',
    'speakerCount': 'speaker_count',
    'diarizationSpeakerCount': 'speaker_count',
    'sampleRateHertz': 'sample_rate_hertz',
}


@dataclass(frozen=True)
class TranscriptionSettings:
    """Per-run recognition options shared by both backends."""
    language_code: str = "en-US"
    model: str = "default"
    enable_automatic_punctuation: bool = True
    enable_word_time_offsets: bool = True
    enable_speaker_diarization: bool = False
    speaker_count: int = 2
    sample_rate_hertz: int = 16000

    def __post_init__(self):
        if not self.language_code:
            raise ValueError("language_code cannot be empty")
        if self.speaker_count < 1:
            raise ValueError("speaker_count must be at least 1")
        if self.sample_rate_hertz <= 0:
            raise ValueError("sample_rate_hertz must be positive")

    @classmethod
    def from_overrides(cls, overrides: Optional[Dict[str, Any]] = None) -> 'TranscriptionSettings':
        """
        Build settings from defaults plus caller overrides.

        Unknown keys are rejected. None values are ignored so that unset
        CLI flags fall through to the defaults.
        """
        return cls().merged(overrides or {})

    def merged(self, overrides: Dict[str, Any]) -> 'TranscriptionSettings':
        """Return a copy with overrides applied field by field."""
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = _SETTINGS_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown transcription setting: {key}")
            if value is not None:
                changes[name] = value
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class ChunkResult:
    """Outcome of transcribing one chunk: text or an error, never both."""
    index: int
    text: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.text is None) == (self.error is None):
            raise ValueError("ChunkResult must carry exactly one of text or error")

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, index: int, text: str) -> 'ChunkResult':
        return cls(index=index, text=text)

    @classmethod
    def failed(cls, index: int, error: str) -> 'ChunkResult':
        return cls(index=index, error=error)

    def to_dict(self) -> Dict:
        return {'index': self.index, 'text': self.text, 'error': self.error, 'success': self.success}


@dataclass
class TranscriptionRun:
    """Aggregate over one pipeline invocation."""
    source_name: str = ""
    media_type: str = ""
    status: RunStatus = RunStatus.IDLE
    results: List[ChunkResult] = field(default_factory=list)
    cancelled: bool = False
    transcript: str = ""
    used_audio_extraction: bool = False
    error: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    @property
    def total_chunks(self) -> int:
        return len(self.results)

    @property
    def failed_chunks(self) -> List[int]:
        return [r.index for r in self.results if not r.success]

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'source_name': self.source_name,
            'media_type': self.media_type,
            'status': self.status.value,
            'results': [r.to_dict() for r in self.results],
            'cancelled': self.cancelled,
            'transcript': self.transcript,
            'used_audio_extraction': self.used_audio_extraction,
            'failed_chunks': self.failed_chunks,
            'error': self.error,
            'start_time': self.start_time,
            'end_time': self.end_time,
        }


@dataclass
class PipelineConfig:
    """
    Configuration class for transcription pipeline settings.

    This class provides validation and serialization for pipeline configuration,
    ensuring consistent behavior across different runs.
    """
    # Backend selection
    backend: BackendType = BackendType.SPEECH_RECOGNITION

    # Chunking settings
    max_chunk_size_mb: float = 15

    # Gemini settings
    gemini_model: ModelType = ModelType.GEMINI_2_5_FLASH
    transcription_temperature: float = 0.4
    summary_temperature: float = 0.2

    # Pipeline behavior settings
    chunk_delay_seconds: float = 1.0
    extract_audio: bool = True

    # Recognition options passed to the backend
    settings: TranscriptionSettings = field(default_factory=TranscriptionSettings)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration parameters."""
        if not isinstance(self.backend, BackendType):
            try:
                self.backend = BackendType(self.backend)
            except ValueError:
                raise ValueError(f"Invalid backend: {self.backend}. Must be one of {[b.value for b in BackendType]}")

        if not isinstance(self.gemini_model, ModelType):
            try:
                self.gemini_model = ModelType(self.gemini_model)
            except ValueError:
                raise ValueError(f"Invalid model: {self.gemini_model}. Must be one of {[m.value for m in ModelType]}")

        if isinstance(self.settings, dict):
            self.settings = TranscriptionSettings.from_overrides(self.settings)

        if self.max_chunk_size_mb <= 0:
            raise ValueError("max_chunk_size_mb must be positive")

        if self.max_chunk_size_mb > 1000:  # 1GB
            raise ValueError("max_chunk_size_mb should not exceed 1000 MB (1GB)")

        if self.chunk_delay_seconds < 0:
            raise ValueError("chunk_delay_seconds cannot be negative")

        for name in ('transcription_temperature', 'summary_temperature'):
            if not 0.0 <= getattr(self, name) <= 2.0:
                raise ValueError(f"{name} must be between 0.0 and 2.0")

    @property
    def max_chunk_bytes(self) -> int:
        return int(self.max_chunk_size_mb * 1024 * 1024)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary for serialization."""
        config_dict = asdict(self)
        # Convert enums to strings for JSON serialization
        config_dict['backend'] = self.backend.value
        config_dict['gemini_model'] = self.gemini_model.value
        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'PipelineConfig':
        """Create configuration from dictionary."""
        config_dict = dict(config_dict)
        if 'backend' in config_dict and isinstance(config_dict['backend'], str):
            config_dict['backend'] = BackendType(config_dict['backend'])
        if 'gemini_model' in config_dict and isinstance(config_dict['gemini_model'], str):
            config_dict['gemini_model'] = ModelType(config_dict['gemini_model'])
        if isinstance(config_dict.get('settings'), dict):
            config_dict['settings'] = TranscriptionSettings.from_overrides(config_dict['settings'])
        return cls(**config_dict)

    @classmethod
    def from_env(cls, **overrides) -> 'PipelineConfig':
        """
        Create configuration from CHUNKSCRIBE_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        env_values: Dict[str, Any] = {}
        if os.getenv('CHUNKSCRIBE_BACKEND'):
            env_values['backend'] = os.getenv('CHUNKSCRIBE_BACKEND')
        if os.getenv('CHUNKSCRIBE_MAX_CHUNK_MB'):
            env_values['max_chunk_size_mb'] = float(os.getenv('CHUNKSCRIBE_MAX_CHUNK_MB'))
        if os.getenv('CHUNKSCRIBE_GEMINI_MODEL'):
            env_values['gemini_model'] = os.getenv('CHUNKSCRIBE_GEMINI_MODEL')
        if os.getenv('CHUNKSCRIBE_LANGUAGE'):
            env_values['settings'] = {'language_code': os.getenv('CHUNKSCRIBE_LANGUAGE')}

        env_values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(env_values)

    def __str__(self) -> str:
        """String representation of configuration."""
        return (f"PipelineConfig(backend={self.backend.value}, max_chunk_size_mb={self.max_chunk_size_mb}, "
                f"gemini_model={self.gemini_model.value}, language={self.settings.language_code}, "
                f"diarization={self.settings.enable_speaker_diarization})")
