#!/usr/bin/env python3
"""
Utility functions for the transcription pipeline.

This module provides common utility functions used throughout the pipeline.
"""

from .file_utils import (
    estimate_base64_size,
    requires_chunking,
    format_file_size,
    ensure_directory,
    write_text_file
)
from .config_utils import load_config, save_config, merge_configs
from .environment import run_environment_checks

__all__ = [
    'estimate_base64_size',
    'requires_chunking',
    'format_file_size',
    'ensure_directory',
    'write_text_file',
    'load_config',
    'save_config',
    'merge_configs',
    'run_environment_checks'
]
