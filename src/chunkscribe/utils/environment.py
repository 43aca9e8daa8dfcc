#!/usr/bin/env python3
"""
Environment checks for the transcription pipeline.

Verifies the external tools and credentials each backend needs.
"""

import os
import shutil
import sys
from typing import Dict, Tuple

from dotenv import load_dotenv


def check_python_version() -> Tuple[bool, str]:
    """Check if Python version is compatible."""
    if sys.version_info < (3, 9):
        return False, f"Python 3.9 or higher is required (current: {sys.version.split()[0]})"
    return True, f"Python version: {sys.version.split()[0]}"


def check_ffmpeg() -> Tuple[bool, str]:
    """Check if FFmpeg is available for audio extraction."""
    if shutil.which('ffmpeg'):
        return True, "FFmpeg is installed"
    return False, ("FFmpeg is not installed or not in PATH "
                   "(macOS: brew install ffmpeg, Debian/Ubuntu: sudo apt install ffmpeg)")


def check_google_api_key() -> Tuple[bool, str]:
    """Check if the Gemini API key is set."""
    load_dotenv()
    if os.getenv('GOOGLE_API_KEY'):
        return True, "GOOGLE_API_KEY is set"
    return False, "GOOGLE_API_KEY is not set (export it or add it to a .env file)"


def check_speech_credentials() -> Tuple[bool, str]:
    """Check for Application Default Credentials used by Speech-to-Text."""
    load_dotenv()
    credentials_path = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
    if credentials_path:
        if os.path.isfile(credentials_path):
            return True, f"GOOGLE_APPLICATION_CREDENTIALS: {credentials_path}"
        return False, f"GOOGLE_APPLICATION_CREDENTIALS points to a missing file: {credentials_path}"
    return False, "GOOGLE_APPLICATION_CREDENTIALS is not set (gcloud user credentials may still work)"


def run_environment_checks() -> Dict[str, Tuple[bool, str]]:
    """
    Run all checks.

    Returns:
        Mapping of check name to (passed, message)
    """
    return {
        "Python Version": check_python_version(),
        "FFmpeg": check_ffmpeg(),
        "Gemini API Key": check_google_api_key(),
        "Speech Credentials": check_speech_credentials(),
    }
