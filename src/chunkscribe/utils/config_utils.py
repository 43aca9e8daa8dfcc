#!/usr/bin/env python3
"""
Configuration utility functions for the transcription pipeline.
"""

import json
import logging
from typing import Dict, Any, Optional

from ..models import PipelineConfig

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Optional[PipelineConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        PipelineConfig object or None
    """
    try:
        with open(config_path, 'r') as f:
            config_dict = json.load(f)
        return PipelineConfig.from_dict(config_dict)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Error loading config %s: %s", config_path, e)
        return None


def save_config(config: PipelineConfig, config_path: str) -> bool:
    """
    Save configuration to a JSON file.

    Args:
        config: PipelineConfig object
        config_path: Path to save configuration

    Returns:
        True if successful, False otherwise
    """
    try:
        with open(config_path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Error saving config %s: %s", config_path, e)
        return False


def merge_configs(base_config: PipelineConfig, override_dict: Dict[str, Any]) -> PipelineConfig:
    """
    Merge a base configuration with override values.

    Recognition settings are merged field by field rather than replaced.

    Args:
        base_config: Base configuration
        override_dict: Override values

    Returns:
        New PipelineConfig with merged values
    """
    base_dict = base_config.to_dict()
    overrides = {k: v for k, v in override_dict.items() if v is not None}

    settings_overrides = overrides.pop('settings', None) or {}
    base_dict.update(overrides)
    base_dict['settings'] = base_config.settings.merged(settings_overrides)
    return PipelineConfig.from_dict(base_dict)
