"""Utility functions and helpers"""

from .helpers import check_file_exists, setup_logging
from .config import ConfigManager, NormalizerConfig, EncoderConfig, OutputConfig

__all__ = [
    'check_file_exists',
    'setup_logging',
    'ConfigManager',
    'NormalizerConfig',
    'EncoderConfig',
    'OutputConfig'
]
