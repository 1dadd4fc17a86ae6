"""WAV Normalizer - canonical 16 kHz mono PCM WAV for speech pipelines

Inspects a file's header and re-encodes it only when it is not already a
16 kHz RIFF/RIFX WAV.
"""

__version__ = "1.0.0"
__author__ = "WAV Normalizer Project"

from .core.errors import NormalizationError, FileReadError, EncoderFailure, RenameFailure
from .core.header import WavHeaderSnapshot, is_conforming_wav, read_wav_header
from .core.models import AudioFile, ConversionAction, ConversionOutcome
from .core.normalizer import WavNormalizer, normalize
from .encoding import AudioEncoder, EncodeOptions, EncodeResult, FfmpegEncoder, create_encoder

__all__ = [
    'NormalizationError',
    'FileReadError',
    'EncoderFailure',
    'RenameFailure',
    'WavHeaderSnapshot',
    'is_conforming_wav',
    'read_wav_header',
    'AudioFile',
    'ConversionAction',
    'ConversionOutcome',
    'WavNormalizer',
    'normalize',
    'AudioEncoder',
    'EncodeOptions',
    'EncodeResult',
    'FfmpegEncoder',
    'create_encoder'
]
