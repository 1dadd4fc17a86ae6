"""Core header inspection and normalization"""

from .errors import NormalizationError, FileReadError, EncoderFailure, RenameFailure
from .header import WavHeaderSnapshot, is_conforming_wav, inspect_header
from .models import AudioFile, ConversionAction, ConversionOutcome
from .normalizer import WavNormalizer, normalize
