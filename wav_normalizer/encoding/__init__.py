"""Encoder backends"""

from .base import BACKENDS, AudioEncoder, EncodeOptions, EncodeResult
from .ffmpeg import FfmpegEncoder


def create_encoder(config=None) -> AudioEncoder:
    """
    Build the encoder named by `config.encoder.backend` (ffmpeg by default).

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = 'ffmpeg'
    ffmpeg_path = 'ffmpeg'
    if config is not None and hasattr(config, 'encoder'):
        backend = config.encoder.backend
        ffmpeg_path = config.encoder.ffmpeg_path

    if backend == 'ffmpeg':
        return FfmpegEncoder(binary=ffmpeg_path)
    if backend == 'librosa':
        # Heavy import, only when asked for
        from .librosa_encoder import LibrosaEncoder
        return LibrosaEncoder()
    raise ValueError(f"Unknown encoder backend '{backend}'. Choose from: {', '.join(BACKENDS)}")


__all__ = [
    'AudioEncoder',
    'EncodeOptions',
    'EncodeResult',
    'FfmpegEncoder',
    'BACKENDS',
    'create_encoder'
]
