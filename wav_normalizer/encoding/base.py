"""Encoder capability interface"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

BACKENDS = ('ffmpeg', 'librosa')


@dataclass(frozen=True)
class EncodeOptions:
    """Target format for an encode."""
    sample_rate: int = 16000
    channels: int = 1
    codec: str = 'pcm_s16le'
    overwrite: bool = True


@dataclass(frozen=True)
class EncodeResult:
    """Exit status and diagnostic output of one encode."""
    exit_code: int
    stderr: str = ''

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class AudioEncoder(ABC):
    """Black-box audio encoder: source in, conforming WAV out."""

    name = 'base'

    @abstractmethod
    async def encode(self, source: str, destination: str,
                     options: EncodeOptions = EncodeOptions()) -> EncodeResult:
        """
        Encode `source` into `destination` using `options`.

        Implementations report failure through the exit code and never raise
        for decode/encode problems.
        """
