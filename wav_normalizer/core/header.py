"""WAV header inspection

Decides from raw header bytes alone whether a file is already a WAV container
at the sample rate the downstream pipeline expects. Only the container magic
and the sample rate field are examined; channel count and bit depth are
trusted as-is.
"""

import asyncio
import os
import logging
import struct
from dataclasses import dataclass
from typing import Optional, Union

from .errors import FileReadError

logger = logging.getLogger(__name__)

# Minimum size of a canonical WAV header
HEADER_SIZE = 44
SAMPLE_RATE_OFFSET = 24
REQUIRED_SAMPLE_RATE = 16000
RIFF_MAGICS = (b'RIFF', b'RIFX')


@dataclass(frozen=True)
class WavHeaderSnapshot:
    """Minimal parsed view of a WAV header."""
    riff_magic: bytes
    sample_rate: Optional[int] = None

    @property
    def is_conforming(self) -> bool:
        return self.sample_rate == REQUIRED_SAMPLE_RATE


def parse_wav_header(data: bytes) -> Optional[WavHeaderSnapshot]:
    """
    Parse the leading bytes of a file into a header snapshot.

    Args:
        data: The first bytes of the file (at most HEADER_SIZE are used)

    Returns:
        Snapshot, or None if the container magic is missing or wrong
    """
    data = data[:HEADER_SIZE]
    magic = data[:4]
    if len(magic) < 4 or magic not in RIFF_MAGICS:
        return None

    # Truncated headers keep the magic but have no sample rate
    if len(data) < SAMPLE_RATE_OFFSET + 4:
        return WavHeaderSnapshot(riff_magic=magic)

    # Always little-endian, even for RIFX
    (sample_rate,) = struct.unpack_from('<I', data, SAMPLE_RATE_OFFSET)
    return WavHeaderSnapshot(riff_magic=magic, sample_rate=sample_rate)


def read_header_bytes(path: Union[str, os.PathLike]) -> bytes:
    """Read at most HEADER_SIZE bytes from the start of a file."""
    buffer = bytearray()
    try:
        with open(path, 'rb') as f:
            while len(buffer) < HEADER_SIZE:
                chunk = f.read(HEADER_SIZE - len(buffer))
                if not chunk:
                    break
                buffer.extend(chunk)
    except OSError as e:
        raise FileReadError(str(path), str(e)) from e
    return bytes(buffer)


def read_wav_header(path) -> Optional[WavHeaderSnapshot]:
    """Read and parse the header of the file at `path`."""
    return parse_wav_header(read_header_bytes(path))


def is_conforming_wav_bytes(data: bytes) -> bool:
    """Check an in-memory buffer against the conforming-WAV rules."""
    snapshot = parse_wav_header(data)
    return snapshot is not None and snapshot.is_conforming


def is_conforming_wav(path) -> bool:
    """
    Check whether a file is a RIFF/RIFX container sampled at 16 kHz.

    Raises:
        FileReadError: If the file cannot be opened or read
    """
    snapshot = read_wav_header(path)
    if snapshot is None:
        logger.debug(f"No RIFF/RIFX magic in {path}")
        return False
    if snapshot.sample_rate is None:
        logger.debug(f"Truncated WAV header in {path}")
        return False
    return snapshot.is_conforming


async def inspect_header(path) -> bool:
    """Async variant of is_conforming_wav; the read runs in a worker thread."""
    return await asyncio.to_thread(is_conforming_wav, path)
