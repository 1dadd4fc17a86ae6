"""Pytest fixtures for wav_normalizer tests"""

import logging
import shutil
import struct
import tempfile
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from wav_normalizer.encoding import AudioEncoder, EncodeOptions, EncodeResult


def build_wav_header(sample_rate=16000, magic=b'RIFF', channels=1, bits=16, data_size=0):
    """Build a canonical 44-byte PCM WAV header."""
    byte_rate = sample_rate * channels * bits // 8
    block_align = channels * bits // 8
    return (
        magic + struct.pack('<I', 36 + data_size) + b'WAVE'
        + b'fmt ' + struct.pack('<IHHIIHH', 16, 1, channels, sample_rate, byte_rate, block_align, bits)
        + b'data' + struct.pack('<I', data_size)
    )


class FakeEncoder(AudioEncoder):
    """Encoder double that writes a silent 16 kHz WAV or fails on demand."""

    name = 'fake'

    def __init__(self, exit_code=0, stderr='', write_partial=False):
        self.exit_code = exit_code
        self.stderr = stderr
        self.write_partial = write_partial
        self.calls = []

    async def encode(self, source, destination, options=EncodeOptions()):
        self.calls.append((source, destination, options))
        if self.exit_code != 0:
            if self.write_partial:
                Path(destination).write_bytes(b'RIFF\x00\x00')
            return EncodeResult(self.exit_code, self.stderr)

        silence = np.zeros(options.sample_rate // 10, dtype=np.int16)
        sf.write(destination, silence, options.sample_rate, subtype='PCM_16', format='WAV')
        return EncodeResult(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_audio_data():
    """Half a second of a 440 Hz sine wave at 44.1 kHz, stereo float32."""
    sample_rate = 44100
    t = np.linspace(0, 0.5, sample_rate // 2, False)
    tone = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    return np.stack([tone, tone], axis=1).astype(np.float32), sample_rate


@pytest.fixture
def make_wav(temp_dir):
    """Factory writing a real WAV file at the given sample rate."""
    def _make_wav(name='speech.wav', sample_rate=16000, channels=1, seconds=0.25):
        path = temp_dir / name
        frames = int(sample_rate * seconds)
        data = np.zeros((frames, channels), dtype=np.int16)
        sf.write(str(path), data, sample_rate, subtype='PCM_16', format='WAV')
        return path
    return _make_wav


@pytest.fixture
def fake_encoder():
    """Encoder double that always succeeds."""
    return FakeEncoder()


@pytest.fixture
def failing_encoder():
    """Encoder double that exits 1 after leaving a partial temp file."""
    return FakeEncoder(exit_code=1, stderr='Invalid data found when processing input', write_partial=True)


@pytest.fixture
def encoder_factory():
    """Factory for encoder doubles with a chosen exit code and stderr."""
    return FakeEncoder


@pytest.fixture
def reset_logging():
    """Drop handlers installed by setup_logging so later tests are unaffected."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
