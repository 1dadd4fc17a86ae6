"""Tests for WAV header inspection"""

import asyncio
import struct
from unittest.mock import patch

import pytest

from wav_normalizer.core.errors import FileReadError
from wav_normalizer.core.header import (
    HEADER_SIZE, WavHeaderSnapshot, parse_wav_header, read_header_bytes,
    read_wav_header, is_conforming_wav, is_conforming_wav_bytes, inspect_header
)
from conftest import build_wav_header


class TestMagicBytes:
    """Container magic must be RIFF or RIFX."""

    def test_empty_input(self):
        assert is_conforming_wav_bytes(b'') is False

    @pytest.mark.parametrize('data', [b'R', b'RIF', b'RIFF'[:2]])
    def test_fewer_than_four_bytes(self, data):
        assert is_conforming_wav_bytes(data) is False

    @pytest.mark.parametrize('magic', [b'riff', b'OggS', b'ID3\x03', b'fLaC', b'RIFZ'])
    def test_wrong_magic(self, magic):
        """Anything but RIFF/RIFX is rejected regardless of what follows."""
        data = magic + build_wav_header(16000)[4:]
        assert is_conforming_wav_bytes(data) is False

    def test_non_wav_with_16k_at_offset_24(self):
        """A 16000 at offset 24 does not help without the magic."""
        data = bytearray(64)
        struct.pack_into('<I', data, 24, 16000)
        assert is_conforming_wav_bytes(bytes(data)) is False

    @pytest.mark.parametrize('magic', [b'RIFF', b'RIFX'])
    def test_both_byte_order_variants_accepted(self, magic):
        assert is_conforming_wav_bytes(build_wav_header(16000, magic=magic)) is True


class TestSampleRate:
    """Sample rate at offset 24 decides the verdict."""

    @pytest.mark.parametrize('sample_rate', [8000, 11025, 22050, 44100, 48000, 16001, 0])
    def test_other_rates_rejected(self, sample_rate):
        assert is_conforming_wav_bytes(build_wav_header(sample_rate)) is False

    def test_16k_accepted(self):
        assert is_conforming_wav_bytes(build_wav_header(16000)) is True

    def test_channels_and_bit_depth_not_inspected(self):
        """Stereo 24-bit at 16 kHz still passes; only the rate is checked."""
        assert is_conforming_wav_bytes(build_wav_header(16000, channels=2, bits=24)) is True

    def test_exactly_28_bytes_is_enough(self):
        assert is_conforming_wav_bytes(build_wav_header(16000)[:28]) is True

    @pytest.mark.parametrize('length', [5, 12, 24, 27])
    def test_truncated_header_rejected(self, length):
        assert is_conforming_wav_bytes(build_wav_header(16000)[:length]) is False


class TestParseWavHeader:
    """Test the header snapshot."""

    def test_snapshot_fields(self):
        snapshot = parse_wav_header(build_wav_header(44100, magic=b'RIFX'))
        assert snapshot == WavHeaderSnapshot(riff_magic=b'RIFX', sample_rate=44100)
        assert snapshot.is_conforming is False

    def test_truncated_snapshot_has_no_rate(self):
        snapshot = parse_wav_header(b'RIFF\x00\x00\x00\x00WAVE')
        assert snapshot.riff_magic == b'RIFF'
        assert snapshot.sample_rate is None

    def test_missing_magic_returns_none(self):
        assert parse_wav_header(b'\x00' * 44) is None

    def test_snapshot_is_immutable(self):
        snapshot = parse_wav_header(build_wav_header(16000))
        with pytest.raises(AttributeError):
            snapshot.sample_rate = 8000


class TestReadingFiles:
    """Test reading headers from disk."""

    def test_real_16k_wav(self, make_wav):
        assert is_conforming_wav(make_wav(sample_rate=16000)) is True

    def test_real_44k_wav(self, make_wav):
        path = make_wav(sample_rate=44100, channels=2)
        assert is_conforming_wav(path) is False
        assert read_wav_header(path).sample_rate == 44100

    def test_empty_file(self, temp_dir):
        path = temp_dir / 'empty.wav'
        path.write_bytes(b'')
        assert is_conforming_wav(path) is False

    def test_reads_at_most_header_size(self, temp_dir):
        path = temp_dir / 'big.wav'
        path.write_bytes(build_wav_header(16000) + b'\x01' * 1_000_000)
        assert len(read_header_bytes(path)) == HEADER_SIZE

    def test_short_reads_are_accumulated(self, temp_dir):
        """Chunks are appended until the header is complete."""
        path = temp_dir / 'speech.wav'
        path.write_bytes(build_wav_header(16000))

        real_open = open

        class TrickleFile:
            def __init__(self, f):
                self.f = f

            def read(self, n):
                return self.f.read(min(n, 5))

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.f.close()

        with patch('builtins.open', lambda p, mode='r': TrickleFile(real_open(p, mode))):
            assert read_header_bytes(path) == build_wav_header(16000)

    def test_missing_file_raises_file_read_error(self, temp_dir):
        with pytest.raises(FileReadError) as exc_info:
            is_conforming_wav(temp_dir / 'missing.wav')
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert str(exc_info.value).startswith('[wav-normalizer]')

    def test_inspect_header_async(self, make_wav):
        assert asyncio.run(inspect_header(make_wav(sample_rate=16000))) is True
        assert asyncio.run(inspect_header(make_wav('other.wav', sample_rate=8000))) is False
