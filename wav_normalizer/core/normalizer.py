"""Normalize audio files to 16 kHz mono 16-bit PCM WAV"""

import logging
import os
from typing import Optional

from ..encoding import AudioEncoder, EncodeOptions, FfmpegEncoder
from .errors import EncoderFailure, RenameFailure, TOOL_TAG
from .header import inspect_header
from .models import AudioFile, ConversionAction, ConversionOutcome, WAV_EXTENSION

logger = logging.getLogger(__name__)


class WavNormalizer:
    """Decide whether a file needs re-encoding and carry it out."""

    def __init__(self, encoder: Optional[AudioEncoder] = None,
                 options: Optional[EncodeOptions] = None):
        """
        Initialize the normalizer.

        Args:
            encoder: Encoder backend (defaults to ffmpeg on PATH)
            options: Target format passed to the encoder
        """
        self.encoder = encoder or FfmpegEncoder()
        self.options = options or EncodeOptions()

    async def normalize(self, path: str, logger: Optional[logging.Logger] = None) -> str:
        """
        Return the path of a conforming WAV for `path`.

        Raises:
            FileReadError: If the header of a .wav input cannot be read
            EncoderFailure: If the encoder exits non-zero
            RenameFailure: If the re-encoded file cannot replace the original
        """
        outcome = await self.normalize_file(path, logger=logger)
        return outcome.path

    async def normalize_file(self, path: str,
                             logger: Optional[logging.Logger] = None) -> ConversionOutcome:
        """Like normalize() but returns the full ConversionOutcome."""
        log = logger or logging.getLogger(__name__)
        audio_file = AudioFile(str(path))

        log.debug(f"{TOOL_TAG} Checking if the file is a valid WAV: {audio_file.path}")

        if not audio_file.is_wav:
            return await self._encode_new_file(audio_file, log)

        if await inspect_header(audio_file.path):
            log.debug(f"{TOOL_TAG} File is a valid WAV file.")
            return ConversionOutcome(audio_file.path, ConversionAction.UNCHANGED)

        log.debug(f"{TOOL_TAG} File has a .wav extension but is not a valid WAV, overwriting...")
        return await self._reencode_in_place(audio_file, log)

    async def _encode_new_file(self, audio_file: AudioFile,
                               log: logging.Logger) -> ConversionOutcome:
        """Encode into a sibling .wav; the original is left untouched."""
        destination = audio_file.with_extension(WAV_EXTENSION)
        log.debug(f"{TOOL_TAG} Converting to a new WAV file: {destination}")

        await self._run_encoder(audio_file.path, destination)
        return ConversionOutcome(destination, ConversionAction.ENCODED_NEW_FILE,
                                 source=audio_file.path)

    async def _reencode_in_place(self, audio_file: AudioFile,
                                 log: logging.Logger) -> ConversionOutcome:
        """Encode into a temp sibling, then atomically rename it over the original."""
        temp_path = audio_file.temp_path()

        try:
            await self._run_encoder(audio_file.path, temp_path)
        except EncoderFailure:
            self._discard(temp_path, log)
            raise

        try:
            os.replace(temp_path, audio_file.path)
        except OSError as e:
            raise RenameFailure(temp_path, audio_file.path, str(e)) from e

        return ConversionOutcome(audio_file.path, ConversionAction.REENCODED_IN_PLACE,
                                 source=audio_file.path)

    async def _run_encoder(self, source: str, destination: str):
        result = await self.encoder.encode(source, destination, self.options)
        if not result.ok:
            raise EncoderFailure(result.exit_code, result.stderr)

    @staticmethod
    def _discard(temp_path: str, log: logging.Logger):
        """Remove a leftover temp file after a failed encode."""
        try:
            os.remove(temp_path)
        except FileNotFoundError:
            return
        except OSError as e:
            log.warning(f"{TOOL_TAG} Could not remove temporary file {temp_path}: {e}")
            return
        log.debug(f"{TOOL_TAG} Removed temporary file {temp_path}")


async def normalize(path: str, logger: Optional[logging.Logger] = None,
                    encoder: Optional[AudioEncoder] = None) -> str:
    """Normalize a single file with a default-configured WavNormalizer."""
    return await WavNormalizer(encoder=encoder).normalize(path, logger=logger)
