"""librosa/soundfile backend

Decodes with librosa and writes 16-bit PCM with soundfile, for hosts where an
ffmpeg binary is not available.
"""

import asyncio
import logging

import librosa
import soundfile as sf

from .base import AudioEncoder, EncodeOptions, EncodeResult

logger = logging.getLogger(__name__)

# ffmpeg codec names mapped to soundfile subtypes
SUBTYPES = {
    'pcm_s16le': 'PCM_16',
}


class LibrosaEncoder(AudioEncoder):
    """Encode in-process with librosa and soundfile."""

    name = 'librosa'

    def _encode_sync(self, source: str, destination: str, options: EncodeOptions) -> EncodeResult:
        subtype = SUBTYPES.get(options.codec)
        if subtype is None:
            return EncodeResult(1, f"Unsupported codec for librosa backend: {options.codec}")

        try:
            audio_data, _ = librosa.load(str(source), sr=options.sample_rate,
                                         mono=options.channels == 1)
            # librosa returns (channels, samples) for multi-channel audio
            if audio_data.ndim > 1:
                audio_data = audio_data.T
            sf.write(str(destination), audio_data, options.sample_rate,
                     subtype=subtype, format='WAV')
        except Exception as e:
            logger.debug(f"librosa encode of {source} failed: {e}")
            return EncodeResult(1, str(e) or type(e).__name__)

        return EncodeResult(0)

    async def encode(self, source: str, destination: str,
                     options: EncodeOptions = EncodeOptions()) -> EncodeResult:
        return await asyncio.to_thread(self._encode_sync, source, destination, options)
