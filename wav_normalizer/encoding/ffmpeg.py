"""ffmpeg subprocess backend"""

import asyncio
import logging
from typing import List

from .base import AudioEncoder, EncodeOptions, EncodeResult

logger = logging.getLogger(__name__)

# Exit codes a shell reports for a missing or non-executable command
COMMAND_NOT_FOUND = 127
CANNOT_EXECUTE = 126


class FfmpegEncoder(AudioEncoder):
    """Encode by invoking the ffmpeg binary as a subprocess."""

    name = 'ffmpeg'

    def __init__(self, binary: str = 'ffmpeg'):
        self.binary = binary

    def build_command(self, source: str, destination: str,
                      options: EncodeOptions = EncodeOptions()) -> List[str]:
        """Argument vector for one encode."""
        command = [self.binary, '-nostats', '-loglevel', 'error']
        if options.overwrite:
            command.append('-y')
        command += [
            '-i', str(source),
            '-ar', str(options.sample_rate),
            '-ac', str(options.channels),
            '-c:a', options.codec,
            str(destination),
        ]
        return command

    async def encode(self, source: str, destination: str,
                     options: EncodeOptions = EncodeOptions()) -> EncodeResult:
        command = self.build_command(source, destination, options)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return EncodeResult(COMMAND_NOT_FOUND, f"{self.binary}: command not found")
        except PermissionError:
            return EncodeResult(CANNOT_EXECUTE, f"{self.binary}: permission denied")
        except OSError as e:
            return EncodeResult(CANNOT_EXECUTE, f"{self.binary}: {e}")

        _, stderr = await process.communicate()
        return EncodeResult(process.returncode, stderr.decode('utf-8', errors='replace'))
