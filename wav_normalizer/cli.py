"""Command line interface for the WAV normalizer"""

import argparse
import asyncio
import logging
from typing import List, Optional

from .core.errors import NormalizationError
from .core.normalizer import WavNormalizer
from .encoding import BACKENDS, create_encoder
from .utils.config import ConfigManager
from .utils.helpers import check_file_exists, setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='wav-normalizer',
        description='Normalize an audio file to 16 kHz mono 16-bit PCM WAV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wav_normalizer speech.mp3                   # Writes speech.wav next to it
  python -m wav_normalizer speech.wav                   # Re-encodes in place if not 16 kHz
  python -m wav_normalizer speech.m4a --backend librosa # Encode without ffmpeg
  python -m wav_normalizer --create-config config.json  # Create default config file
        """
    )

    parser.add_argument('input', nargs='?',
                        help='Audio file to normalize')

    # Configuration file
    parser.add_argument('--config', type=str,
                        help='Load configuration from JSON file')
    parser.add_argument('--create-config', type=str,
                        help='Create default configuration file at specified path')

    # Encoder
    parser.add_argument('--backend', choices=BACKENDS,
                        help='Encoder backend (default: ffmpeg)')
    parser.add_argument('--ffmpeg-path', type=str,
                        help='Path to the ffmpeg binary (default: ffmpeg)')

    # Logging
    parser.add_argument('--logs-dir', type=str,
                        help='Also write logs to this directory')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show debug output')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function with command line support. Returns the exit code."""
    args = parse_arguments(argv)
    setup_logging(verbose=args.verbose, minimal=True)

    config_manager = ConfigManager()

    if args.create_config:
        try:
            config_manager.create_default_config(args.create_config)
        except RuntimeError as e:
            logger.error(f"Configuration error: {e}")
            return 1
        return 0

    if not args.input:
        logger.error("No input file given")
        return 1

    try:
        config = config_manager.load_config(args.config)
        config = config_manager.merge_cli_args(config, args)
        setup_logging(config=config, verbose=args.verbose)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        check_file_exists(args.input)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    normalizer = WavNormalizer(encoder=create_encoder(config))
    try:
        output_path = asyncio.run(normalizer.normalize(args.input, logger=logger))
    except NormalizationError as e:
        logger.error(str(e))
        return 1

    print(output_path)
    return 0
