"""Configuration management for the WAV normalizer"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..encoding.base import BACKENDS

logger = logging.getLogger(__name__)


@dataclass
class EncoderConfig:
    """Encoder backend configuration."""
    backend: str = "ffmpeg"
    ffmpeg_path: str = "ffmpeg"


@dataclass
class OutputConfig:
    """Log output configuration."""
    logs_dir: Optional[str] = None
    use_date_folders: bool = True


@dataclass
class NormalizerConfig:
    """Complete normalizer configuration."""
    encoder: EncoderConfig = None
    output: OutputConfig = None

    def __post_init__(self):
        if self.encoder is None:
            self.encoder = EncoderConfig()
        if self.output is None:
            self.output = OutputConfig()


class ConfigManager:
    """Manage configuration loading, validation, and saving."""

    DEFAULT_CONFIG_PATHS = [
        Path("wav_normalizer.json"),
        Path.home() / ".wav_normalizer" / "config.json",
    ]

    def __init__(self):
        """Initialize configuration manager."""
        self.config = NormalizerConfig()

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> NormalizerConfig:
        """Load configuration from file with fallback to defaults."""
        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_file}")
            return self._load_from_file(config_file)

        for path in self.DEFAULT_CONFIG_PATHS:
            if path.exists():
                logger.info(f"Loading configuration from: {path}")
                return self._load_from_file(path)

        logger.debug("No configuration file found, using defaults")
        return NormalizerConfig()

    def _load_from_file(self, config_path: Path) -> NormalizerConfig:
        """Load configuration from specific file."""
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except OSError as e:
            raise RuntimeError(f"Error loading configuration from {config_path}: {e}")

        config = self._dict_to_config(data)
        logger.debug(f"Configuration loaded from {config_path}")
        return config

    def _dict_to_config(self, data: Dict[str, Any]) -> NormalizerConfig:
        """Convert dictionary to configuration objects with validation."""
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a JSON object, got {type(data).__name__}")

        config = NormalizerConfig()

        if 'encoder' in data:
            encoder_data = self._validate_section(data['encoder'], 'encoder')
            config.encoder = EncoderConfig(
                backend=self._validate_backend(encoder_data.get('backend', 'ffmpeg')),
                ffmpeg_path=encoder_data.get('ffmpeg_path', 'ffmpeg')
            )

        if 'output' in data:
            output_data = self._validate_section(data['output'], 'output')
            config.output = OutputConfig(
                logs_dir=output_data.get('logs_dir'),
                use_date_folders=bool(output_data.get('use_date_folders', True))
            )

        return config

    def _validate_section(self, value: Any, name: str) -> Dict[str, Any]:
        """Validate that a configuration section is a JSON object."""
        if not isinstance(value, dict):
            raise ValueError(f"Configuration section '{name}' must be a JSON object, got {type(value).__name__}")
        return value

    def _validate_backend(self, value: Any) -> str:
        """Validate the encoder backend name."""
        if value not in BACKENDS:
            raise ValueError(
                f"Configuration parameter 'backend' must be one of {', '.join(BACKENDS)}, got {value!r}"
            )
        return value

    def save_config(self, config: NormalizerConfig, config_path: Union[str, Path]):
        """Save configuration to file."""
        config_file = Path(config_path)

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w') as f:
                json.dump(asdict(config), f, indent=2, sort_keys=True)
        except OSError as e:
            raise RuntimeError(f"Error saving configuration to {config_file}: {e}")
        logger.info(f"Configuration saved to: {config_file}")

    def create_default_config(self, config_path: Union[str, Path]):
        """Create a default configuration file."""
        self.save_config(NormalizerConfig(), config_path)

    def merge_cli_args(self, config: NormalizerConfig, args: Any) -> NormalizerConfig:
        """Merge CLI arguments with configuration file settings (CLI takes precedence)."""
        merged_config = NormalizerConfig(
            encoder=EncoderConfig(**asdict(config.encoder)),
            output=OutputConfig(**asdict(config.output))
        )

        if getattr(args, 'backend', None) is not None:
            merged_config.encoder.backend = self._validate_backend(args.backend)
        if getattr(args, 'ffmpeg_path', None) is not None:
            merged_config.encoder.ffmpeg_path = args.ffmpeg_path
        if getattr(args, 'logs_dir', None) is not None:
            merged_config.output.logs_dir = args.logs_dir

        return merged_config
