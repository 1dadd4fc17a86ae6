"""Utility functions and helpers"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.errors import TOOL_TAG

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def check_file_exists(file_path) -> None:
    """
    Fail fast when the input file does not exist.

    Raises:
        FileNotFoundError: If nothing exists at `file_path`
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"{TOOL_TAG} Error: No such file: {file_path}")


def setup_logging(
    log_file: Optional[str] = None,
    logs_dir: Optional[str] = None,
    config: Optional[object] = None,
    verbose: bool = False,
    minimal: bool = False
) -> logging.Logger:
    """
    Configure console logging, plus a log file when a logs directory is known.

    Args:
        log_file: Override base filename
        logs_dir: Override logs directory path
        config: Configuration object to read output.logs_dir from
        verbose: Log at DEBUG instead of INFO
        minimal: Console only, ignore any logs directory

    Returns:
        logging.Logger: Configured logger instance

    Creates files like:
        - logs/2026-10-19/2026-10-19_normalizer.log
    """
    level = logging.DEBUG if verbose else logging.INFO
    resolved_logs_dir = None if minimal else _resolve_logs_directory(logs_dir, config)

    if resolved_logs_dir is None:
        return _configure_logger(level)

    use_date_folders = True
    if config is not None and hasattr(config, 'output'):
        use_date_folders = config.output.use_date_folders

    log_filename = _generate_log_filename(log_file, use_date_folders)
    if use_date_folders:
        today = datetime.now().strftime('%Y-%m-%d')
        log_dir = Path(resolved_logs_dir) / today
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / log_filename
    else:
        log_file_path = Path(resolved_logs_dir) / log_filename

    return _configure_logger(level, log_file_path)


def _resolve_logs_directory(explicit_logs_dir: Optional[str], config: Optional[object]) -> Optional[str]:
    """
    Resolve logs directory with proper priority order.

    Priority:
    1. Explicit logs_dir parameter (highest)
    2. config.output.logs_dir (if config provided)
    3. None, meaning console logging only
    """
    if explicit_logs_dir:
        return _validate_directory_path(explicit_logs_dir)

    if config and hasattr(config, 'output') and config.output.logs_dir:
        return _validate_directory_path(config.output.logs_dir)

    return None


def _validate_directory_path(path_str: str) -> str:
    """
    Validate and normalize directory path.

    Raises:
        ValueError: If path is invalid or inaccessible
    """
    try:
        path = Path(path_str)
        if not path.is_absolute():
            path = Path.cwd() / path

        path.mkdir(parents=True, exist_ok=True)

        # Verify write permissions
        test_file = path / '.write_test'
        test_file.touch()
        test_file.unlink()

        return str(path)

    except OSError as e:
        raise ValueError(f"Invalid logs directory '{path_str}': {e}")


def _generate_log_filename(log_file_override: Optional[str], use_date_folders: bool) -> str:
    if log_file_override:
        return log_file_override

    if use_date_folders:
        today = datetime.now().strftime('%Y-%m-%d')
        return f"{today}_normalizer.log"
    return "wav_normalizer.log"


def _configure_logger(level: int, log_file_path: Optional[Path] = None) -> logging.Logger:
    """Configure the root logger with console and optional file handlers."""
    handlers = [logging.StreamHandler()]
    if log_file_path is not None:
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True  # Replace any handlers from a previous call
    )
    return logging.getLogger('wav_normalizer')
